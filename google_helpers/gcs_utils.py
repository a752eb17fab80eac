"""
GCS (Google Cloud Storage) helper functions.
Each helper makes one call against a bucket object; provider errors are
logged and re-raised unchanged.
"""

import logging
from pathlib import Path
from typing import Optional, List, Union, BinaryIO

from google.cloud.exceptions import NotFound, Forbidden

from .clients import get_storage_client

logger = logging.getLogger(__name__)

UploadSource = Union[str, Path, bytes, bytearray, BinaryIO]


def _blob(bucket_name: str, blob_name: str):
    # Builds a local reference only; no request is made here
    return get_storage_client().bucket(bucket_name).blob(blob_name)


def _rewind(source) -> None:
    if hasattr(source, "seek") and getattr(source, "seekable", lambda: True)():
        source.seek(0)


def to_bucket(
    bucket_name: str,
    blob_name: str,
    source: UploadSource,
    content_type: Optional[str] = None
) -> None:
    """
    Upload a local file, bytes or a file-like object to Google Cloud Storage.

    Args:
        bucket_name: Name of the GCS bucket
        blob_name: Target path in the bucket (e.g., "exports/2024/report.csv")
        source: Local file path (str or Path), raw bytes, or a binary file-like object
        content_type: Optional MIME type stored on the object

    Raises:
        google.cloud.exceptions.Forbidden: Missing write permission on the bucket
        google.api_core.exceptions.GoogleAPICallError: Any other provider failure (quota, network)
    """
    uri = f"gs://{bucket_name}/{blob_name}"

    try:
        blob = _blob(bucket_name, blob_name)
        if isinstance(source, (str, Path)):
            blob.upload_from_filename(str(source), content_type=content_type)
        elif isinstance(source, (bytes, bytearray)):
            blob.upload_from_string(bytes(source), content_type=content_type)
        else:
            _rewind(source)  # Reset pointer to beginning
            blob.upload_from_file(source, content_type=content_type)
    except Forbidden as e:
        logger.error(f"Permission denied uploading to {uri}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to upload to {uri}: {str(e)}")
        raise

    logger.info(f"Successfully uploaded to {uri}")


def delete_from_bucket(bucket_name: str, blob_name: str) -> None:
    """
    Delete an object from Google Cloud Storage.

    Raises:
        google.cloud.exceptions.NotFound: The object does not exist
        google.cloud.exceptions.Forbidden: Missing delete permission
    """
    uri = f"gs://{bucket_name}/{blob_name}"

    try:
        _blob(bucket_name, blob_name).delete()
    except NotFound as e:
        logger.error(f"File not found for deletion: {uri}: {str(e)}")
        raise
    except Forbidden as e:
        logger.error(f"Permission denied deleting {uri}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to delete {uri}: {str(e)}")
        raise

    logger.info(f"Successfully deleted {uri}")


def in_bucket(bucket_name: str, blob_name: str) -> bool:
    """Check whether an object exists in Google Cloud Storage."""
    uri = f"gs://{bucket_name}/{blob_name}"

    try:
        exists = _blob(bucket_name, blob_name).exists()
    except Forbidden as e:
        logger.error(f"Permission denied checking {uri}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to check existence of {uri}: {str(e)}")
        raise

    logger.debug(f"File existence check for {uri}: {exists}")
    return exists


def download_from_bucket(
    bucket_name: str,
    blob_name: str,
    destination_file_path: Optional[Union[str, Path]] = None
) -> Optional[bytes]:
    """
    Download an object from Google Cloud Storage.

    Args:
        bucket_name: Name of the GCS bucket
        blob_name: Path to the object in the bucket
        destination_file_path: If given, write the object to this local path instead
            of returning its content

    Returns:
        Object content as bytes, or None when written to destination_file_path

    Raises:
        google.cloud.exceptions.NotFound: The object does not exist
        google.cloud.exceptions.Forbidden: Missing read permission
    """
    uri = f"gs://{bucket_name}/{blob_name}"

    try:
        blob = _blob(bucket_name, blob_name)
        if destination_file_path is not None:
            blob.download_to_filename(str(destination_file_path))
            logger.info(f"Successfully downloaded {uri} to {destination_file_path}")
            return None

        content = blob.download_as_bytes()
    except NotFound as e:
        logger.error(f"File not found: {uri}: {str(e)}")
        raise
    except Forbidden as e:
        logger.error(f"Permission denied downloading {uri}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to download {uri}: {str(e)}")
        raise

    logger.info(f"Successfully downloaded {uri} ({len(content)} bytes)")
    return content


def files_in_bucket(bucket_name: str, prefix: Optional[str] = None) -> List[str]:
    """
    List object names in a bucket, optionally only those under a prefix.

    Args:
        bucket_name: Name of the GCS bucket
        prefix: Prefix to filter objects (simulates directory structure)

    Returns:
        List of blob names (full paths)
    """
    try:
        blob_names = [blob.name for blob in get_storage_client().list_blobs(bucket_name, prefix=prefix)]
    except Forbidden as e:
        logger.error(f"Permission denied listing gs://{bucket_name} with prefix '{prefix}': {str(e)}")
        raise
    except NotFound as e:
        logger.error(f"Bucket not found: gs://{bucket_name}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to list files in gs://{bucket_name} with prefix '{prefix}': {str(e)}")
        raise

    logger.info(f"Listed {len(blob_names)} files in gs://{bucket_name} with prefix '{prefix}'")
    return blob_names
