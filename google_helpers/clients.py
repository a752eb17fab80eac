"""
Provider client construction for the sheet and bucket helpers.

Clients are built lazily on first use and then reused. Credentials come from
SERVICE_ACCOUNT_CREDENTIALS (a service-account JSON string) when set, otherwise
Application Default Credentials are used.
"""

import os
import json
import logging

from google.cloud import storage
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from .constants import (
    SCOPES,
    SERVICE_ACCOUNT_ENV,
    SHEETS_API_NAME,
    SHEETS_API_VERSION,
    get_project,
)

logger = logging.getLogger(__name__)

_storage_client = None
_sheets_service = None


def _get_credentials():
    """
    Load service-account credentials from the environment.

    Returns:
        Credentials, or None when the SDK should resolve Application Default Credentials
    """
    json_env = os.getenv(SERVICE_ACCOUNT_ENV)
    if not json_env:
        return None

    # A malformed value is a configuration error; let it surface
    info = json.loads(json_env)
    logger.debug(f"Using service account from {SERVICE_ACCOUNT_ENV}: {info.get('client_email')}")
    return Credentials.from_service_account_info(info, scopes=SCOPES)


def get_storage_client() -> storage.Client:
    """Lazy-load the Cloud Storage client."""
    global _storage_client
    if _storage_client is None:
        credentials = _get_credentials()
        project = get_project()
        if credentials is not None:
            _storage_client = storage.Client(project=project or credentials.project_id,
                                             credentials=credentials)
        else:
            _storage_client = storage.Client(project=project)
        logger.info("GCS client initialized successfully")
    return _storage_client


def get_sheets_service():
    """Lazy-load the Google Sheets v4 API service."""
    global _sheets_service
    if _sheets_service is None:
        _sheets_service = build(
            SHEETS_API_NAME,
            SHEETS_API_VERSION,
            credentials=_get_credentials(),
            cache_discovery=False,
        )
        logger.info("Sheets service initialized successfully")
    return _sheets_service


def reset_clients() -> None:
    """Drop cached clients so the next call rebuilds them."""
    global _storage_client, _sheets_service
    _storage_client = None
    _sheets_service = None
