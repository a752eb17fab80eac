# Google Sheets and Cloud Storage helpers

# Sheets
from .sheets_utils import (
    add_sheet_rows,
    overwrite_sheet_data,
    get_sheet_data
)

# GCS
from .gcs_utils import (
    to_bucket,
    delete_from_bucket,
    in_bucket,
    download_from_bucket,
    files_in_bucket
)

__all__ = [
    'add_sheet_rows',
    'delete_from_bucket',
    'download_from_bucket',
    'files_in_bucket',
    'get_sheet_data',
    'in_bucket',
    'overwrite_sheet_data',
    'to_bucket',
]
