"""
Shared fixtures: substitute the provider clients with mocks so no request
leaves the process.
"""

import json
from unittest.mock import MagicMock, patch

import httplib2
import pytest
from googleapiclient.errors import HttpError

from google_helpers import clients


@pytest.fixture(autouse=True)
def fresh_clients():
    """Every test starts without cached provider clients."""
    clients.reset_clients()
    yield
    clients.reset_clients()


@pytest.fixture
def storage_client():
    """Mock storage.Client as seen by the bucket helpers."""
    client = MagicMock(name="storage.Client")
    with patch("google_helpers.gcs_utils.get_storage_client", return_value=client):
        yield client


@pytest.fixture
def blob(storage_client):
    """The blob returned by client.bucket(...).blob(...)."""
    return storage_client.bucket.return_value.blob.return_value


@pytest.fixture
def sheets_service():
    """Mock Sheets v4 discovery service as seen by the sheet helpers."""
    service = MagicMock(name="sheets_service")
    with patch("google_helpers.sheets_utils.get_sheets_service", return_value=service):
        yield service


@pytest.fixture
def values_api(sheets_service):
    """service.spreadsheets().values()"""
    return sheets_service.spreadsheets.return_value.values.return_value


@pytest.fixture
def http_error():
    """Factory building a googleapiclient HttpError with a JSON error body."""
    def _make(status: int, message: str) -> HttpError:
        resp = httplib2.Response({"status": status})
        content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
        return HttpError(resp, content, uri="https://sheets.googleapis.com/v4/spreadsheets/x")
    return _make


