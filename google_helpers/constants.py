"""
Constants and configuration settings for google-helpers.
Values are read from the environment; a local .env file is loaded first.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# OAuth scopes requested when credentials come from a service-account JSON string
SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
STORAGE_SCOPE = "https://www.googleapis.com/auth/devstorage.read_write"
SCOPES = [SHEETS_SCOPE, STORAGE_SCOPE]

# Sheets API
SHEETS_API_NAME = "sheets"
SHEETS_API_VERSION = "v4"
VALUE_INPUT_OPTIONS = ("RAW", "USER_ENTERED")
DEFAULT_VALUE_INPUT_OPTION = "USER_ENTERED"
INSERT_DATA_OPTION = "INSERT_ROWS"

# Environment variable names
SERVICE_ACCOUNT_ENV = "SERVICE_ACCOUNT_CREDENTIALS"
PROJECT_ENV = "GOOGLE_CLOUD_PROJECT"
VALUE_INPUT_OPTION_ENV = "SHEETS_VALUE_INPUT_OPTION"
LOG_LEVEL_ENV = "GOOGLE_HELPERS_LOG_LEVEL"
LOG_FORMAT_ENV = "GOOGLE_HELPERS_LOG_FORMAT"

LOG_FORMATS = ("json", "text")


def get_value_input_option() -> str:
    """Return the configured valueInputOption, falling back to USER_ENTERED."""
    option = os.getenv(VALUE_INPUT_OPTION_ENV, DEFAULT_VALUE_INPUT_OPTION).strip().upper()
    if option not in VALUE_INPUT_OPTIONS:
        return DEFAULT_VALUE_INPUT_OPTION
    return option


def get_project():
    """Project id for the storage client, or None to let the SDK infer it."""
    return os.getenv(PROJECT_ENV) or None


def get_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()


def get_log_format() -> str:
    log_format = os.getenv(LOG_FORMAT_ENV, "json").lower()
    return log_format if log_format in LOG_FORMATS else "json"
