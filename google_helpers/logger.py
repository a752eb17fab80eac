"""
Logging utilities for google-helpers.
Outputs to stdout so Google Cloud Logging picks the lines up; JSON lines by
default, a plain human-readable format when GOOGLE_HELPERS_LOG_FORMAT=text.
"""

import logging
import sys
import json
from typing import Optional
from datetime import datetime

from .constants import get_log_level, get_log_format

PACKAGE_LOGGER_NAME = "google_helpers"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def json_serializer(obj):
    """
    Fallback JSON serializer for values the json module can't handle.

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable version of the object
    """
    if isinstance(obj, bytes):
        return f"<{len(obj)} bytes>"
    elif hasattr(obj, 'isoformat'):  # datetime objects
        return obj.isoformat()
    elif hasattr(obj, '__dict__'):
        return obj.__dict__
    else:
        return str(obj)


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging compatible with Google Cloud Logging.
    Produces one JSON object per line.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "severity": record.levelname,  # 'severity' is the key Cloud Logging reads
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, 'extra_json') and isinstance(record.extra_json, dict):
            log_entry.update(record.extra_json)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
            log_entry["severity"] = "ERROR"

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'), default=json_serializer)


def get_logger(log_level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    Get the package logger with a stdout handler attached.

    Args:
        log_level: Logging level as string (default: GOOGLE_HELPERS_LOG_LEVEL or 'INFO')
        log_format: 'json' or 'text' (default: GOOGLE_HELPERS_LOG_FORMAT or 'json')

    Returns:
        The configured 'google_helpers' logger; module loggers under it propagate here
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    # Don't add handlers if logger already has them
    if logger.handlers:
        return logger

    numeric_level = getattr(logging, (log_level or get_log_level()).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        # Names like BASIC_FORMAT exist on the logging module but are not levels
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    if (log_format or get_log_format()) == "text":
        console_handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        console_handler.setFormatter(JSONFormatter())

    logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    return logger


def setup_root_logger(level: int = logging.WARNING) -> None:
    """
    Setup root logger to suppress verbose output from the Google SDKs.

    Args:
        level: Logging level for root logger (default: WARNING)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    noisy_loggers = [
        'urllib3.connectionpool',
        'googleapiclient.discovery',
        'googleapiclient.discovery_cache',
        'google.auth',
        'google.auth.transport.requests',
    ]

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
