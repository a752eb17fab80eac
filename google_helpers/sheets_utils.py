"""
Google Sheets helper functions built on the Sheets v4 values API.
Each helper makes one values.* request; HttpError from the API propagates
unchanged after being logged.
"""

import logging
from typing import Any, Dict, List, Optional

from googleapiclient.errors import HttpError

from .clients import get_sheets_service
from .constants import INSERT_DATA_OPTION, get_value_input_option

logger = logging.getLogger(__name__)


def _values():
    return get_sheets_service().spreadsheets().values()


def get_sheet_data(
    spreadsheet_id: str,
    range_name: str,
    value_render_option: Optional[str] = None
) -> List[List[Any]]:
    """
    Read the current values of a sheet range.

    Args:
        spreadsheet_id: Google Sheets spreadsheet ID
        range_name: A1 range or tab name, e.g. 'Sheet1!A1:D' or 'Sheet1'
        value_render_option: FORMATTED_VALUE (API default), UNFORMATTED_VALUE or FORMULA

    Returns:
        List of rows; empty when the range holds no values
    """
    params = {"spreadsheetId": spreadsheet_id, "range": range_name}
    if value_render_option:
        params["valueRenderOption"] = value_render_option

    try:
        result = _values().get(**params).execute()
    except HttpError as e:
        logger.error(f"Sheets API error {e.resp.status}: failed to read {range_name} from spreadsheet {spreadsheet_id}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to read {range_name} from spreadsheet {spreadsheet_id}: {str(e)}")
        raise

    # The API omits 'values' entirely for an empty range
    rows = result.get("values", [])
    logger.info(f"Read {len(rows)} rows from {spreadsheet_id} '{range_name}'")
    return rows


def add_sheet_rows(
    spreadsheet_id: str,
    range_name: str,
    rows: List[List[Any]],
    value_input_option: Optional[str] = None
) -> Dict[str, Any]:
    """
    Append rows after the last row of data in a range.

    Args:
        spreadsheet_id: Target spreadsheet ID
        range_name: Range whose table the rows are appended to (usually the tab name)
        rows: List of rows to append
        value_input_option: RAW or USER_ENTERED (default: SHEETS_VALUE_INPUT_OPTION)

    Returns:
        API response dictionary (contains 'updates')
    """
    body = {"values": rows}

    try:
        response = _values().append(
            spreadsheetId=spreadsheet_id,
            range=range_name,
            valueInputOption=value_input_option or get_value_input_option(),
            insertDataOption=INSERT_DATA_OPTION,
            body=body,
        ).execute()
    except HttpError as e:
        logger.error(f"Sheets API error {e.resp.status}: failed to append {len(rows)} rows to spreadsheet {spreadsheet_id}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to append {len(rows)} rows to spreadsheet {spreadsheet_id}: {str(e)}")
        raise

    logger.info(f"Appended {len(rows)} rows to {spreadsheet_id} '{range_name}'")
    return response


def overwrite_sheet_data(
    spreadsheet_id: str,
    range_name: str,
    rows: List[List[Any]],
    value_input_option: Optional[str] = None
) -> Dict[str, Any]:
    """
    Write rows over a range, replacing only the cells the rows cover; cells of a
    bounded range past the written rows keep their old values.

    One values.update request is made, the range is not cleared first.

    Returns:
        API response dictionary (contains 'updatedRange', 'updatedCells')
    """
    body = {"values": rows}

    try:
        response = _values().update(
            spreadsheetId=spreadsheet_id,
            range=range_name,
            valueInputOption=value_input_option or get_value_input_option(),
            body=body,
        ).execute()
    except HttpError as e:
        logger.error(f"Sheets API error {e.resp.status}: failed to overwrite {range_name} in spreadsheet {spreadsheet_id}: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Failed to overwrite {range_name} in spreadsheet {spreadsheet_id}: {str(e)}")
        raise

    logger.info(f"Wrote {len(rows)} rows to {spreadsheet_id} '{range_name}'")
    return response
