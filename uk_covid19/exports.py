"""
Tabulation and export of API payloads
Turns the "data" rows of a response into a DataFrame and writes CSV or Excel
"""

import io
import re
from typing import Any

import pandas as pd

from .errors import DecodeError

EXCEL_SHEET_NAME_LIMIT = 31
INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
FORMULA_PREFIXES = ("=", "+", "-", "@")


def results_to_dataframe(payload: Any, fill_na_value: str = '') -> pd.DataFrame:
    """
    Build a DataFrame from the rows of an API payload

    Args:
        payload: Decoded JSON response
        fill_na_value: Value to use for missing cells

    Returns:
        pd.DataFrame: One row per record, empty when there is no data
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    rows = payload.get('data')
    if rows is None:
        return pd.DataFrame()
    if not isinstance(rows, list):
        raise DecodeError(f"Expected 'data' to be a list, got {type(rows).__name__}")

    df = pd.DataFrame(rows)
    return df.fillna(fill_na_value)


def excel_sheet_name(name: str, fallback: str = "data") -> str:
    """
    Make a worksheet name Excel will accept

    Args:
        name: Requested name, typically an area name typed by a user
        fallback: Used when nothing is left after cleaning

    Returns:
        str: Name without the characters Excel forbids, at most 31 characters long
    """
    cleaned = INVALID_SHEET_CHARS.sub("", name or "")[:EXCEL_SHEET_NAME_LIMIT].strip("' ")
    return cleaned or fallback


def _escape_formula_cells(df: pd.DataFrame) -> pd.DataFrame:
    # Text starting with = + - @ is written as a literal, not evaluated
    def escape(value: Any) -> Any:
        if isinstance(value, str) and value.startswith(FORMULA_PREFIXES):
            return "'" + value
        return value

    escaped = df.copy()
    for column in escaped.columns:
        escaped[column] = escaped[column].map(escape)
    return escaped


def dataframe_to_excel_bytes(df: pd.DataFrame, sheet_name: str = "data") -> bytes:
    """
    Write a DataFrame to an in-memory Excel workbook

    Text cells that Excel would read as formulas are escaped and the sheet
    name is cleaned with excel_sheet_name.

    Args:
        df: DataFrame to write
        sheet_name: Requested worksheet name

    Returns:
        bytes: xlsx file content
    """
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        _escape_formula_cells(df).to_excel(writer, sheet_name=excel_sheet_name(sheet_name), index=False)
    return buffer.getvalue()


def dataframe_to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode('utf-8')
