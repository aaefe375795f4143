"""Reading and writing single-sheet Excel workbooks with pandas."""

from __future__ import annotations

import io
import logging
from datetime import time as dt_time
from typing import Any, Dict, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from ..models import RowValidationError

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

Row = Dict[str, Any]


def _clean_cell(value: Any) -> Any:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, dt_time):
        return value.strftime("%H:%M")
    return value


def read_first_sheet(data: bytes) -> List[Row]:
    """Parse the first worksheet of *data* into one dict per row.

    Keys are the header cells of the first row. Blank cells are left out of
    the row dict entirely.
    """
    frame = pd.read_excel(io.BytesIO(data), sheet_name=0, engine="openpyxl")
    rows: List[Row] = []
    for record in frame.to_dict(orient="records"):
        row: Row = {}
        for column, value in record.items():
            if pd.isna(value):
                continue
            row[str(column).strip()] = _clean_cell(value)
        rows.append(row)
    logger.info("Read %d rows from uploaded workbook", len(rows))
    return rows


def write_workbook(rows: Iterable[Mapping[str, Any]], sheet_name: str) -> bytes:
    """Serialise *rows* into an ``.xlsx`` workbook with a single sheet."""
    frame = pd.DataFrame(list(rows))
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue()


def pick(row: Mapping[str, Any], *columns: str, default: Any = None) -> Any:
    """Return the first truthy value among *columns*, else *default*."""
    for column in columns:
        value = row.get(column)
        if value:
            return value
    return default


def to_number(value: Any, column: str) -> float | int:
    """Coerce a numeric cell, keeping whole numbers as ``int``."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise RowValidationError(f"Invalid number for {column}: {value!r}")
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except ValueError as exc:
        raise RowValidationError(f"Invalid number for {column}: {value!r}") from exc
    if number != number:  # NaN
        raise RowValidationError(f"Invalid number for {column}: {value!r}")
    return int(number) if number.is_integer() else number


def optional_number(row: Mapping[str, Any], *columns: str) -> Optional[float | int]:
    """``to_number`` over the first truthy column, or ``None`` when all are blank."""
    value = pick(row, *columns)
    if not value:
        return None
    return to_number(value, columns[0])


def split_list(value: Any) -> List[str]:
    """Split a comma separated cell into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in str(value).split(",") if item.strip()]

__all__ = [
    "XLSX_MEDIA_TYPE",
    "read_first_sheet",
    "write_workbook",
    "pick",
    "to_number",
    "optional_number",
    "split_list",
]
