"""Utility functions for working with dates and times."""

from __future__ import annotations

import time
from datetime import date, datetime
from typing import Any

import pandas as pd

from ..models import RowValidationError

__all__ = [
    "get_current_timestamp",
    "to_epoch_ms",
]

# Day 25569 of the 1900 date system is 1970-01-01
EXCEL_EPOCH_OFFSET_DAYS = 25569
MS_PER_DAY = 86400 * 1000


def get_current_timestamp() -> int:
    """Return the current time as integer milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def to_epoch_ms(value: Any) -> int:
    """Convert a spreadsheet date cell to milliseconds since the Unix epoch.

    Accepts datetime/date objects, date strings pandas can parse, and Excel
    serial day numbers. Naive values are taken as UTC.

    Raises
    ------
    RowValidationError
        If *value* cannot be read as a date.
    """
    if isinstance(value, bool):
        raise RowValidationError("Invalid date format")

    if isinstance(value, (int, float)):
        return int(round((value - EXCEL_EPOCH_OFFSET_DAYS) * MS_PER_DAY))

    try:
        if isinstance(value, (datetime, date)):
            ts = pd.Timestamp(value)
        else:
            ts = pd.to_datetime(str(value).strip())
    except (ValueError, TypeError, OverflowError) as exc:
        raise RowValidationError("Invalid date format") from exc

    if pd.isna(ts):
        raise RowValidationError("Invalid date format")
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return int(ts.value // 1_000_000)
