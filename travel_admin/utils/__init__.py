"""Utility functions for the travel_admin project.

Re-exports the spreadsheet, text-cleaning and datetime helpers so that imports
like `from ..utils import pick` or `from ..utils import to_epoch_ms` work as
expected.
"""

from .text_cleaning import strip_html, normalize_place_name  # noqa: F401
from .datetime_utils import get_current_timestamp, to_epoch_ms  # noqa: F401
from .spreadsheet import (  # noqa: F401
    XLSX_MEDIA_TYPE,
    optional_number,
    pick,
    read_first_sheet,
    split_list,
    to_number,
    write_workbook,
)

__all__ = [
    "strip_html",
    "normalize_place_name",
    "get_current_timestamp",
    "to_epoch_ms",
    "XLSX_MEDIA_TYPE",
    "optional_number",
    "pick",
    "read_first_sheet",
    "split_list",
    "to_number",
    "write_workbook",
]
