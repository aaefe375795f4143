"""Spreadsheet rows -> `events` documents."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from ..config import EVENTS_COLLECTION
from ..models import ImportResults, RowValidationError
from ..utils.datetime_utils import get_current_timestamp, to_epoch_ms
from ..utils.spreadsheet import Row, optional_number, pick, split_list
from ..workflows.bulk_import import run_import

DEFAULT_CATEGORY = "General"


def _is_active(row: Row) -> bool:
    if "Is Active" not in row:
        return True
    value = row["Is Active"]
    return value is True or str(value).lower() == "true"


def build_event_document(row: Row, user_id: Optional[str]) -> Dict[str, Any]:
    """Map one spreadsheet row onto an event document.

    Raises
    ------
    RowValidationError
        When a required column is blank or a typed column cannot be parsed.
    """
    title = pick(row, "Title", "title", "Event Title", default="")
    description = pick(row, "Description", "description", default="")
    location = pick(row, "Location", "location", "Venue", default="")
    event_date = pick(row, "Event Date", "eventDate", "Date", default="")

    if not title or not description or not location or not event_date:
        raise RowValidationError(
            "Missing required fields (Title, Description, Location, Event Date)"
        )

    return {
        "title": str(title).strip(),
        "description": str(description).strip(),
        "location": str(location).strip(),
        "city": pick(row, "City", "city"),
        "state": pick(row, "State", "state"),
        "eventDate": to_epoch_ms(event_date),
        "startTime": pick(row, "Start Time", "startTime", "StartTime"),
        "endTime": pick(row, "End Time", "endTime", "EndTime"),
        "category": pick(row, "Category", "category", default=DEFAULT_CATEGORY),
        "price": optional_number(row, "Price", "price"),
        "maxCapacity": optional_number(row, "Max Capacity", "maxCapacity", "MaxCapacity"),
        "imageUrl": pick(row, "Image URL", "imageUrl", "ImageUrl"),
        "organizer": pick(row, "Organizer", "organizer"),
        "contactEmail": pick(row, "Contact Email", "contactEmail", "ContactEmail"),
        "contactPhone": pick(row, "Contact Phone", "contactPhone", "ContactPhone"),
        "mapsUrl": pick(row, "Maps URL", "mapsUrl", "MapsUrl"),
        "website": pick(row, "Website", "website"),
        "tags": split_list(pick(row, "Tags", "tags")),
        "isActive": _is_active(row),
        "createdAt": get_current_timestamp(),
        "createdBy": user_id,
    }


def import_events(rows: Iterable[Row], user_id: Optional[str]) -> ImportResults:
    """Insert every row of an events sheet into the `events` collection."""
    return run_import(rows, build_event_document, EVENTS_COLLECTION, user_id)

__all__ = ["build_event_document", "import_events"]
