"""Spreadsheet rows -> `partner_hotels` documents."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from ..config import HOTELS_COLLECTION
from ..models import ImportResults, RowValidationError
from ..utils.datetime_utils import get_current_timestamp
from ..utils.spreadsheet import Row, optional_number, pick, split_list
from ..workflows.bulk_import import run_import


def build_hotel_document(row: Row, user_id: Optional[str]) -> Dict[str, Any]:
    """Map one spreadsheet row onto a partner hotel document."""
    name = pick(row, "Name", "name", "Hotel Name", default="")
    city = pick(row, "City", "city", default="")

    if not name or not city:
        raise RowValidationError("Missing required fields (Name, City)")

    city = str(city).strip()
    return {
        "name": str(name).strip(),
        "city": city,
        "cityLower": city.lower(),
        "state": pick(row, "State", "state"),
        "address": pick(row, "Address", "address"),
        # filled in later by geocoding
        "location": {"latitude": None, "longitude": None},
        "pricePerNightINR": optional_number(
            row, "Price Per Night", "pricePerNight", "PricePerNight"
        ),
        "rating": optional_number(row, "Rating", "rating"),
        "amenities": split_list(pick(row, "Amenities", "amenities")),
        "mapsUrl": pick(row, "Maps URL", "mapsUrl", "MapsUrl"),
        "website": pick(row, "Website", "website"),
        "contact": pick(row, "Contact", "contact"),
        "createdAt": get_current_timestamp(),
        "createdBy": user_id,
    }


def import_hotels(rows: Iterable[Row], user_id: Optional[str]) -> ImportResults:
    """Insert every row of a hotels sheet into the `partner_hotels` collection."""
    return run_import(rows, build_hotel_document, HOTELS_COLLECTION, user_id)

__all__ = ["build_hotel_document", "import_hotels"]
