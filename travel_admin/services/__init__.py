"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from travel_admin.services import validate_places_in_india` without
having to know which underlying module provides the symbol.
"""

from .place_validator import is_place_in_india, validate_places_in_india  # noqa: F401
from .event_import import build_event_document, import_events  # noqa: F401
from .hotel_import import build_hotel_document, import_hotels  # noqa: F401
from .templates import build_events_template, build_hotels_template  # noqa: F401

__all__ = [
    "is_place_in_india",
    "validate_places_in_india",
    "build_event_document",
    "import_events",
    "build_hotel_document",
    "import_hotels",
    "build_events_template",
    "build_hotels_template",
]
