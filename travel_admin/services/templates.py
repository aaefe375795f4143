"""Downloadable example workbooks for the bulk import endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from ..utils.spreadsheet import write_workbook

EVENTS_TEMPLATE_FILENAME = "events-template.xlsx"
HOTELS_TEMPLATE_FILENAME = "hotels-template.xlsx"

EVENTS_TEMPLATE_ROWS: List[Dict[str, Any]] = [
    {
        "Title": "Example Event Name",
        "Description": "This is a sample event description",
        "Location": "Event Venue Address",
        "City": "Mumbai",
        "State": "Maharashtra",
        "Event Date": "2024-12-25",
        "Start Time": "10:00",
        "End Time": "18:00",
        "Category": "Cultural Festival",
        "Price": "500",
        "Max Capacity": "1000",
        "Image URL": "https://example.com/image.jpg",
        "Organizer": "Event Organizer Name",
        "Contact Email": "contact@example.com",
        "Contact Phone": "+91 1234567890",
        "Maps URL": "https://maps.google.com/...",
        "Website": "https://example.com",
        "Tags": "music, outdoor, family-friendly",
        "Is Active": "true",
    }
]

HOTELS_TEMPLATE_ROWS: List[Dict[str, Any]] = [
    {
        "Name": "Example Hotel Name",
        "City": "Mumbai",
        "State": "Maharashtra",
        "Address": "Hotel Address, Street, Area",
        "Price Per Night": "3000",
        "Rating": "4",
        "Amenities": "WiFi, Pool, Restaurant, Parking",
        "Maps URL": "https://maps.google.com/...",
        "Website": "https://example.com",
        "Contact": "+91 1234567890",
    }
]


def build_events_template() -> bytes:
    return write_workbook(EVENTS_TEMPLATE_ROWS, sheet_name="Events")


def build_hotels_template() -> bytes:
    return write_workbook(HOTELS_TEMPLATE_ROWS, sheet_name="Hotels")

__all__ = [
    "EVENTS_TEMPLATE_FILENAME",
    "HOTELS_TEMPLATE_FILENAME",
    "build_events_template",
    "build_hotels_template",
]
