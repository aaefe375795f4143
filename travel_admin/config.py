"""Centralised configuration for travel_admin.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.
"""

from __future__ import annotations

import os
from typing import FrozenSet

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
MONGODB_URI: str | None = os.getenv("MONGODB_URI")
GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY")
JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "dev-secret-key-change-in-production")

# ---------------------------------------------------------------------------
# Document database
# ---------------------------------------------------------------------------
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "travel")
EVENTS_COLLECTION: str = "events"
HOTELS_COLLECTION: str = "partner_hotels"

# ---------------------------------------------------------------------------
# Generative AI (Gemini through its OpenAI-compatible endpoint)
# ---------------------------------------------------------------------------
GEMINI_MODEL: str | None = os.getenv("GEMINI_MODEL")
GEMINI_DEFAULT_MODEL: str = "gemini-1.5-flash"
GEMINI_BASE_URL: str = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
)

# ---------------------------------------------------------------------------
# Wikipedia (place validation)
# ---------------------------------------------------------------------------
WIKIPEDIA_API_URL: str = os.getenv("WIKIPEDIA_API_URL", "https://en.wikipedia.org/w/api.php")
WIKIPEDIA_USER_AGENT: str = os.getenv(
    "WIKIPEDIA_USER_AGENT", "travel-admin/0.1 (place validation)"
)
PLACE_VALIDATION_MAX_WORKERS: int = int(os.getenv("PLACE_VALIDATION_MAX_WORKERS", "8"))

# ---------------------------------------------------------------------------
# Admin access
# ---------------------------------------------------------------------------
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ADMIN_EMAILS: FrozenSet[str] = frozenset(
    email.strip().lower()
    for email in os.getenv("ADMIN_EMAILS", "").split(",")
    if email.strip()
)

# ---------------------------------------------------------------------------
# HTTP server
# ---------------------------------------------------------------------------
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "MONGODB_URI",
    "GEMINI_API_KEY",
    "JWT_SECRET_KEY",
    # database
    "MONGODB_DATABASE",
    "EVENTS_COLLECTION",
    "HOTELS_COLLECTION",
    # gemini
    "GEMINI_MODEL",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_BASE_URL",
    # wikipedia
    "WIKIPEDIA_API_URL",
    "WIKIPEDIA_USER_AGENT",
    "PLACE_VALIDATION_MAX_WORKERS",
    # admin
    "JWT_ALGORITHM",
    "ADMIN_EMAILS",
    # server
    "API_HOST",
    "API_PORT",
]
