"""Top-level package for the travel-admin project.

Exposes the place validation helpers so callers can do
`from travel_admin import validate_places_in_india`. The FastAPI application
lives in :mod:`travel_admin.api` and runs with `python -m travel_admin`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("travel-admin")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .services.place_validator import is_place_in_india, validate_places_in_india  # noqa: E402

__all__ = ["is_place_in_india", "validate_places_in_india", "__version__"]
