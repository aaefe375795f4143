"""Convenience re-exports for singleton SDK accessors."""

from .mongodb_client import get_mongo_client, get_database  # noqa: F401
from .gemini_client import get_gemini_client, get_generative_model  # noqa: F401
from .wikipedia_client import get_wikipedia_session  # noqa: F401

__all__ = [
    "get_mongo_client",
    "get_database",
    "get_gemini_client",
    "get_generative_model",
    "get_wikipedia_session",
]
