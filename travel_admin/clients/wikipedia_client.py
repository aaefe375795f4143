"""Shared HTTP session for Wikipedia API calls."""

from __future__ import annotations

import threading

import requests

from ..config import WIKIPEDIA_USER_AGENT

_session: requests.Session | None = None
# first use happens inside the place validation thread pool
_session_lock = threading.Lock()


def get_wikipedia_session() -> requests.Session:
    """Return a singleton :class:`requests.Session` configured for Wikipedia."""
    global _session
    if _session is None:
        with _session_lock:
            if _session is None:
                session = requests.Session()
                # Wikimedia rejects anonymous clients without a descriptive agent
                session.headers.update({"User-Agent": WIKIPEDIA_USER_AGENT})
                _session = session
    return _session

__all__ = ["get_wikipedia_session"]
