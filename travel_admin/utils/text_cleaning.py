"""Small text helpers shared by the place classifier."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_SPACE_RE = re.compile(r"\s+")


def strip_html(text: str) -> str:
    """Remove markup such as ``<span class="searchmatch">`` from search snippets."""
    if not text:
        return ""
    cleaned = BeautifulSoup(text, "html.parser").get_text()
    return _SPACE_RE.sub(" ", cleaned).strip()


def normalize_place_name(name: str) -> str:
    return name.strip().lower()

__all__ = ["strip_html", "normalize_place_name"]
