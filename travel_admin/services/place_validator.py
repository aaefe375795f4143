"""Check whether free-text place names lie inside India using Wikipedia.

The classifier is a chain of heuristics over the Wikipedia search and page
APIs. It never raises: any failure or inconclusive evidence is a rejection,
so a false negative is always preferred to a false positive.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..clients.wikipedia_client import get_wikipedia_session
from ..config import PLACE_VALIDATION_MAX_WORKERS, WIKIPEDIA_API_URL
from ..models import PlaceValidationResult
from ..utils.text_cleaning import normalize_place_name, strip_html

logger = logging.getLogger(__name__)

NON_INDIA_COUNTRIES: Sequence[str] = (
    "usa", "united states", "united states of america", "u.s.", "u.s.a.",
    "uk", "united kingdom", "england", "scotland", "wales", "britain", "great britain",
    "canada",
    "australia",
    "new zealand",
    "france",
    "germany",
    "italy",
    "spain",
    "portugal",
    "netherlands", "holland",
    "belgium",
    "switzerland",
    "austria",
    "greece",
    "turkey",
    "russia",
    "china",
    "japan",
    "south korea", "korea",
    "north korea",
    "thailand",
    "singapore",
    "malaysia",
    "indonesia",
    "philippines",
    "vietnam",
    "cambodia",
    "laos",
    "myanmar", "burma",
    "nepal",
    "bangladesh",
    "pakistan",
    "sri lanka",
    "maldives",
    "bhutan",
    "afghanistan",
    "iran",
    "iraq",
    "saudi arabia",
    "uae", "united arab emirates",
    "qatar",
    "kuwait",
    "israel",
    "egypt",
    "south africa",
    "brazil",
    "argentina",
    "mexico",
    "chile",
    "peru",
    "colombia",
)

COUNTRY_NAME = "india"
DEMONYM = "indian"

DIASPORA_QUALIFIERS: Sequence[str] = (
    "indian american",
    "indian british",
    "indian canadian",
    "indian australian",
    "indian origin",
)

INDIA_INDICATORS: Sequence[str] = (
    COUNTRY_NAME,
    DEMONYM,
    "states of india",
    "union territory",
    "district in",
    "city in",
    "town in",
    "village in",
    "municipality in",
    "located in india",
    "situated in india",
    "in the state of",
    "in the union territory of",
)

# (min, max) in decimal degrees
INDIA_LATITUDE_RANGE = (6.5, 37.1)
INDIA_LONGITUDE_RANGE = (68.1, 97.4)

SEARCH_MATCH_PREFIXES = (
    "in|of|from|located in|situated in|city in|town in|state of|country of"
    "|capital of|largest city in|in the|of the"
)

_COUNTRY_NAME_RE = re.compile(rf"\b{COUNTRY_NAME}\b")


@dataclass(frozen=True)
class _CountryMatcher:
    """Precompiled patterns that place a page inside one denylisted country."""

    name: str
    located_in: re.Pattern[str]
    title_suffix: re.Pattern[str]

    @classmethod
    def build(cls, name: str) -> "_CountryMatcher":
        escaped = re.escape(name)
        return cls(
            name=name,
            located_in=re.compile(
                rf"\b({SEARCH_MATCH_PREFIXES})\s+(the\s+)?{escaped}\b", re.IGNORECASE
            ),
            title_suffix=re.compile(rf"(,|\s+in\s+|,\s+)(the\s+)?{escaped}\b", re.IGNORECASE),
        )

    def names_title(self, title: str) -> bool:
        return (
            title == self.name
            or title.startswith(self.name)
            or title.endswith(self.name)
            or bool(self.title_suffix.search(title))
        )


_COUNTRY_MATCHERS: Sequence[_CountryMatcher] = tuple(
    _CountryMatcher.build(country) for country in NON_INDIA_COUNTRIES
)


# ---------------------------------------------------------------------------
# Text checks
# ---------------------------------------------------------------------------

def is_non_india_country(place_name: str) -> bool:
    """True if *place_name* equals, contains, or is contained by a denylisted country."""
    normalized = normalize_place_name(place_name)
    return any(
        normalized == country or country in normalized or normalized in country
        for country in NON_INDIA_COUNTRIES
    )


def _has_diaspora_qualifier(text: str) -> bool:
    return any(qualifier in text for qualifier in DIASPORA_QUALIFIERS)


def _mentions_india(text: str) -> bool:
    return COUNTRY_NAME in text or DEMONYM in text


def _located_outside_india(title: str, text: str) -> Optional[str]:
    """Return the denylisted country the page places itself in, if any."""
    for matcher in _COUNTRY_MATCHERS:
        if matcher.located_in.search(text) or matcher.names_title(title):
            return matcher.name
    return None


def _has_india_indicator(text: str) -> bool:
    diaspora = _has_diaspora_qualifier(text)
    for indicator in INDIA_INDICATORS:
        if indicator == COUNTRY_NAME:
            # whole word only, so that a skipped demonym cannot re-match here
            if _COUNTRY_NAME_RE.search(text):
                return True
            continue
        if indicator == DEMONYM and diaspora:
            continue
        if indicator in text:
            return True
    return False


def _within_india_bounds(lat: float, lon: float) -> bool:
    lat_min, lat_max = INDIA_LATITUDE_RANGE
    lon_min, lon_max = INDIA_LONGITUDE_RANGE
    return lat_min <= lat <= lat_max and lon_min <= lon <= lon_max


# ---------------------------------------------------------------------------
# Wikipedia lookups
# ---------------------------------------------------------------------------

def _search(place_name: str):
    params = {
        "action": "query",
        "format": "json",
        "list": "search",
        "srsearch": place_name,
        "srlimit": 1,
        "origin": "*",
    }
    return get_wikipedia_session().get(WIKIPEDIA_API_URL, params=params)


def _fetch_page(title: str):
    params = {
        "action": "query",
        "format": "json",
        "titles": title,
        "prop": "extracts|coordinates",
        "exintro": 1,
        "explaintext": 1,
        "origin": "*",
    }
    return get_wikipedia_session().get(WIKIPEDIA_API_URL, params=params)


def _first_page(data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    pages = (data.get("query") or {}).get("pages")
    if not pages:
        return None
    return next(iter(pages.values()), None) or None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def is_place_in_india(place_name: str) -> bool:
    """Return ``True`` only when Wikipedia evidence places *place_name* in India."""
    try:
        clean_name = (place_name or "").strip()
        if not clean_name:
            return False

        if is_non_india_country(clean_name):
            logger.info("Rejected %s: known non-India country", clean_name)
            return False

        search_response = _search(clean_name)
        if not search_response.ok:
            logger.error(
                "Wikipedia search failed for %s: %s %s",
                clean_name, search_response.status_code, search_response.reason,
            )
            return False

        results = (search_response.json().get("query") or {}).get("search") or []
        if not results:
            logger.info("Rejected %s: no Wikipedia search results", clean_name)
            return False

        page_title: str = results[0]["title"]
        snippet = strip_html(results[0].get("snippet", "")).lower()

        if is_non_india_country(page_title):
            logger.info("Rejected %s: page title %r is a non-India country", clean_name, page_title)
            return False

        if _mentions_india(snippet) and not _has_diaspora_qualifier(snippet):
            return True

        page_response = _fetch_page(page_title)
        if not page_response.ok:
            logger.error(
                "Wikipedia page fetch failed for %s: %s %s",
                page_title, page_response.status_code, page_response.reason,
            )
            return _mentions_india(snippet)

        page = _first_page(page_response.json())
        if page is None:
            return False

        title = str(page.get("title", page_title)).lower()
        extract = (page.get("extract") or "").lower()

        if is_non_india_country(title):
            logger.info("Rejected %s: page title %r is a non-India country", clean_name, title)
            return False

        text_to_check = f"{title} {extract}"
        country = _located_outside_india(title, text_to_check)
        if country:
            logger.info("Rejected %s: page places it in %r", clean_name, country)
            return False

        if _has_india_indicator(text_to_check):
            return True

        coordinates = page.get("coordinates") or []
        if coordinates:
            lat, lon = float(coordinates[0]["lat"]), float(coordinates[0]["lon"])
            if _within_india_bounds(lat, lon):
                return True
            logger.info("Rejected %s: coordinates (%s, %s) are outside India", clean_name, lat, lon)
            return False

        logger.info("Rejected %s: could not confirm location is in India", clean_name)
        return False
    except Exception as exc:
        logger.error("Error checking if %s is in India: %s", place_name, exc)
        return False


def _normalize_places(places: Union[str, Iterable[Any]]) -> List[str]:
    if isinstance(places, str):
        candidates: Iterable[Any] = places.split(",")
    else:
        candidates = places
    return [str(place).strip() for place in candidates if str(place).strip()]


def validate_places_in_india(places: Union[str, Iterable[Any]]) -> PlaceValidationResult:
    """Check every place in *places* (a list or a comma separated string).

    Places are classified concurrently; the batch is valid only when every
    entry is accepted.
    """
    try:
        places_list = _normalize_places(places)
        if not places_list:
            return PlaceValidationResult(valid=False, invalid_places=[], message="No places provided")

        workers = max(1, min(len(places_list), PLACE_VALIDATION_MAX_WORKERS))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            verdicts = list(executor.map(is_place_in_india, places_list))

        invalid_places = [place for place, ok in zip(places_list, verdicts) if not ok]
        if invalid_places:
            return PlaceValidationResult(
                valid=False,
                invalid_places=invalid_places,
                message="Please provide places within India",
            )
        return PlaceValidationResult(valid=True, invalid_places=[])
    except Exception as exc:
        logger.error("Error validating places: %s", exc)
        return PlaceValidationResult(
            valid=False,
            invalid_places=[],
            message="Error validating places. Please try again.",
        )

__all__ = [
    "NON_INDIA_COUNTRIES",
    "is_non_india_country",
    "is_place_in_india",
    "validate_places_in_india",
]
