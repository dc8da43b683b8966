"""Look up the best catalog match for a track on the iTunes Search API."""

import logging
import re
from typing import Optional

import requests

from ..config import (
    CATALOG_ARTWORK_SIZE,
    ITUNES_SEARCH_URL,
    REQUEST_TIMEOUTS,
    USER_AGENT,
)
from ..models import CatalogMatch

logger = logging.getLogger(__name__)

_ARTWORK_100 = re.compile(r"100x100bb\.jpg$")


def upscale_artwork(url: Optional[str]) -> Optional[str]:
    """Rewrite a 100x100 artwork URL to the largest standard variant."""
    if not url:
        return None
    return _ARTWORK_100.sub(f"{CATALOG_ARTWORK_SIZE}.jpg", url)


class CatalogMatcher:
    """Single best match from the iTunes catalog. Failures yield None."""

    def __init__(self, search_url: str = ITUNES_SEARCH_URL, timeout: float = None):
        self.search_url = search_url
        self.timeout = timeout or REQUEST_TIMEOUTS["catalog"]
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def lookup(self, term: str) -> Optional[CatalogMatch]:
        if not term:
            return None

        try:
            response = self.session.get(
                self.search_url,
                params={"term": term, "media": "music", "limit": 1},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
            return self._parse_result(data)
        except requests.RequestException as e:
            logger.warning(f"Catalog lookup failed for '{term}': {e}")
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # Non-JSON body or unexpected payload shape
            logger.warning(f"Catalog returned unusable data for '{term}': {e}")
        return None

    def _parse_result(self, data: dict) -> Optional[CatalogMatch]:
        if not data.get("resultCount") or not data.get("results"):
            logger.debug("Catalog returned no results")
            return None

        result = data["results"][0]
        return CatalogMatch(
            artwork_url=upscale_artwork(result.get("artworkUrl100")),
            source_url=(
                result.get("trackViewUrl")
                or result.get("collectionViewUrl")
                or result.get("artistViewUrl")
            ),
            matched_artist=result.get("artistName"),
            matched_track=result.get("trackName"),
        )
