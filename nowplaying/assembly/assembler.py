"""Combine page fields, parsed artist/title and lookups into a snapshot."""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional
from urllib.parse import quote

from ..config import APPLE_MUSIC_SEARCH_LINK, SPOTIFY_SEARCH_LINK, YOUTUBE_SEARCH_LINK
from ..matching import MetadataResolver
from ..models import PageReadFailure, PageResult, StationSnapshot
from ..models.links import (
    APPLE,
    APPLE_MUSIC_SEARCH,
    SPOTIFY_SEARCH,
    YOUTUBE_EXACT,
    YOUTUBE_SEARCH,
    LinkBundle,
)
from ..parsing import ParsedTrack, parse

logger = logging.getLogger(__name__)


def capture_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_lookup_query(parsed: ParsedTrack, raw_now: str, fallback: str) -> str:
    """Artist and title when both are known, else the raw text, else the fallback."""
    if parsed.artist and parsed.title:
        return f"{parsed.artist} {parsed.title}"
    return raw_now or fallback


def build_search_links(query: str) -> LinkBundle:
    """Search-style links that work whether or not a lookup matched."""
    q = quote(query or "", safe="!~*'()")
    return {
        YOUTUBE_SEARCH: YOUTUBE_SEARCH_LINK.format(query=q),
        SPOTIFY_SEARCH: SPOTIFY_SEARCH_LINK.format(query=q),
        APPLE_MUSIC_SEARCH: APPLE_MUSIC_SEARCH_LINK.format(query=q),
    }


class RecordAssembler:
    """Build one station's snapshot. Never raises."""

    def __init__(self, resolver: Optional[MetadataResolver] = None):
        self.resolver = resolver or MetadataResolver()

    def assemble(self, station: Dict, page_result: PageResult) -> StationSnapshot:
        """
        Turn a page read into a StationSnapshot.

        Args:
            station: Station config entry (id, name, url)
            page_result: ScrapeResult, or PageReadFailure when the read failed

        Returns:
            Success snapshot, or the failure variant carrying the cause
        """
        if isinstance(page_result, PageReadFailure):
            return self._failure(station, page_result.cause)

        try:
            return self._assemble(station, page_result)
        except Exception as e:
            logger.exception(f"Failed to assemble snapshot for {station['id']}")
            return self._failure(station, str(e) or e.__class__.__name__)

    def _assemble(self, station: Dict, page_result) -> StationSnapshot:
        raw_now = page_result.raw_now or ""
        parsed = parse(raw_now, page_result.artist, page_result.title)

        query = build_lookup_query(parsed, raw_now, station["name"])
        links = build_search_links(query)
        artwork = page_result.artwork_url

        resolved = self.resolver.resolve(query)
        match = resolved.catalog_match
        if match is not None:
            if match.source_url:
                links[APPLE] = match.source_url
            artwork = artwork or match.artwork_url
        if resolved.video_url:
            links[YOUTUBE_EXACT] = resolved.video_url

        logger.info(
            f"{station['id']}: {parsed.artist or '?'} - {parsed.title or '?'} "
            f"(raw: '{raw_now}')"
        )

        return StationSnapshot(
            station_id=station["id"],
            station_name=station["name"],
            source_url=station["url"],
            captured_at=capture_timestamp(),
            raw_now=raw_now,
            artist=parsed.artist,
            title=parsed.title,
            artwork_url=artwork,
            links=links,
        )

    def _failure(self, station: Dict, cause: str) -> StationSnapshot:
        return StationSnapshot(
            station_id=station["id"],
            station_name=station["name"],
            source_url=station["url"],
            captured_at=capture_timestamp(),
            error=cause,
        )
