"""Data models for page reads, catalog matches and station snapshots."""

from dataclasses import dataclass, field
from typing import Optional, Union

from .links import LinkBundle


@dataclass
class ScrapeResult:
    """Fields read from a station page."""

    raw_now: str
    artist: Optional[str] = None
    title: Optional[str] = None
    artwork_url: Optional[str] = None


@dataclass
class PageReadFailure:
    """Returned instead of fields when a station page could not be read."""

    cause: str


PageResult = Union[ScrapeResult, PageReadFailure]


@dataclass
class CatalogMatch:
    """Best match returned by the music catalog."""

    artwork_url: Optional[str]
    source_url: Optional[str]
    matched_artist: Optional[str] = None
    matched_track: Optional[str] = None


@dataclass
class ResolverResult:
    """Merged outcome of the catalog and video lookups."""

    catalog_match: Optional[CatalogMatch] = None
    video_url: Optional[str] = None


@dataclass
class StationSnapshot:
    """
    One station's now-playing state at capture time.

    Has two shapes: success (raw_now and/or artist/title populated) and
    failure (error populated, metadata fields left empty).
    """

    station_id: str
    station_name: str
    source_url: str
    captured_at: str
    raw_now: str = ""
    artist: Optional[str] = None
    title: Optional[str] = None
    artwork_url: Optional[str] = None
    links: LinkBundle = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def has_artist_title(self) -> bool:
        return bool(self.artist and self.title)

    def to_dict(self) -> dict:
        """Serialize using the field names the display page reads."""
        if self.is_failure:
            return {
                "id": self.station_id,
                "name": self.station_name,
                "url": self.source_url,
                "now": "",
                "error": self.error,
                "scrapedAt": self.captured_at,
            }
        return {
            "id": self.station_id,
            "name": self.station_name,
            "url": self.source_url,
            "now": self.raw_now,
            "artist": self.artist,
            "title": self.title,
            "artwork": self.artwork_url,
            "links": dict(self.links),
            "scrapedAt": self.captured_at,
        }
