"""Data model for the per-day log of distinct songs."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .links import LinkBundle


@dataclass
class DailyLogEntry:
    """A song (or unparsed now-playing text) first seen on a station today."""

    station_id: str
    station_name: str
    first_seen_at: str
    artist: Optional[str] = None
    title: Optional[str] = None
    raw_now: Optional[str] = None
    links: LinkBundle = field(default_factory=dict)
    artwork_url: Optional[str] = None

    @property
    def identity_key(self) -> Tuple[str, ...]:
        return identity_key(self.station_id, self.artist, self.title, self.raw_now)

    def to_dict(self) -> dict:
        data = {
            "stationId": self.station_id,
            "stationName": self.station_name,
        }
        if self.artist and self.title:
            data["artist"] = self.artist
            data["title"] = self.title
        else:
            data["now"] = self.raw_now
        data["links"] = dict(self.links)
        data["artwork"] = self.artwork_url
        data["firstSeen"] = self.first_seen_at
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DailyLogEntry":
        if not isinstance(data, dict) or "stationId" not in data:
            raise ValueError(f"Malformed daily log entry: {data!r}")
        links = data.get("links") or {}
        if not isinstance(links, dict):
            raise ValueError(f"Malformed links in daily log entry: {links!r}")
        return cls(
            station_id=data["stationId"],
            station_name=data.get("stationName", ""),
            first_seen_at=data.get("firstSeen", ""),
            artist=data.get("artist"),
            title=data.get("title"),
            raw_now=data.get("now"),
            links=links,
            artwork_url=data.get("artwork"),
        )


@dataclass
class DailyLog:
    """Append-only, insertion-ordered log for one calendar day."""

    date: str
    items: List[DailyLogEntry] = field(default_factory=list)

    def keys(self) -> set:
        return {item.identity_key for item in self.items}

    def to_dict(self) -> dict:
        return {"date": self.date, "items": [item.to_dict() for item in self.items]}

    @classmethod
    def from_dict(cls, data: dict, date: str) -> "DailyLog":
        if not isinstance(data, dict):
            raise ValueError("Daily log is not a JSON object")
        items = data.get("items", [])
        if not isinstance(items, list):
            raise ValueError("Daily log items is not a list")
        return cls(
            date=date,
            items=[DailyLogEntry.from_dict(item) for item in items],
        )


def identity_key(
    station_id: str,
    artist: Optional[str],
    title: Optional[str],
    raw_now: Optional[str],
) -> Tuple[str, ...]:
    """(station, artist, title) when both are known, else (station, raw text)."""
    if artist and title:
        return (station_id, artist, title)
    return (station_id, raw_now or "")
