"""Recover artist and title from a raw now-playing string."""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .normalizer import normalize

ARTIST_TITLE_SEPARATOR = " - "
_BY_PATTERN = re.compile(r"^(.+) by (.+)$", re.IGNORECASE)


@dataclass
class ParsedTrack:
    """Artist/title pair. Unset fields stay None; empty is never stored."""

    artist: Optional[str] = None
    title: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.artist is not None and self.title is not None

    def fill(self, artist: Optional[str], title: Optional[str]) -> None:
        """Set only the fields that are still missing."""
        if self.artist is None and artist:
            self.artist = artist
        if self.title is None and title:
            self.title = title


# (artist, title) candidate, or None when the pattern does not apply
Candidate = Optional[Tuple[str, str]]


def split_on_separator(raw_now: str) -> Candidate:
    """Split on the first " - "; later separators stay in the title."""
    if ARTIST_TITLE_SEPARATOR not in raw_now:
        return None
    artist, *rest = raw_now.split(ARTIST_TITLE_SEPARATOR)
    return normalize(artist), normalize(ARTIST_TITLE_SEPARATOR.join(rest))


def split_on_by(raw_now: str) -> Candidate:
    """Match "<title> by <artist>", case-insensitive."""
    match = _BY_PATTERN.match(raw_now)
    if not match:
        return None
    return normalize(match.group(2)), normalize(match.group(1))


# Applied in order; the first strategy whose pattern matches is the last tried
PATTERN_STRATEGIES: List[Callable[[str], Candidate]] = [
    split_on_separator,
    split_on_by,
]


def parse(
    raw_now: Optional[str],
    artist: Optional[str] = None,
    title: Optional[str] = None,
) -> ParsedTrack:
    """
    Recover artist and title.

    Structured fields from the page win. Anything still missing is taken from
    the first pattern strategy that matches the raw string.

    Args:
        raw_now: Raw "now playing" text
        artist: Dedicated artist field from the page, if any
        title: Dedicated title field from the page, if any

    Returns:
        ParsedTrack with unresolved fields left as None
    """
    parsed = ParsedTrack()
    parsed.fill(normalize(artist), normalize(title))

    raw_now = normalize(raw_now)
    if parsed.is_complete or not raw_now:
        return parsed

    for strategy in PATTERN_STRATEGIES:
        candidate = strategy(raw_now)
        if candidate is not None:
            parsed.fill(*candidate)
            break

    return parsed
