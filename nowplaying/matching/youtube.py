"""Find the first video on a YouTube search results page."""

import logging
import re
from typing import Optional

import requests

from ..config import REQUEST_TIMEOUTS, USER_AGENT, YOUTUBE_SEARCH_URL, YOUTUBE_WATCH_URL

logger = logging.getLogger(__name__)

# Tried in order against the results payload
VIDEO_ID_PATTERNS = [
    re.compile(r'"videoId":"([^"]+)"'),
    re.compile(r"watch\?v=([^\"'&<>\s\\]+)"),
]


def first_video_id(payload: str) -> Optional[str]:
    """Return the first watch identifier in a search results payload."""
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(payload)
        if match:
            return match.group(1)
    return None


class VideoMatcher:
    """Canonical watch URL for the top search hit. Failures yield None."""

    def __init__(self, search_url: str = YOUTUBE_SEARCH_URL, timeout: float = None):
        self.search_url = search_url
        self.timeout = timeout or REQUEST_TIMEOUTS["video"]
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def lookup(self, term: str) -> Optional[str]:
        if not term:
            return None

        try:
            response = self.session.get(
                self.search_url,
                params={"search_query": term},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Video search failed for '{term}': {e}")
            return None

        video_id = first_video_id(response.text)
        if not video_id:
            logger.debug(f"No video found for '{term}'")
            return None
        return YOUTUBE_WATCH_URL.format(video_id=video_id)
