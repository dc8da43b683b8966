"""Reader for station pages on radio-south-africa.co.za."""

from bs4 import BeautifulSoup

from ..models import ScrapeResult
from ..parsing import normalize
from .base import BaseScraper, StructureChangedError


class RadioSouthAfricaScraper(BaseScraper):
    """Reads the "latest song" block of a radio-south-africa.co.za station page."""

    SOURCE_NAME = "radio-south-africa.co.za"
    RATE_LIMIT_KEY = "radio_south_africa"

    NOW_SELECTOR = ".latest-song"
    ARTIST_SELECTOR = ".artist-name"
    TITLE_SELECTOR = ".song-name"
    # Tried in order
    ARTWORK_SELECTORS = ["#player_image", "#player_image_background"]

    def extract(self, soup: BeautifulSoup, page_url: str) -> ScrapeResult:
        latest = soup.select_one(self.NOW_SELECTOR)
        if latest is None:
            raise StructureChangedError(
                f"{self.NOW_SELECTOR} not found on {page_url}"
            )

        artist = self._safe_extract_text(latest, self.ARTIST_SELECTOR)
        title = self._safe_extract_text(latest, self.TITLE_SELECTOR)

        artwork = ""
        for selector in self.ARTWORK_SELECTORS:
            artwork = self._safe_extract_attr(soup, selector, "src")
            if artwork:
                break

        return ScrapeResult(
            raw_now=normalize(latest.get_text(" ")),
            artist=artist or None,
            title=title or None,
            artwork_url=self._absolute_url(page_url, artwork),
        )
