"""Base scraper class with common functionality."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from ..config import RATE_LIMITS, REQUEST_TIMEOUTS, USER_AGENT
from ..models import PageReadFailure, PageResult, ScrapeResult
from ..parsing import normalize


class ScraperError(Exception):
    """Base exception for scraper errors."""

    pass


class StructureChangedError(ScraperError):
    """Raised when expected HTML structure is not found."""

    pass


class BaseScraper(ABC):
    """Abstract base class for station page readers."""

    SOURCE_NAME: str = ""
    RATE_LIMIT_KEY: str = "default"

    def __init__(self, timeout: Optional[float] = None):
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.logger = logging.getLogger(self.__class__.__name__)
        self.timeout = timeout or REQUEST_TIMEOUTS["page"]
        self._last_request_time = 0

    def read_station_page(self, station: Dict) -> PageResult:
        """
        Read now-playing fields for a station.

        Never raises for an unreachable page or changed markup; those come
        back as PageReadFailure with a human-readable cause.
        """
        try:
            soup = self._fetch_page(station["url"])
            return self.extract(soup, station["url"])
        except ScraperError as e:
            self.logger.error(f"{self.SOURCE_NAME}: failed to read {station['id']}: {e}")
            return PageReadFailure(cause=str(e))

    @abstractmethod
    def extract(self, soup: BeautifulSoup, page_url: str) -> ScrapeResult:
        """Pull now-playing fields out of a parsed page. Must be implemented by subclasses."""
        pass

    def _get_rate_limit(self) -> float:
        """Get rate limit for this scraper."""
        return RATE_LIMITS.get(self.RATE_LIMIT_KEY, RATE_LIMITS["default"])

    def _rate_limit(self):
        """Apply rate limiting between requests."""
        elapsed = time.time() - self._last_request_time
        delay = self._get_rate_limit()
        if elapsed < delay:
            time.sleep(delay - elapsed)
        self._last_request_time = time.time()

    def _fetch_page(self, url: str) -> BeautifulSoup:
        """Fetch and parse a page with rate limiting."""
        self._rate_limit()
        try:
            self.logger.debug(f"Fetching: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ScraperError(f"Failed to fetch {url}: {e}") from e
        return BeautifulSoup(response.text, "lxml")

    def _safe_extract_text(self, element, selector: str, default: str = "") -> str:
        """Extract normalized text from an element using CSS selector."""
        if element is None:
            return default
        found = element.select_one(selector)
        if found:
            return normalize(found.get_text(" "))
        return default

    def _safe_extract_attr(
        self, element, selector: str, attr: str, default: str = ""
    ) -> str:
        """Extract attribute from an element using CSS selector."""
        if element is None:
            return default
        found = element.select_one(selector)
        if found and found.has_attr(attr):
            return found[attr].strip()
        return default

    def _absolute_url(self, page_url: str, url: str) -> Optional[str]:
        """Resolve a possibly relative URL against the page it came from."""
        if not url:
            return None
        return urljoin(page_url, url)
