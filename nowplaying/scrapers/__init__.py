from .base import BaseScraper, ScraperError, StructureChangedError
from .radio_south_africa import RadioSouthAfricaScraper

# station "scraper" key -> page reader class
SCRAPERS = {
    "radio_south_africa": RadioSouthAfricaScraper,
}

__all__ = [
    "BaseScraper",
    "ScraperError",
    "StructureChangedError",
    "RadioSouthAfricaScraper",
    "SCRAPERS",
]
