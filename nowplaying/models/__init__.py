from .daily_log import DailyLog, DailyLogEntry, identity_key
from .links import LinkBundle
from .snapshot import (
    CatalogMatch,
    PageReadFailure,
    PageResult,
    ResolverResult,
    ScrapeResult,
    StationSnapshot,
)

__all__ = [
    "CatalogMatch",
    "DailyLog",
    "DailyLogEntry",
    "LinkBundle",
    "PageReadFailure",
    "PageResult",
    "ResolverResult",
    "ScrapeResult",
    "StationSnapshot",
    "identity_key",
]
