"""Run the catalog and video lookups side by side and merge the results."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from ..models import ResolverResult
from .itunes import CatalogMatcher
from .youtube import VideoMatcher

logger = logging.getLogger(__name__)


class MetadataResolver:
    """
    Best-effort enrichment of a search query.

    The two lookups share no data and run concurrently. Each is isolated:
    whatever one of them raises is logged and turned into "no result", so
    the other's result always survives the join.
    """

    def __init__(
        self,
        catalog: Optional[CatalogMatcher] = None,
        video: Optional[VideoMatcher] = None,
    ):
        self.catalog = catalog or CatalogMatcher()
        self.video = video or VideoMatcher()

    def resolve(self, query: str) -> ResolverResult:
        if not query:
            return ResolverResult()

        with ThreadPoolExecutor(max_workers=2) as pool:
            catalog_future = pool.submit(self.lookup_catalog, query)
            video_future = pool.submit(self.lookup_video, query)
            # join point: both lookups finish before assembly continues
            return ResolverResult(
                catalog_match=self._result_or_none(catalog_future, "catalog"),
                video_url=self._result_or_none(video_future, "video"),
            )

    def lookup_catalog(self, term: str):
        return self.catalog.lookup(term)

    def lookup_video(self, term: str):
        return self.video.lookup(term)

    def _result_or_none(self, future: Future, name: str):
        try:
            return future.result()
        except Exception as e:
            logger.warning(f"Unexpected {name} lookup error: {e}")
            return None
