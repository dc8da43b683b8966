"""Append new songs to the daily log, skipping anything already seen."""

import logging
from typing import Dict, Optional, Tuple

from ..models import DailyLog, DailyLogEntry, StationSnapshot, identity_key
from .promo_filter import PromoFilter

logger = logging.getLogger(__name__)


class Deduplicator:
    """Keep at most one daily log entry per identity key."""

    def __init__(self, promo_filters: Optional[Dict[str, PromoFilter]] = None):
        # station id -> filter; stations without one use the default denylist
        self.promo_filters = promo_filters or {}
        self._default_filter = PromoFilter()

    def promo_filter_for(self, station_id: str) -> PromoFilter:
        return self.promo_filters.get(station_id, self._default_filter)

    def append_if_new(
        self, log: DailyLog, snapshot: StationSnapshot
    ) -> Tuple[DailyLog, bool]:
        """
        Add the snapshot to the log unless an equivalent entry exists.

        Identity is (station, artist, title) when both are known, else
        (station, raw now-playing text). Failure snapshots, empty snapshots
        and promotional text without artist/title are never added.

        Args:
            log: Today's log
            snapshot: Freshly assembled station snapshot

        Returns:
            Tuple of (log, inserted). The original log is returned unchanged
            when nothing was inserted; otherwise a new log with the entry
            appended.
        """
        if snapshot.is_failure:
            return log, False

        if not snapshot.has_artist_title:
            if not snapshot.raw_now:
                return log, False
            if self.promo_filter_for(snapshot.station_id).is_promotional(snapshot.raw_now):
                logger.info(
                    f"{snapshot.station_id}: skipping promotional text '{snapshot.raw_now}'"
                )
                return log, False

        key = identity_key(
            snapshot.station_id, snapshot.artist, snapshot.title, snapshot.raw_now
        )
        if key in log.keys():
            logger.debug(f"Already logged today: {key}")
            return log, False

        entry = DailyLogEntry(
            station_id=snapshot.station_id,
            station_name=snapshot.station_name,
            first_seen_at=snapshot.captured_at,
            artist=snapshot.artist,
            title=snapshot.title,
            raw_now=snapshot.raw_now or None,
            links=dict(snapshot.links),
            artwork_url=snapshot.artwork_url,
        )
        logger.info(f"New entry for {log.date}: {key}")
        return DailyLog(date=log.date, items=log.items + [entry]), True
