"""Load and save the per-day song log."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Tuple

from ..models import DailyLog

logger = logging.getLogger(__name__)


def today_key() -> str:
    """Calendar day of the capture process, as YYYY-MM-DD."""
    return datetime.now().strftime("%Y-%m-%d")


class DailyLogStore:
    """One JSON file per calendar day: <data_dir>/YYYY-MM-DD.json."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, date: str) -> Path:
        return self.data_dir / f"{date}.json"

    def load(self, date: str) -> DailyLog:
        """
        Load the log for a day.

        A missing, unreadable or malformed file gives an empty log; the
        run carries on either way.
        """
        path = self.path_for(date)
        if not path.exists():
            return DailyLog(date=date)

        try:
            with open(path, "r", encoding="utf-8") as f:
                log = DailyLog.from_dict(json.load(f), date)
            logger.info(f"Loaded daily log {date} with {len(log.items)} items")
            return log
        except (json.JSONDecodeError, IOError, ValueError) as e:
            logger.warning(f"Failed to load daily log {path}, starting empty: {e}")

        return DailyLog(date=date)

    def payload(self, log: DailyLog) -> Tuple[Path, dict]:
        """Target path and JSON body for a log."""
        return self.path_for(log.date), log.to_dict()
