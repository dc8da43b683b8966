"""Write station snapshots for the display page."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List

from ..models import StationSnapshot

logger = logging.getLogger(__name__)

LATEST_FILENAME = "latest.json"


def write_json_files(files: Dict[Path, dict]):
    """
    Write several JSON files as one unit.

    Every payload is written to a temp file beside its target first; targets
    are only replaced once all temp files are on disk. On a failure while
    staging, the temp files are removed and no target is touched.
    """
    staged = []
    try:
        for path, data in files.items():
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            staged.append((Path(tmp_name), path))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
    except Exception:
        for tmp_path, _ in staged:
            tmp_path.unlink(missing_ok=True)
        raise

    for tmp_path, path in staged:
        os.replace(tmp_path, path)
        logger.debug(f"Written: {path}")


class SnapshotWriter:
    """
    Build one <station id>.json per station plus latest.json.

    latest.json aggregates every station from the most recent run:
    {"date": "YYYY-MM-DD", "stations": [...]}, in station list order.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def payloads(self, date: str, snapshots: List[StationSnapshot]) -> Dict[Path, dict]:
        files = {
            self.output_dir / f"{snapshot.station_id}.json": snapshot.to_dict()
            for snapshot in snapshots
        }
        files[self.output_dir / LATEST_FILENAME] = {
            "date": date,
            "stations": [s.to_dict() for s in snapshots],
        }
        return files
