"""Main orchestrator for the now-playing capture."""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .assembly import RecordAssembler
from .config import DATA_DIR_NAME, STATIONS
from .filters import Deduplicator, PromoFilter
from .models import DailyLog, StationSnapshot
from .output import SnapshotWriter, write_json_files
from .scrapers import SCRAPERS
from .state import DailyLogStore, today_key

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def capture_stations(
    stations: List[Dict], assembler: RecordAssembler
) -> List[StationSnapshot]:
    """Read, parse and enrich every station, one after another."""
    readers = {}
    snapshots = []

    for station in stations:
        scraper_key = station["scraper"]
        if scraper_key not in readers:
            readers[scraper_key] = SCRAPERS[scraper_key]()

        logger.info(f"Reading {station['name']} ({station['url']})...")
        page_result = readers[scraper_key].read_station_page(station)
        snapshot = assembler.assemble(station, page_result)
        if snapshot.is_failure:
            logger.error(f"  {station['id']} unavailable: {snapshot.error}")
        snapshots.append(snapshot)

    return snapshots


def merge_daily_log(
    log: DailyLog, snapshots: List[StationSnapshot], deduplicator: Deduplicator
):
    """Fold all snapshots into the day's log in station order."""
    added = 0
    for snapshot in snapshots:
        log, inserted = deduplicator.append_if_new(log, snapshot)
        if inserted:
            added += 1
    return log, added


def run(
    data_path: Path,
    stations: Optional[List[Dict]] = None,
    date: Optional[str] = None,
    assembler: Optional[RecordAssembler] = None,
) -> DailyLog:
    """
    Capture every station and write the outputs.

    Nothing is written until all stations have been assembled and the daily
    log merged, and all output files are swapped in together, so a failed
    run leaves the previous files untouched.

    Returns:
        The updated daily log
    """
    stations = STATIONS if stations is None else stations
    date = date or today_key()

    assembler = assembler or RecordAssembler()
    deduplicator = Deduplicator(
        promo_filters={
            s["id"]: PromoFilter(s["promo_patterns"])
            for s in stations
            if "promo_patterns" in s
        }
    )
    log_store = DailyLogStore(data_path)
    writer = SnapshotWriter(data_path)

    # ========================================
    # Phase 1: Capture stations
    # ========================================
    logger.info("")
    logger.info("Phase 1: Capturing stations...")
    logger.info("-" * 40)

    snapshots = capture_stations(stations, assembler)
    failed = [s.station_id for s in snapshots if s.is_failure]
    if failed:
        logger.warning(f"WARNING: These stations could not be read: {failed}")
        logger.warning("Site structures may have changed - manual review needed")

    # ========================================
    # Phase 2: Merge into today's log
    # ========================================
    logger.info("")
    logger.info(f"Phase 2: Merging into daily log {date}...")
    logger.info("-" * 40)

    log = log_store.load(date)
    log, added = merge_daily_log(log, snapshots, deduplicator)
    logger.info(f"New entries: {added} (total {len(log.items)})")

    # ========================================
    # Phase 3: Write output
    # ========================================
    logger.info("")
    logger.info("Phase 3: Writing output...")
    logger.info("-" * 40)

    # station files, latest.json and the day log land together or not at all
    files = writer.payloads(date, snapshots)
    log_path, log_data = log_store.payload(log)
    files[log_path] = log_data
    write_json_files(files)
    logger.info(f"Output written to: {data_path} ({len(files)} files)")

    logger.info("")
    logger.info("=" * 60)
    logger.info("COMPLETE!")
    logger.info(f"Stations read: {len(snapshots) - len(failed)}/{len(snapshots)}")
    logger.info(f"New log entries: {added}")
    logger.info("=" * 60)

    return log


def main(data_path: Optional[Path] = None) -> int:
    """Entry point. Returns the process exit status."""
    configure_logging()

    logger.info("=" * 60)
    logger.info("Starting now-playing capture")
    logger.info("=" * 60)

    if data_path is None:
        data_path = Path.cwd() / DATA_DIR_NAME

    try:
        run(data_path)
    except Exception:
        logger.exception("Fatal capture error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
