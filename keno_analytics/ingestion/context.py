"""Ingestion context: holds the loaded snapshots for every configured venue.

The context is created by the caller (the API lifespan, a script, a test)
and passed around explicitly. Analyzers never see it; they receive the
DrawHistory it hands out.
"""

import asyncio
from datetime import datetime
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from keno_analytics.config import Settings
from keno_analytics.engine.combinatorics import POOL_SIZE
from keno_analytics.engine.history_store import normalize_current_day, normalize_history
from keno_analytics.engine.payout import load_payout_tables
from keno_analytics.exceptions import IngestionError, UnknownVenueError
from keno_analytics.ingestion.loader import all_data_path, current_path, read_json
from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.payout import GamePayoutTable
from keno_analytics.schemas.statistics import Scope


class VenueSnapshot(BaseModel):
    venue: str
    current: DrawHistory
    all_time: DrawHistory
    loaded_at: datetime


class IngestionErrorRecord(BaseModel):
    source: str
    reason: str
    timestamp: datetime


class IngestionContext:
    """Loaded draw histories and payout tables for a set of venues."""

    def __init__(
        self,
        data_dir: Path,
        venues: list[str],
        payout_file: str = "payoutData.json",
        pool_size: int = POOL_SIZE,
    ):
        self.data_dir = Path(data_dir)
        self.venues = list(venues)
        self.payout_file = payout_file
        self.pool_size = pool_size
        self.payout_tables: dict[str, GamePayoutTable] = {}
        self.errors: list[IngestionErrorRecord] = []
        self._snapshots: dict[str, VenueSnapshot] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "IngestionContext":
        return cls(
            data_dir=settings.DATA_DIR,
            venues=settings.LOCATIONS,
            payout_file=settings.PAYOUT_FILE,
            pool_size=settings.ANALYSIS.pool_size,
        )

    # --- loading ---

    def _read(self, path: Path) -> dict | None:
        try:
            return read_json(path)
        except IngestionError as e:
            logger.warning("Ingestion failed for {}: {}", e.source, e.reason)
            self.errors.append(IngestionErrorRecord(
                source=e.source, reason=e.reason, timestamp=datetime.now(),
            ))
            return None

    def _check_venue(self, venue: str) -> None:
        if venue not in self.venues:
            raise UnknownVenueError(f"Unknown venue: {venue}. Valid: {self.venues}")

    def load_venue_sync(self, venue: str) -> VenueSnapshot:
        """Read and normalize both snapshots of one venue."""
        self._check_venue(venue)
        current = normalize_current_day(
            self._read(current_path(self.data_dir, venue)), self.pool_size,
        )
        all_time = normalize_history(
            self._read(all_data_path(self.data_dir, venue)), self.pool_size,
        )
        snapshot = VenueSnapshot(
            venue=venue, current=current, all_time=all_time, loaded_at=datetime.now(),
        )
        self._snapshots[venue] = snapshot
        logger.info(
            "[{}] loaded {} current / {} historical draws ({} skipped)",
            venue, len(current), len(all_time), current.skipped + all_time.skipped,
        )
        return snapshot

    async def load_venue(self, venue: str) -> VenueSnapshot:
        return await asyncio.to_thread(self.load_venue_sync, venue)

    def load_payouts(self) -> dict[str, GamePayoutTable]:
        """Load payout tables; a malformed table raises PayoutTableError."""
        raw = self._read(self.data_dir / self.payout_file)
        self.payout_tables = load_payout_tables(raw) if raw is not None else {}
        return self.payout_tables

    async def load_all(self) -> dict[str, VenueSnapshot]:
        """Load every venue concurrently, then the payout tables."""
        logger.info("Loading data for {} venues from {}", len(self.venues), self.data_dir)
        self.errors = []
        snapshots = await asyncio.gather(*(self.load_venue(v) for v in self.venues))
        await asyncio.to_thread(self.load_payouts)
        return {s.venue: s for s in snapshots}

    def clear(self, venue: str | None = None) -> None:
        if venue is None:
            self._snapshots.clear()
            self.payout_tables = {}
        else:
            self._snapshots.pop(venue, None)

    # --- access ---

    def history(self, venue: str, scope: Scope = "current") -> DrawHistory:
        """Draw history of a venue; an unloaded venue yields an empty history."""
        self._check_venue(venue)
        snapshot = self._snapshots.get(venue)
        if snapshot is None:
            return DrawHistory()
        return snapshot.current if scope == "current" else snapshot.all_time

    def is_loaded(self, venue: str) -> bool:
        return venue in self._snapshots

    def status(self) -> dict:
        return {
            "venues_loaded": sorted(self._snapshots),
            "payout_games": sorted(self.payout_tables),
            "errors": len(self.errors),
        }
