"""Water intake logging service."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from meal_tracker.domain.water import WaterEntry, WaterUnit
from meal_tracker.errors import StorageError
from meal_tracker.services.events import ChangeFeed

_logger = logging.getLogger(__name__)

ENTITY = "water_log"


class WaterLogRepository(Protocol):
    """Persistence interface for water logs."""

    def create_entry(self, payload: dict[str, object]) -> WaterEntry:
        """Create a water entry and return it."""

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> WaterEntry:
        """Update a water entry and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a water entry."""

    def get_entry(self, entry_id: UUID) -> WaterEntry | None:
        """Return a water entry by id, if present."""

    def list_entries(self, start: datetime, end: datetime) -> list[WaterEntry]:
        """Return entries with start <= logged_at < end, oldest first."""


@dataclass
class WaterLogService:
    """Service that persists water intake."""

    repository: WaterLogRepository
    changes: ChangeFeed
    default_unit: WaterUnit = WaterUnit.ML

    def log_water(
        self, amount: float, logged_at: datetime, unit: WaterUnit | None = None
    ) -> WaterEntry | None:
        """Persist a water entry; non-positive amounts are ignored."""
        if amount <= 0:
            return None
        try:
            entry = self.repository.create_entry(
                _payload(amount, unit or self.default_unit, logged_at)
            )
        except StorageError:
            _logger.exception("Failed to save water entry")
            return None
        self.changes.notify(ENTITY, "created", entry.id)
        return entry

    def update_water(
        self,
        entry_id: UUID,
        amount: float,
        logged_at: datetime,
        unit: WaterUnit | None = None,
    ) -> WaterEntry | None:
        """Update a water entry; non-positive amounts are ignored."""
        if amount <= 0:
            return None
        try:
            if self.repository.get_entry(entry_id) is None:
                return None
            entry = self.repository.update_entry(
                entry_id, _payload(amount, unit or self.default_unit, logged_at)
            )
        except StorageError:
            _logger.exception("Failed to update water entry: entry_id=%s", entry_id)
            return None
        self.changes.notify(ENTITY, "updated", entry.id)
        return entry

    def delete_water(self, entry_id: UUID) -> bool:
        """Delete a water entry."""
        try:
            self.repository.delete_entry(entry_id)
        except StorageError:
            _logger.exception("Failed to delete water entry: entry_id=%s", entry_id)
            return False
        self.changes.notify(ENTITY, "deleted", entry_id)
        return True

    def get_water(self, entry_id: UUID) -> WaterEntry | None:
        try:
            return self.repository.get_entry(entry_id)
        except StorageError:
            _logger.exception("Failed to fetch water entry: entry_id=%s", entry_id)
            return None

    def list_between(self, start: datetime, end: datetime) -> list[WaterEntry]:
        """Return water entries logged in a time range."""
        try:
            return self.repository.list_entries(start, end)
        except StorageError:
            _logger.exception("Failed to list water entries")
            return []


def _payload(amount: float, unit: WaterUnit, logged_at: datetime) -> dict[str, object]:
    return {
        "amount": amount,
        "unit": unit.value,
        "logged_at": logged_at.isoformat(),
    }
