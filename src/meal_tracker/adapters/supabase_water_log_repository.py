"""Supabase implementation for water logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from meal_tracker.adapters.supabase_support import execute, parse_timestamp
from meal_tracker.domain.water import WaterEntry, WaterUnit
from meal_tracker.errors import StorageError
from meal_tracker.services.water import WaterLogRepository

TABLE = "water_logs"


@dataclass
class SupabaseWaterLogRepository(WaterLogRepository):
    """Supabase-backed repository for water logs."""

    client: Client

    def create_entry(self, payload: dict[str, object]) -> WaterEntry:
        """Create a water entry and return it."""
        response = execute(self.client.table(TABLE).insert(payload))
        if not response.data:
            raise StorageError("Failed to create water entry")
        return _parse_entry(response.data[0])

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> WaterEntry:
        """Update a water entry and return it."""
        response = execute(
            self.client.table(TABLE).update(payload).eq("id", str(entry_id))
        )
        if not response.data:
            raise StorageError("Failed to update water entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a water entry."""
        execute(self.client.table(TABLE).delete().eq("id", str(entry_id)))

    def get_entry(self, entry_id: UUID) -> WaterEntry | None:
        """Return a water entry by id, if present."""
        response = execute(
            self.client.table(TABLE).select("*").eq("id", str(entry_id)).limit(1)
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(self, start: datetime, end: datetime) -> list[WaterEntry]:
        """Return water entries in the time range, oldest first."""
        response = execute(
            self.client.table(TABLE)
            .select("*")
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
        )
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> WaterEntry:
    return WaterEntry(
        id=UUID(str(row["id"])),
        amount=float(row.get("amount") or 0.0),
        unit=WaterUnit(str(row.get("unit") or WaterUnit.ML.value)),
        logged_at=parse_timestamp(row.get("logged_at")),
    )
