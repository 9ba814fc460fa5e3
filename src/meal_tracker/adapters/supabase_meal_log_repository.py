"""Supabase implementation for meal logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from meal_tracker.adapters.supabase_support import execute, parse_timestamp
from meal_tracker.domain.meals import MealEntry, MealType
from meal_tracker.errors import StorageError
from meal_tracker.services.meals import MealLogRepository

TABLE = "meal_logs"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase-backed repository for meal logs."""

    client: Client

    def create_meal(self, payload: dict[str, object]) -> MealEntry:
        """Create a meal log and return it."""
        response = execute(self.client.table(TABLE).insert(payload))
        if not response.data:
            raise StorageError("Failed to create meal log")
        return _parse_meal(response.data[0])

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> MealEntry:
        """Update a meal log and return it."""
        response = execute(
            self.client.table(TABLE).update(payload).eq("id", str(meal_id))
        )
        if not response.data:
            raise StorageError("Failed to update meal log")
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal log."""
        execute(self.client.table(TABLE).delete().eq("id", str(meal_id)))

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        """Return a meal log by id, if present."""
        response = execute(
            self.client.table(TABLE).select("*").eq("id", str(meal_id)).limit(1)
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, start: datetime, end: datetime) -> list[MealEntry]:
        """Return meals logged in the time range, oldest first."""
        response = execute(
            self.client.table(TABLE)
            .select("*")
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
        )
        return [_parse_meal(row) for row in response.data or []]


def _parse_meal(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        meal_type=MealType(str(row.get("meal_type") or MealType.SNACK.value)),
        weight=float(row.get("weight") or 0.0),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        logged_at=parse_timestamp(row.get("logged_at")),
    )
