"""Supabase implementation for the food memory."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_tracker.adapters.supabase_support import (
    escape_like,
    execute,
    parse_timestamp,
)
from meal_tracker.domain.foods import FoodProfile
from meal_tracker.errors import StorageError
from meal_tracker.services.foods import FoodMemoryRepository
from meal_tracker.services.matching import is_candidate

TABLE = "food_memory"


@dataclass
class SupabaseFoodMemoryRepository(FoodMemoryRepository):
    """Supabase-backed repository for remembered foods."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> FoodProfile:
        """Create a food profile and return it."""
        response = execute(self.client.table(TABLE).insert(payload))
        if not response.data:
            raise StorageError("Failed to create food profile")
        return _parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodProfile:
        """Update a food profile and return it."""
        response = execute(
            self.client.table(TABLE).update(payload).eq("id", str(food_id))
        )
        if not response.data:
            raise StorageError("Failed to update food profile")
        return _parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food profile."""
        execute(self.client.table(TABLE).delete().eq("id", str(food_id)))

    def get_food(self, food_id: UUID) -> FoodProfile | None:
        """Return a food profile by id, if present."""
        response = execute(
            self.client.table(TABLE).select("*").eq("id", str(food_id)).limit(1)
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def find_by_name(self, name: str) -> FoodProfile | None:
        """Return a profile whose name equals name, ignoring case."""
        response = execute(
            self.client.table(TABLE)
            .select("*")
            .ilike("name", escape_like(name))
            .order("created_at", desc=True)
        )
        for row in response.data or []:
            food = _parse_food(row)
            if food.name.lower() == name.lower():
                return food
        return None

    def find_candidates(self, query: str, limit: int) -> list[FoodProfile]:
        """Return prefix and word matches, most recently created first."""
        escaped = escape_like(query)
        foods: dict[UUID, FoodProfile] = {}
        for pattern in (f"{escaped}%", f"% {escaped}%"):
            request = (
                self.client.table(TABLE)
                .select("*")
                .ilike("name", pattern)
                .order("created_at", desc=True)
            )
            if "*" not in query:
                request = request.limit(limit)
            for row in execute(request).data or []:
                food = _parse_food(row)
                if is_candidate(food.name, query):
                    foods[food.id] = food
        ranked = sorted(foods.values(), key=lambda food: food.created_at, reverse=True)
        return ranked[:limit]

    def list_foods(self) -> list[FoodProfile]:
        """Return all profiles, most recently created first."""
        response = execute(
            self.client.table(TABLE).select("*").order("created_at", desc=True)
        )
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> FoodProfile:
    """Parse a food memory row into a domain model."""
    return FoodProfile(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        weight=float(row.get("weight") or 0.0),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        created_at=parse_timestamp(row.get("created_at")),
    )
