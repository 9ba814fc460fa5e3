"""Services for the personal food memory."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from meal_tracker.domain.foods import FoodProfile
from meal_tracker.errors import StorageError
from meal_tracker.services.events import ChangeFeed
from meal_tracker.services.matching import MIN_QUERY_LENGTH, find_best_match

_logger = logging.getLogger(__name__)

ENTITY = "food_memory"


class FoodMemoryRepository(Protocol):
    """Persistence interface for remembered foods."""

    def create_food(self, payload: dict[str, object]) -> FoodProfile:
        """Create a food profile and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodProfile:
        """Update a food profile and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food profile."""

    def get_food(self, food_id: UUID) -> FoodProfile | None:
        """Return a food profile by id, if present."""

    def find_by_name(self, name: str) -> FoodProfile | None:
        """Return a profile whose name equals name, ignoring case."""

    def find_candidates(self, query: str, limit: int) -> list[FoodProfile]:
        """Return profiles starting with or containing the query as a word.

        Results are ordered by creation time, most recent first.
        """

    def list_foods(self) -> list[FoodProfile]:
        """Return all profiles, most recently created first."""


@dataclass
class FoodMemoryService:
    """Application service for remembering and suggesting foods."""

    repository: FoodMemoryRepository
    changes: ChangeFeed

    def suggest(self, query: str) -> FoodProfile | None:
        """Return the remembered food to offer for a typed name."""
        if len(query) < MIN_QUERY_LENGTH:
            return None
        try:
            candidates = self.repository.find_candidates(query, limit=1)
        except StorageError:
            _logger.exception("Failed to query food memory: query=%s", query)
            return None
        return find_best_match(query, candidates)

    def remember(
        self, name: str, weight: float, calories: float, protein: float
    ) -> FoodProfile | None:
        """Create or refresh the profile stored under a name."""
        payload: dict[str, object] = {
            "name": name,
            "weight": weight,
            "calories": calories,
            "protein": protein,
            "created_at": datetime.now(tz=UTC).isoformat(),
        }
        try:
            existing = self.repository.find_by_name(name)
            if existing:
                food = self.repository.update_food(existing.id, payload)
                action = "updated"
            else:
                food = self.repository.create_food(payload)
                action = "created"
        except StorageError:
            _logger.exception("Failed to save food memory: name=%s", name)
            return None
        self.changes.notify(ENTITY, action, food.id)
        return food

    def update_food(
        self,
        food_id: UUID,
        name: str,
        weight: float,
        calories: float,
        protein: float,
    ) -> FoodProfile | None:
        """Edit a saved food, refreshing its creation time."""
        try:
            if self.repository.get_food(food_id) is None:
                return None
            food = self.repository.update_food(
                food_id,
                {
                    "name": name,
                    "weight": weight,
                    "calories": calories,
                    "protein": protein,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                },
            )
        except StorageError:
            _logger.exception("Failed to update food: food_id=%s", food_id)
            return None
        self.changes.notify(ENTITY, "updated", food.id)
        return food

    def delete_food(self, food_id: UUID) -> bool:
        """Delete a saved food."""
        try:
            self.repository.delete_food(food_id)
        except StorageError:
            _logger.exception("Failed to delete food: food_id=%s", food_id)
            return False
        self.changes.notify(ENTITY, "deleted", food_id)
        return True

    def get_food(self, food_id: UUID) -> FoodProfile | None:
        """Return a saved food by id."""
        try:
            return self.repository.get_food(food_id)
        except StorageError:
            _logger.exception("Failed to fetch food: food_id=%s", food_id)
            return None

    def list_foods(self) -> list[FoodProfile]:
        """Return saved foods, most recently created first."""
        try:
            return self.repository.list_foods()
        except StorageError:
            _logger.exception("Failed to list saved foods")
            return []
