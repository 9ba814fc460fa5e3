"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from meal_tracker.domain.meals import MealEntry, MealType
from meal_tracker.errors import StorageError
from meal_tracker.services.events import ChangeFeed
from meal_tracker.services.foods import FoodMemoryService

_logger = logging.getLogger(__name__)

ENTITY = "meal_log"


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def create_meal(self, payload: dict[str, object]) -> MealEntry:
        """Create a meal log and return it."""

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> MealEntry:
        """Update a meal log and return it."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal log."""

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        """Return a meal log by id, if present."""

    def list_meals(self, start: datetime, end: datetime) -> list[MealEntry]:
        """Return meals with start <= logged_at < end, oldest first."""


@dataclass(frozen=True)
class MealInput:
    """Values entered for a meal."""

    name: str
    meal_type: MealType
    weight: float
    calories: float
    protein: float
    logged_at: datetime


def default_meal_type(hour: int) -> MealType:
    """Pick a meal type from the hour of day."""
    if 5 <= hour < 11:  # noqa: PLR2004
        return MealType.BREAKFAST
    if 11 <= hour < 16:  # noqa: PLR2004
        return MealType.LUNCH
    if 16 <= hour < 22:  # noqa: PLR2004
        return MealType.DINNER
    return MealType.SNACK


@dataclass
class MealLogService:
    """Service that persists meal logs and feeds the food memory."""

    repository: MealLogRepository
    food_memory: FoodMemoryService
    changes: ChangeFeed

    def log_meal(self, meal: MealInput, remember: bool = True) -> MealEntry | None:
        """Persist a new meal, optionally remembering its nutrition."""
        try:
            entry = self.repository.create_meal(_payload(meal))
        except StorageError:
            _logger.exception("Failed to save meal log: name=%s", meal.name)
            return None
        if remember:
            self._remember(meal)
        self.changes.notify(ENTITY, "created", entry.id)
        return entry

    def update_meal(
        self, meal_id: UUID, meal: MealInput, remember: bool = True
    ) -> MealEntry | None:
        """Update a logged meal, optionally remembering its nutrition."""
        try:
            if self.repository.get_meal(meal_id) is None:
                return None
            entry = self.repository.update_meal(meal_id, _payload(meal))
        except StorageError:
            _logger.exception("Failed to update meal log: meal_id=%s", meal_id)
            return None
        if remember:
            self._remember(meal)
        self.changes.notify(ENTITY, "updated", entry.id)
        return entry

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a logged meal."""
        try:
            self.repository.delete_meal(meal_id)
        except StorageError:
            _logger.exception("Failed to delete meal log: meal_id=%s", meal_id)
            return False
        self.changes.notify(ENTITY, "deleted", meal_id)
        return True

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        """Return a logged meal by id."""
        try:
            return self.repository.get_meal(meal_id)
        except StorageError:
            _logger.exception("Failed to fetch meal log: meal_id=%s", meal_id)
            return None

    def list_between(self, start: datetime, end: datetime) -> list[MealEntry]:
        """Return meals logged in a time range."""
        try:
            return self.repository.list_meals(start, end)
        except StorageError:
            _logger.exception("Failed to list meal logs")
            return []

    def _remember(self, meal: MealInput) -> None:
        if not meal.name:
            return
        if meal.weight > 0 or meal.calories > 0 or meal.protein > 0:
            self.food_memory.remember(
                meal.name, meal.weight, meal.calories, meal.protein
            )


def _payload(meal: MealInput) -> dict[str, object]:
    return {
        "name": meal.name,
        "meal_type": meal.meal_type.value,
        "weight": meal.weight,
        "calories": meal.calories,
        "protein": meal.protein,
        "logged_at": meal.logged_at.isoformat(),
    }
