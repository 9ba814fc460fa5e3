"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class MealType(str, Enum):
    """Meal categories a log entry can belong to."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    @property
    def title(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        return _ICONS[self]


_ICONS = {
    MealType.BREAKFAST: "sunrise.fill",
    MealType.LUNCH: "fork.knife",
    MealType.DINNER: "moon.stars.fill",
    MealType.SNACK: "cup.and.saucer.fill",
}


@dataclass(frozen=True)
class MealEntry:
    """A logged meal."""

    id: UUID
    name: str
    meal_type: MealType
    weight: float
    calories: float
    protein: float
    logged_at: datetime


@dataclass(frozen=True)
class MealGroup:
    """Meals of one type logged on the same day."""

    meal_type: MealType
    entries: list[MealEntry]
