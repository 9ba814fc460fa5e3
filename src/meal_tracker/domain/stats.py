"""Domain models for daily summaries."""

from dataclasses import dataclass
from datetime import date

from meal_tracker.domain.meals import MealGroup


@dataclass(frozen=True)
class DailyMealTotals:
    """Daily calorie and protein totals."""

    day: date
    calories: float
    protein: float


@dataclass(frozen=True)
class DailyWaterTotal:
    """Daily water volume in milliliters."""

    day: date
    volume_ml: float


@dataclass(frozen=True)
class DailyMealSummary:
    """Totals and grouped meals for a day."""

    totals: DailyMealTotals
    groups: list[MealGroup]
