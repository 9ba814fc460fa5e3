"""Daily aggregation of meals and water."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from meal_tracker.domain.meals import MealEntry, MealGroup
from meal_tracker.domain.stats import (
    DailyMealSummary,
    DailyMealTotals,
    DailyWaterTotal,
)
from meal_tracker.domain.water import WaterEntry
from meal_tracker.services.meals import MealLogService
from meal_tracker.services.water import WaterLogService


def day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return the start of a day and the start of the next one."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    return start, start + timedelta(days=1)


def aggregate_meals(
    entries: Iterable[MealEntry], day: date, tz: ZoneInfo
) -> DailyMealTotals:
    """Sum calories and protein of meals logged on a day."""
    start, end = day_bounds(day, tz)
    calories = 0.0
    protein = 0.0
    for entry in entries:
        if not start <= entry.logged_at < end:
            continue
        calories += entry.calories
        protein += entry.protein
    return DailyMealTotals(day=day, calories=calories, protein=protein)


def aggregate_water(
    entries: Iterable[WaterEntry], day: date, tz: ZoneInfo
) -> DailyWaterTotal:
    """Sum water logged on a day in milliliters."""
    start, end = day_bounds(day, tz)
    volume = sum(
        entry.volume_ml for entry in entries if start <= entry.logged_at < end
    )
    return DailyWaterTotal(day=day, volume_ml=volume)


def group_meals_by_type(entries: Iterable[MealEntry]) -> list[MealGroup]:
    """Group meals by type, ordering groups alphabetically by title."""
    grouped: dict[str, list[MealEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.meal_type.title, []).append(entry)
    return [
        MealGroup(meal_type=items[0].meal_type, entries=items)
        for _, items in sorted(grouped.items())
    ]


@dataclass
class SummaryService:
    """Builds daily summaries in the configured timezone."""

    meal_service: MealLogService
    water_service: WaterLogService
    timezone_name: str = "UTC"

    def get_meal_summary(self, day: date) -> DailyMealSummary:
        """Return totals and grouped meals for a day."""
        tz = ZoneInfo(self.timezone_name)
        start, end = day_bounds(day, tz)
        meals = sorted(
            self.meal_service.list_between(start, end),
            key=lambda entry: entry.logged_at,
        )
        return DailyMealSummary(
            totals=aggregate_meals(meals, day, tz),
            groups=group_meals_by_type(meals),
        )

    def get_water_total(self, day: date) -> tuple[DailyWaterTotal, list[WaterEntry]]:
        """Return the day's water total and its entries."""
        tz = ZoneInfo(self.timezone_name)
        start, end = day_bounds(day, tz)
        entries = sorted(
            self.water_service.list_between(start, end),
            key=lambda entry: entry.logged_at,
        )
        return aggregate_water(entries, day, tz), entries

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()
