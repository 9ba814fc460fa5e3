"""State of the log-meal form.

The form holds the raw text of each field. Accepting a food suggestion puts
the form into scaling mode, where calories and protein are derived from the
weight using the suggestion's per-gram ratios. Typing a different calorie or
protein value, or renaming the food, leaves scaling mode until another
suggestion is applied.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from meal_tracker.domain.foods import FoodProfile, NutritionRatios
from meal_tracker.domain.meals import MealEntry, MealType
from meal_tracker.services.foods import FoodMemoryService
from meal_tracker.services.meals import MealInput, MealLogService, default_meal_type
from meal_tracker.services.scaling import (
    apply_profile,
    format_calories,
    format_protein,
    parse_number,
    rescale,
)


def _current_meal_type() -> MealType:
    return default_meal_type(datetime.now().astimezone().hour)


@dataclass
class MealForm:
    """Editable meal fields with food memory suggestions."""

    food_memory: FoodMemoryService
    name: str = ""
    weight: str = ""
    calories: str = ""
    protein: str = ""
    meal_type: MealType = field(default_factory=_current_meal_type)
    remember: bool = True
    suggestion: FoodProfile | None = None
    ratios: NutritionRatios | None = None
    applied_name: str | None = None

    @property
    def is_scaling(self) -> bool:
        return self.ratios is not None

    def set_name(self, value: str) -> None:
        """Update the name and look up a matching remembered food."""
        if self.is_scaling and value != self.applied_name:
            self.stop_scaling()
        self.name = value
        self.suggestion = self.food_memory.suggest(value)

    def set_weight(self, value: str) -> None:
        """Update the weight, rescaling nutrition in scaling mode."""
        self.weight = value
        if self.ratios is None:
            return
        scaled = rescale(
            parse_number(value),
            self.ratios.calories_per_gram,
            self.ratios.protein_per_gram,
        )
        self.calories = format_calories(scaled.calories)
        self.protein = format_protein(scaled.protein)

    def set_calories(self, value: str) -> None:
        if self.is_scaling and value != self.calories:
            self.stop_scaling()
        self.calories = value

    def set_protein(self, value: str) -> None:
        if self.is_scaling and value != self.protein:
            self.stop_scaling()
        self.protein = value

    def apply_suggestion(self, profile: FoodProfile | None = None) -> bool:
        """Fill the form from a remembered food.

        Profiles without a reference weight only fill in the name.
        """
        chosen = profile or self.suggestion
        if chosen is None:
            return False
        self.name = chosen.name
        if chosen.has_ratios:
            self.ratios = apply_profile(chosen)
            self.applied_name = chosen.name
            self.weight = ""
            self.calories = ""
            self.protein = ""
        self.suggestion = None
        return True

    def stop_scaling(self) -> None:
        self.ratios = None
        self.applied_name = None

    def to_input(self, logged_at: datetime | None = None) -> MealInput:
        """Convert field text into meal values; invalid numbers become 0."""
        return MealInput(
            name=self.name,
            meal_type=self.meal_type,
            weight=parse_number(self.weight) or 0.0,
            calories=parse_number(self.calories) or 0.0,
            protein=parse_number(self.protein) or 0.0,
            logged_at=logged_at or datetime.now(tz=UTC),
        )

    def submit(
        self, meal_service: MealLogService, logged_at: datetime | None = None
    ) -> MealEntry | None:
        """Save the form as a new meal."""
        return meal_service.log_meal(self.to_input(logged_at), remember=self.remember)
