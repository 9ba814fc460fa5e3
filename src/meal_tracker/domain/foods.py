"""Domain models for the personal food memory."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodProfile:
    """A remembered food with nutrition for a reference portion."""

    id: UUID
    name: str
    weight: float
    calories: float
    protein: float
    created_at: datetime

    @property
    def has_ratios(self) -> bool:
        """Whether the reference portion can be scaled."""
        return self.weight > 0


@dataclass(frozen=True)
class NutritionRatios:
    """Per-gram nutrition derived from a food profile."""

    calories_per_gram: float
    protein_per_gram: float


@dataclass(frozen=True)
class ScaledNutrition:
    """Nutrition for an entered portion; None renders as a blank field."""

    calories: int | None
    protein: float | None
