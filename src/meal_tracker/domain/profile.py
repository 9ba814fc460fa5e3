"""Domain models for the user profile and body metrics."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserProfile:
    """Details collected during onboarding."""

    name: str
    age: int | None
    gender: str | None
    height: float
    weight: float
    measurement_system: str
    completed_onboarding_at: datetime | None = None

    @property
    def has_completed_onboarding(self) -> bool:
        return self.completed_onboarding_at is not None


@dataclass(frozen=True)
class BodyInsights:
    """BMI-derived insights in the profile's weight unit."""

    bmi: float
    category: str | None
    weight_unit: str
    healthy_weight_low: float
    healthy_weight_high: float
    ideal_weight: float
    weight_to_lose: float
