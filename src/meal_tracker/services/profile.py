"""User profile and body metric calculations."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from meal_tracker.config import US_SYSTEM, parse_measurement_system
from meal_tracker.domain.profile import BodyInsights, UserProfile
from meal_tracker.errors import StorageError
from meal_tracker.services.events import ChangeFeed

_logger = logging.getLogger(__name__)

ENTITY = "user_profile"
LBS_PER_KG = 2.20462
METERS_PER_INCH = 0.0254
UNDERWEIGHT_BMI = 18.5
OVERWEIGHT_BMI = 25.0
OBESE_BMI = 30.0
IDEAL_BMI = 22.0


class ProfileRepository(Protocol):
    """Persistence interface for the user profile."""

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Create or replace the stored profile."""


def parse_measurement(text: str | None) -> float:
    """Parse a height or weight, accepting comma decimals."""
    if not text:
        return 0.0
    try:
        return float(text.strip().replace(",", "."))
    except ValueError:
        return 0.0


def height_in_meters(height: float, measurement_system: str) -> float:
    """Convert a height in cm (EU) or feet (US) to meters."""
    if height <= 0:
        return 0.0
    if parse_measurement_system(measurement_system) == US_SYSTEM:
        return height * 12 * METERS_PER_INCH
    return height / 100


def compute_bmi(height: float, weight: float, measurement_system: str) -> float:
    """Compute BMI; non-positive inputs give 0."""
    if height <= 0 or weight <= 0:
        return 0.0
    if parse_measurement_system(measurement_system) == US_SYSTEM:
        height_inches = height * 12
        return weight / (height_inches * height_inches) * 703
    meters = height / 100
    return weight / (meters * meters)


def bmi_category(bmi: float) -> str | None:
    if bmi <= 0:
        return None
    if bmi < UNDERWEIGHT_BMI:
        return "Underweight"
    if bmi < OVERWEIGHT_BMI:
        return "Normal weight"
    if bmi < OBESE_BMI:
        return "Overweight"
    return "Obese"


def body_insights(profile: UserProfile) -> BodyInsights:
    """Derive BMI insights expressed in the profile's weight unit."""
    system = parse_measurement_system(profile.measurement_system)
    is_us = system == US_SYSTEM
    bmi = compute_bmi(profile.height, profile.weight, system)
    meters = height_in_meters(profile.height, system)
    height_squared = meters * meters
    weight_kg = profile.weight / LBS_PER_KG if is_us else profile.weight

    if bmi >= OBESE_BMI:
        to_lose = weight_kg - OBESE_BMI * height_squared
    elif bmi >= OVERWEIGHT_BMI:
        to_lose = weight_kg - OVERWEIGHT_BMI * height_squared
    else:
        to_lose = 0.0

    factor = LBS_PER_KG if is_us else 1.0
    return BodyInsights(
        bmi=bmi,
        category=bmi_category(bmi),
        weight_unit="lbs" if is_us else "kg",
        healthy_weight_low=UNDERWEIGHT_BMI * height_squared * factor,
        healthy_weight_high=OVERWEIGHT_BMI * height_squared * factor,
        ideal_weight=IDEAL_BMI * height_squared * factor,
        weight_to_lose=max(to_lose, 0.0) * factor,
    )


@dataclass
class ProfileService:
    """Service for onboarding profile storage."""

    repository: ProfileRepository
    changes: ChangeFeed

    def get_profile(self) -> UserProfile | None:
        try:
            return self.repository.get_profile()
        except StorageError:
            _logger.exception("Failed to fetch user profile")
            return None

    def complete_onboarding(self, profile: UserProfile) -> UserProfile | None:
        """Store the profile and mark onboarding complete."""
        completed = replace(
            profile,
            measurement_system=parse_measurement_system(profile.measurement_system),
            completed_onboarding_at=profile.completed_onboarding_at
            or datetime.now(tz=UTC),
        )
        try:
            saved = self.repository.save_profile(completed)
        except StorageError:
            _logger.exception("Failed to save user profile")
            return None
        self.changes.notify(ENTITY, "updated")
        return saved

    def get_insights(self) -> BodyInsights | None:
        profile = self.get_profile()
        if profile is None:
            return None
        return body_insights(profile)
