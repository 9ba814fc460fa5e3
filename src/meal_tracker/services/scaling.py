"""Nutrition scaling from remembered per-gram ratios."""

import math
from decimal import ROUND_HALF_UP, Decimal

from meal_tracker.domain.foods import FoodProfile, NutritionRatios, ScaledNutrition


def apply_profile(profile: FoodProfile) -> NutritionRatios:
    """Derive per-gram ratios from a profile's reference portion."""
    if profile.weight <= 0:
        raise ValueError(f"Food profile {profile.name!r} has no reference weight")
    return NutritionRatios(
        calories_per_gram=profile.calories / profile.weight,
        protein_per_gram=profile.protein / profile.weight,
    )


def rescale(
    entered_weight: float | None,
    calories_per_gram: float,
    protein_per_gram: float,
) -> ScaledNutrition:
    """Scale per-gram ratios to an entered portion weight."""
    if entered_weight is None or not math.isfinite(entered_weight):
        return ScaledNutrition(calories=None, protein=None)
    if entered_weight <= 0:
        return ScaledNutrition(calories=None, protein=None)
    calories = entered_weight * calories_per_gram
    protein = entered_weight * protein_per_gram
    return ScaledNutrition(
        calories=_round_calories(calories) if calories > 0 else None,
        protein=float(f"{protein:.1f}") if protein > 0 else None,
    )


def parse_number(text: str | None) -> float | None:
    """Parse form input into a finite number, or None."""
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def format_calories(value: int | None) -> str:
    """Render scaled calories for an input field."""
    return "" if value is None else str(value)


def format_protein(value: float | None) -> str:
    """Render scaled protein for an input field."""
    return "" if value is None else f"{value:.1f}"


def _round_calories(value: float) -> int:
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
