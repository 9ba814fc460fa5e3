"""Pydantic models for API request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from meal_tracker.domain.meals import MealType
from meal_tracker.domain.water import WaterUnit


class FoodRequest(BaseModel):
    """Saved food payload."""

    name: str = Field(min_length=1)
    weight: float = Field(default=0.0, ge=0)
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)


class ScaleRequest(BaseModel):
    """Portion weight as typed into the weight field."""

    weight: float | str | None = None


class MealRequest(BaseModel):
    """Meal log payload."""

    name: str
    meal_type: MealType | None = None
    weight: float = Field(default=0.0, ge=0)
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    logged_at: datetime | None = None
    remember: bool = True


class WaterRequest(BaseModel):
    """Water log payload."""

    amount: float = Field(gt=0)
    unit: WaterUnit | None = None
    logged_at: datetime | None = None


class ProfileRequest(BaseModel):
    """Onboarding profile payload; height and weight accept comma decimals."""

    name: str
    age: int | None = None
    gender: str | None = None
    height: float | str
    weight: float | str
    measurement_system: str = "EU"
