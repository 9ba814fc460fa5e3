"""Meal log API endpoints."""

from dataclasses import asdict
from datetime import date
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Request, status

from meal_tracker.api.auth import require_api_token
from meal_tracker.api.dependencies import (
    get_container,
    not_found,
    resolve_logged_at,
    storage_unavailable,
)
from meal_tracker.api.models import MealRequest
from meal_tracker.domain.meals import MealEntry
from meal_tracker.services.meals import MealInput, default_meal_type

router = APIRouter(
    prefix="/meals", tags=["meals"], dependencies=[Depends(require_api_token)]
)


@router.get("")
async def day_summary(request: Request, day: date | None = None) -> dict[str, object]:
    """Return the day's totals and meals grouped by type."""
    summary_service = get_container(request).summary_service
    resolved_day = day or summary_service.today()
    summary = summary_service.get_meal_summary(resolved_day)
    return {
        "day": resolved_day,
        "totals": {
            "calories": summary.totals.calories,
            "protein": summary.totals.protein,
        },
        "groups": [
            {
                "meal_type": group.meal_type,
                "icon": group.meal_type.icon,
                "count": len(group.entries),
                "entries": [asdict(entry) for entry in group.entries],
            }
            for group in summary.groups
        ],
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_meal(payload: MealRequest, request: Request) -> dict[str, object]:
    """Log a new meal."""
    container = get_container(request)
    meal = _meal_input(payload, container.settings.timezone)
    entry = container.meal_log_service.log_meal(meal, remember=payload.remember)
    if entry is None:
        raise storage_unavailable()
    return asdict(entry)


@router.put("/{meal_id}")
async def update_meal(
    meal_id: UUID, payload: MealRequest, request: Request
) -> dict[str, object]:
    """Edit a logged meal."""
    container = get_container(request)
    service = container.meal_log_service
    if service.get_meal(meal_id) is None:
        raise not_found("Meal")
    meal = _meal_input(payload, container.settings.timezone)
    entry: MealEntry | None = service.update_meal(
        meal_id, meal, remember=payload.remember
    )
    if entry is None:
        raise storage_unavailable()
    return asdict(entry)


@router.delete("/{meal_id}")
async def delete_meal(meal_id: UUID, request: Request) -> dict[str, str]:
    """Delete a logged meal."""
    if not get_container(request).meal_log_service.delete_meal(meal_id):
        raise storage_unavailable()
    return {"status": "ok"}


def _meal_input(payload: MealRequest, timezone_name: str) -> MealInput:
    logged_at = resolve_logged_at(payload.logged_at, timezone_name)
    meal_type = payload.meal_type or default_meal_type(
        logged_at.astimezone(ZoneInfo(timezone_name)).hour
    )
    return MealInput(
        name=payload.name,
        meal_type=meal_type,
        weight=payload.weight,
        calories=payload.calories,
        protein=payload.protein,
        logged_at=logged_at,
    )
