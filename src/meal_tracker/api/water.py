"""Water log API endpoints."""

from dataclasses import asdict
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from meal_tracker.api.auth import require_api_token
from meal_tracker.api.dependencies import (
    get_container,
    not_found,
    resolve_logged_at,
    storage_unavailable,
)
from meal_tracker.api.models import WaterRequest

router = APIRouter(
    prefix="/water", tags=["water"], dependencies=[Depends(require_api_token)]
)


@router.get("")
async def day_total(request: Request, day: date | None = None) -> dict[str, object]:
    """Return the day's water total in milliliters and its entries."""
    summary_service = get_container(request).summary_service
    resolved_day = day or summary_service.today()
    total, entries = summary_service.get_water_total(resolved_day)
    return {
        "day": resolved_day,
        "total_ml": total.volume_ml,
        "entries": [asdict(entry) for entry in entries],
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_water(payload: WaterRequest, request: Request) -> dict[str, object]:
    """Log water intake."""
    container = get_container(request)
    entry = container.water_log_service.log_water(
        payload.amount,
        resolve_logged_at(payload.logged_at, container.settings.timezone),
        unit=payload.unit,
    )
    if entry is None:
        raise storage_unavailable()
    return asdict(entry)


@router.put("/{entry_id}")
async def update_water(
    entry_id: UUID, payload: WaterRequest, request: Request
) -> dict[str, object]:
    """Edit a water entry."""
    container = get_container(request)
    if container.water_log_service.get_water(entry_id) is None:
        raise not_found("Water entry")
    entry = container.water_log_service.update_water(
        entry_id,
        payload.amount,
        resolve_logged_at(payload.logged_at, container.settings.timezone),
        unit=payload.unit,
    )
    if entry is None:
        raise storage_unavailable()
    return asdict(entry)


@router.delete("/{entry_id}")
async def delete_water(entry_id: UUID, request: Request) -> dict[str, str]:
    """Delete a water entry."""
    if not get_container(request).water_log_service.delete_water(entry_id):
        raise storage_unavailable()
    return {"status": "ok"}
