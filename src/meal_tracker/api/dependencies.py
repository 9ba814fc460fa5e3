"""Request helpers shared by the API routers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import HTTPException, Request, status

if TYPE_CHECKING:
    from meal_tracker.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def resolve_logged_at(value: datetime | None, timezone_name: str) -> datetime:
    """Default to now; naive times are read in the configured timezone."""
    if value is None:
        return datetime.now(tz=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=ZoneInfo(timezone_name))
    return value


def storage_unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Storage unavailable",
    )


def not_found(entity: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found"
    )
