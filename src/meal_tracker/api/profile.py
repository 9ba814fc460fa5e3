"""User profile API endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request

from meal_tracker.api.auth import require_api_token
from meal_tracker.api.dependencies import get_container, not_found, storage_unavailable
from meal_tracker.api.models import ProfileRequest
from meal_tracker.domain.profile import UserProfile
from meal_tracker.services.profile import parse_measurement

router = APIRouter(
    prefix="/profile", tags=["profile"], dependencies=[Depends(require_api_token)]
)


@router.get("")
async def get_profile(request: Request) -> dict[str, object]:
    """Return the onboarding profile."""
    profile = get_container(request).profile_service.get_profile()
    if profile is None:
        raise not_found("Profile")
    return _profile_payload(profile)


@router.put("")
async def save_profile(payload: ProfileRequest, request: Request) -> dict[str, object]:
    """Store the onboarding profile and mark onboarding complete."""
    profile = UserProfile(
        name=payload.name,
        age=payload.age,
        gender=payload.gender,
        height=_measurement(payload.height),
        weight=_measurement(payload.weight),
        measurement_system=payload.measurement_system,
    )
    saved = get_container(request).profile_service.complete_onboarding(profile)
    if saved is None:
        raise storage_unavailable()
    return _profile_payload(saved)


@router.get("/insights")
async def get_insights(request: Request) -> dict[str, object]:
    """Return BMI insights for the stored profile."""
    insights = get_container(request).profile_service.get_insights()
    if insights is None:
        raise not_found("Profile")
    return asdict(insights)


def _measurement(value: float | str) -> float:
    if isinstance(value, float):
        return value
    return parse_measurement(value)


def _profile_payload(profile: UserProfile) -> dict[str, object]:
    payload: dict[str, object] = asdict(profile)
    payload["has_completed_onboarding"] = profile.has_completed_onboarding
    return payload
