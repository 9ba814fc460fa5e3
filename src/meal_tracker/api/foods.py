"""Food memory API endpoints."""

from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from meal_tracker.api.auth import require_api_token
from meal_tracker.api.dependencies import get_container, not_found, storage_unavailable
from meal_tracker.api.models import FoodRequest, ScaleRequest
from meal_tracker.domain.foods import FoodProfile
from meal_tracker.services.scaling import (
    apply_profile,
    format_calories,
    format_protein,
    parse_number,
    rescale,
)

router = APIRouter(
    prefix="/foods", tags=["foods"], dependencies=[Depends(require_api_token)]
)


@router.get("")
async def list_foods(request: Request) -> dict[str, object]:
    """Return saved foods, most recently created first."""
    container = get_container(request)
    foods = container.food_memory_service.list_foods()
    return {"foods": [_food_payload(food) for food in foods], "count": len(foods)}


@router.get("/suggest")
async def suggest_food(request: Request, q: str = "") -> dict[str, object]:
    """Return the remembered food matching a typed name, if any."""
    container = get_container(request)
    match = container.food_memory_service.suggest(q)
    return {"match": _food_payload(match) if match else None}


@router.post("", status_code=status.HTTP_201_CREATED)
async def remember_food(payload: FoodRequest, request: Request) -> dict[str, object]:
    """Create or refresh a saved food by name."""
    container = get_container(request)
    food = container.food_memory_service.remember(
        payload.name, payload.weight, payload.calories, payload.protein
    )
    if food is None:
        raise storage_unavailable()
    return _food_payload(food)


@router.put("/{food_id}")
async def update_food(
    food_id: UUID, payload: FoodRequest, request: Request
) -> dict[str, object]:
    """Edit a saved food."""
    service = get_container(request).food_memory_service
    if service.get_food(food_id) is None:
        raise not_found("Food")
    food = service.update_food(
        food_id, payload.name, payload.weight, payload.calories, payload.protein
    )
    if food is None:
        raise storage_unavailable()
    return _food_payload(food)


@router.delete("/{food_id}")
async def delete_food(food_id: UUID, request: Request) -> dict[str, str]:
    """Delete a saved food."""
    if not get_container(request).food_memory_service.delete_food(food_id):
        raise storage_unavailable()
    return {"status": "ok"}


@router.post("/{food_id}/scale")
async def scale_food(
    food_id: UUID, payload: ScaleRequest, request: Request
) -> dict[str, object]:
    """Scale a saved food's nutrition to an entered portion weight."""
    food = get_container(request).food_memory_service.get_food(food_id)
    if food is None:
        raise not_found("Food")
    if not food.has_ratios:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Food has no reference weight",
        )
    ratios = apply_profile(food)
    weight = (
        payload.weight
        if isinstance(payload.weight, float)
        else parse_number(payload.weight)
    )
    scaled = rescale(weight, ratios.calories_per_gram, ratios.protein_per_gram)
    return {
        "calories": scaled.calories,
        "protein": scaled.protein,
        "calories_text": format_calories(scaled.calories),
        "protein_text": format_protein(scaled.protein),
        "ratios": asdict(ratios),
    }


def _food_payload(food: FoodProfile) -> dict[str, object]:
    payload: dict[str, object] = asdict(food)
    payload["ratios"] = asdict(apply_profile(food)) if food.has_ratios else None
    return payload
