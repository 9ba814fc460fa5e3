"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from meal_tracker.api.app import create_app
from meal_tracker.containers import AppContainer
from tests.conftest import (
    InMemoryFoodMemoryRepository,
    InMemoryProfileRepository,
    InMemoryWaterLogRepository,
    make_food,
)

HEADERS = {"X-Api-Token": "api-token"}


def test_health_needs_no_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_routes_require_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/foods").status_code == 401
    assert client.get("/foods", headers={"X-Api-Token": "wrong"}).status_code == 401


def test_suggest_and_scale_food(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    repository = container.food_memory_service.repository
    assert isinstance(repository, InMemoryFoodMemoryRepository)
    food = repository.add(
        make_food("Chicken breast", weight=200, calories=300, protein=20)
    )

    suggestion = client.get("/foods/suggest", params={"q": "chick"}, headers=HEADERS)
    scaled = client.post(
        f"/foods/{food.id}/scale", json={"weight": "150"}, headers=HEADERS
    )
    blank = client.post(
        f"/foods/{food.id}/scale", json={"weight": "0"}, headers=HEADERS
    )

    assert suggestion.status_code == 200
    match = suggestion.json()["match"]
    assert match["name"] == "Chicken breast"
    assert match["ratios"]["calories_per_gram"] == pytest.approx(1.5)
    assert scaled.json()["calories"] == 225
    assert scaled.json()["protein_text"] == "15.0"
    assert blank.json()["calories_text"] == ""
    assert blank.json()["protein_text"] == ""


def test_short_query_has_no_suggestion(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    repository = container.food_memory_service.repository
    assert isinstance(repository, InMemoryFoodMemoryRepository)
    repository.add(make_food("Chicken breast"))

    response = client.get("/foods/suggest", params={"q": "ch"}, headers=HEADERS)

    assert response.json() == {"match": None}


def test_scale_food_without_weight(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    repository = container.food_memory_service.repository
    assert isinstance(repository, InMemoryFoodMemoryRepository)
    food = repository.add(make_food("Tea", weight=0, calories=2, protein=0))

    response = client.post(
        f"/foods/{food.id}/scale", json={"weight": 100}, headers=HEADERS
    )

    assert response.status_code == 422


def test_remember_and_list_foods(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    first = client.post(
        "/foods",
        json={"name": "Rice", "weight": 100, "calories": 130, "protein": 2.7},
        headers=HEADERS,
    )
    second = client.post(
        "/foods",
        json={"name": "rice", "weight": 200, "calories": 260, "protein": 5.4},
        headers=HEADERS,
    )
    listing = client.get("/foods", headers=HEADERS)

    assert first.status_code == 201
    assert second.json()["id"] == first.json()["id"]
    assert listing.json()["count"] == 1
    assert listing.json()["foods"][0]["weight"] == 200


def test_update_missing_food_returns_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        "/foods/00000000-0000-0000-0000-000000000000",
        json={"name": "Rice"},
        headers=HEADERS,
    )

    assert response.status_code == 404


def test_meal_summary_groups_by_type(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    for name, meal_type, hour, calories in (
        ("Soup", "Lunch", 12, 200),
        ("Oatmeal", "Breakfast", 8, 300),
        ("Apple", "Snack", 15, 80),
        ("Toast", "Breakfast", 9, 150),
    ):
        response = client.post(
            "/meals",
            json={
                "name": name,
                "meal_type": meal_type,
                "weight": 100,
                "calories": calories,
                "protein": 5,
                "logged_at": f"2025-06-01T{hour:02d}:00:00+00:00",
            },
            headers=HEADERS,
        )
        assert response.status_code == 201

    summary = client.get("/meals", params={"day": "2025-06-01"}, headers=HEADERS)

    data = summary.json()
    assert data["totals"]["calories"] == 730
    assert data["totals"]["protein"] == 20
    assert [group["meal_type"] for group in data["groups"]] == [
        "Breakfast",
        "Lunch",
        "Snack",
    ]
    breakfast = data["groups"][0]
    assert breakfast["icon"] == "sunrise.fill"
    assert [entry["name"] for entry in breakfast["entries"]] == ["Oatmeal", "Toast"]


def test_meal_defaults_type_from_hour(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals",
        json={"name": "Pasta", "logged_at": "2025-06-01T19:30:00+00:00"},
        headers=HEADERS,
    )

    assert response.json()["meal_type"] == "Dinner"


def test_water_total_converts_ounces(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    for amount, unit in ((8, "oz"), (200, "ml")):
        client.post(
            "/water",
            json={
                "amount": amount,
                "unit": unit,
                "logged_at": "2025-06-01T10:00:00+00:00",
            },
            headers=HEADERS,
        )

    response = client.get("/water", params={"day": "2025-06-01"}, headers=HEADERS)

    assert response.json()["total_ml"] == pytest.approx(436.588)
    assert len(response.json()["entries"]) == 2


def test_water_rejects_non_positive_amount(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/water", json={"amount": 0}, headers=HEADERS)

    assert response.status_code == 422


def test_storage_failure_returns_503(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    repository = container.water_log_service.repository
    assert isinstance(repository, InMemoryWaterLogRepository)
    repository.fail = True

    response = client.post("/water", json={"amount": 250}, headers=HEADERS)

    assert response.status_code == 503


def test_profile_onboarding_and_insights(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    repository = container.profile_service.repository
    assert isinstance(repository, InMemoryProfileRepository)

    missing = client.get("/profile", headers=HEADERS)
    saved = client.put(
        "/profile",
        json={"name": "Alex", "age": 30, "height": "180", "weight": "90,5"},
        headers=HEADERS,
    )
    insights = client.get("/profile/insights", headers=HEADERS)

    assert missing.status_code == 404
    assert saved.status_code == 200
    assert saved.json()["weight"] == 90.5
    assert saved.json()["has_completed_onboarding"] is True
    assert insights.json()["category"] == "Overweight"
    assert insights.json()["weight_unit"] == "kg"
