from __future__ import annotations

import sys
from datetime import date, datetime, timezone
from pathlib import Path

from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fos.api.dependencies import food_of_the_day_use_case
from fos.application.use_cases.food_of_the_day import GetFoodOfTheDay
from fos.domain.menu.rotation import days_since_epoch
from fos.infrastructure.db.repositories.catalog_repo import SqlAlchemyCatalogRepository


def test_foods_endpoint_lists_catalog_with_sizes(client: TestClient) -> None:
    response = client.get("/api/foods")

    assert response.status_code == 200
    foods = response.json()
    assert [food["id"] for food in foods] == [1, 2, 3, 4, 5]
    assert foods[0] == {
        "id": 1,
        "name": "The Margherita Pizza",
        "category": "Classic",
        "description": "Tomato, mozzarella, basil",
        "image": "/foods/1.webp",
        "sizes": {"small": 12.0, "medium": 16.0, "large": 20.5},
    }


def test_food_of_the_day_endpoint(client: TestClient, catalog_repository: SqlAlchemyCatalogRepository) -> None:
    fixed_now = datetime(2026, 10, 18, 15, 0, tzinfo=timezone.utc)
    client.app.dependency_overrides[food_of_the_day_use_case] = lambda: GetFoodOfTheDay(
        catalog_repository, clock=lambda: fixed_now
    )
    try:
        response = client.get("/api/food-of-the-day")
    finally:
        client.app.dependency_overrides.clear()

    assert response.status_code == 200
    expected_id = days_since_epoch(date(2026, 10, 18)) % 5 + 1
    assert response.json()["id"] == expected_id
    assert set(response.json()["sizes"]) == {"small", "medium", "large"}


def test_food_of_the_day_default_clock(client: TestClient) -> None:
    response = client.get("/api/food-of-the-day")

    assert response.status_code == 200
    assert 1 <= response.json()["id"] <= 5


def test_catalog_repository_get_food(catalog_repository: SqlAlchemyCatalogRepository) -> None:
    food = catalog_repository.get_food(3)

    assert food is not None
    assert food.food_type.name == "The Hawaiian Pizza"
    assert food.price_for("MEDIUM") == food.sizes["medium"]
    assert catalog_repository.get_food(404) is None


def test_contact_form(client: TestClient) -> None:
    accepted = client.post(
        "/api/contact",
        json={"name": "Sam", "email": "sam@example.com", "message": "Great pizza"},
    )
    rejected = client.post("/api/contact", json={"name": "Sam", "email": "", "message": "Hi"})

    assert accepted.status_code == 200
    assert accepted.json() == {"success": "Message received"}
    assert rejected.status_code == 400
    assert rejected.json()["error"]["message"] == "All fields are required"


def test_static_files_are_served(client: TestClient) -> None:
    response = client.get("/public/hello.txt")

    assert response.status_code == 200
    assert response.text == "hello"
