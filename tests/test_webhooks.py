"""Tests for the ingredient change webhook."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from recipe_costing.api.app import create_app
from tests.conftest import InMemoryRecipeRepository, make_ingredient

HEADERS = {"X-Webhook-Secret": "webhook-secret"}


def _row(ingredient_id, cost: float) -> dict[str, object]:
    return {
        "id": str(ingredient_id),
        "ingredient_name": "Cheese Cheddar",
        "cost_per_unit": cost,
        "unit": "g",
        "trim_peel_waste_percentage": 0,
        "yield_percentage": 100,
    }


def test_webhook_requires_secret(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/webhooks/ingredients",
        json={"type": "UPDATE", "table": "ingredients"},
        headers={"X-Webhook-Secret": "wrong"},
    )

    assert response.status_code == 401


def test_webhook_reprices_recipes_on_cost_update(
    container, recipe_repository: InMemoryRecipeRepository
) -> None:
    client = TestClient(create_app(container))
    cheese = make_ingredient("Cheese Cheddar", 0.02, yield_percent=100)
    recipe = recipe_repository.add_recipe("Margherita Pizza")
    recipe_repository.add_line(recipe.id, cheese, 120, "g")
    recipe_repository.replace_ingredient(
        make_ingredient("Cheese Cheddar", 0.03, ingredient_id=cheese.id)
    )

    response = client.post(
        "/webhooks/ingredients",
        json={
            "type": "UPDATE",
            "table": "ingredients",
            "schema": "public",
            "record": _row(cheese.id, 0.03),
            "old_record": _row(cheese.id, 0.02),
        },
        headers=HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    projection = data["recipes"][str(recipe.id)]
    assert projection["cost_per_serving"] == pytest.approx(3.6)


def test_webhook_ignores_unchanged_costs(
    container, recipe_repository: InMemoryRecipeRepository
) -> None:
    client = TestClient(create_app(container))
    ingredient_id = uuid4()
    recipe = recipe_repository.add_recipe("Toastie")
    recipe_repository.add_line(
        recipe.id,
        make_ingredient(
            "Cheese Cheddar",
            0.02,
            waste_percent=0,
            yield_percent=100,
            ingredient_id=ingredient_id,
        ),
        50,
        "g",
    )

    response = client.post(
        "/webhooks/ingredients",
        json={
            "type": "UPDATE",
            "table": "ingredients",
            "record": _row(ingredient_id, 0.02),
            "old_record": _row(ingredient_id, 0.02),
        },
        headers=HEADERS,
    )

    assert response.json() == {"status": "ok", "recipes": {}}


def test_webhook_ignores_other_events(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/webhooks/ingredients",
        json={
            "type": "DELETE",
            "table": "ingredients",
            "old_record": _row(uuid4(), 0.02),
        },
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "ignored"


def test_webhook_rejects_record_without_id(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/webhooks/ingredients",
        json={
            "type": "UPDATE",
            "table": "ingredients",
            "record": {"cost_per_unit": 1},
        },
        headers=HEADERS,
    )

    assert response.status_code == 422


@pytest.mark.parametrize(
    "overrides", [{"id": "not-a-uuid"}, {"cost_per_unit": "cheap"}]
)
def test_webhook_rejects_malformed_record(container, overrides) -> None:
    client = TestClient(create_app(container))
    record = {**_row(uuid4(), 0.02), **overrides}

    response = client.post(
        "/webhooks/ingredients",
        json={"type": "UPDATE", "table": "ingredients", "record": record},
        headers=HEADERS,
    )

    assert response.status_code == 422


def test_webhook_accepts_null_cost_and_extra_columns(
    container, recipe_repository: InMemoryRecipeRepository
) -> None:
    client = TestClient(create_app(container))
    ingredient_id = uuid4()
    recipe = recipe_repository.add_recipe("Side Salad")
    recipe_repository.add_line(
        recipe.id,
        make_ingredient("Rocket", 0.0, ingredient_id=ingredient_id),
        40,
        "g",
    )
    record = {**_row(ingredient_id, 0.0), "cost_per_unit": None, "created_at": "now"}

    response = client.post(
        "/webhooks/ingredients",
        json={
            "type": "UPDATE",
            "table": "ingredients",
            "record": record,
            "old_record": _row(ingredient_id, 0.05),
        },
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["recipes"][str(recipe.id)]["cost_per_serving"] == 0
