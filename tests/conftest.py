"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from recipe_costing.config import Settings
from recipe_costing.containers import AppContainer
from recipe_costing.domain.recipes import Ingredient, Recipe, RecipeLine
from recipe_costing.services.cache import InMemoryCache
from recipe_costing.services.pricing import RecipePricingService, RecipeRepository


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[UUID, Recipe] = field(default_factory=dict)
    lines: list[RecipeLine] = field(default_factory=list)
    line_reads: int = 0

    def add_recipe(self, name: str, yield_quantity: float = 1) -> Recipe:
        recipe = Recipe(
            id=uuid4(),
            name=name,
            yield_quantity=yield_quantity,
            yield_unit="servings",
            instructions=None,
        )
        self.recipes[recipe.id] = recipe
        return recipe

    def add_line(
        self,
        recipe_id: UUID,
        ingredient: Ingredient,
        quantity: float,
        unit: str | None,
    ) -> RecipeLine:
        line = RecipeLine(
            id=uuid4(),
            recipe_id=recipe_id,
            quantity=quantity,
            unit=unit,
            ingredient=ingredient,
        )
        self.lines.append(line)
        return line

    def replace_ingredient(self, ingredient: Ingredient) -> None:
        self.lines = [
            RecipeLine(
                id=line.id,
                recipe_id=line.recipe_id,
                quantity=line.quantity,
                unit=line.unit,
                ingredient=ingredient,
            )
            if line.ingredient.id == ingredient.id
            else line
            for line in self.lines
        ]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def list_recipes(self) -> list[Recipe]:
        return sorted(self.recipes.values(), key=lambda recipe: recipe.name)

    def list_recipe_lines(self, recipe_ids: list[UUID]) -> dict[UUID, list[RecipeLine]]:
        self.line_reads += 1
        grouped: dict[UUID, list[RecipeLine]] = {}
        for line in self.lines:
            if line.recipe_id in recipe_ids:
                grouped.setdefault(line.recipe_id, []).append(line)
        return grouped

    def list_recipe_ids_for_ingredient(self, ingredient_id: UUID) -> list[UUID]:
        recipe_ids: list[UUID] = []
        for line in self.lines:
            if line.ingredient.id == ingredient_id and line.recipe_id not in recipe_ids:
                recipe_ids.append(line.recipe_id)
        return recipe_ids


def make_ingredient(  # noqa: PLR0913
    name: str,
    cost_per_unit: float,
    unit: str | None = "g",
    waste_percent: float | None = None,
    yield_percent: float | None = None,
    ingredient_id: UUID | None = None,
) -> Ingredient:
    return Ingredient(
        id=ingredient_id or uuid4(),
        name=name,
        cost_per_unit=cost_per_unit,
        unit=unit,
        waste_percent=waste_percent,
        yield_percent=yield_percent,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0.c2lnbmF0dXJl"
        ),
        webhook_secret="webhook-secret",
    )


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def pricing_service(
    recipe_repository: InMemoryRecipeRepository,
) -> RecipePricingService:
    return RecipePricingService(repository=recipe_repository, cache=InMemoryCache())


@pytest.fixture
def container(
    settings: Settings,
    pricing_service: RecipePricingService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        pricing_service=pricing_service,
    )
