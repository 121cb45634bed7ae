"""Recipe pricing backed by the recipe store."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_costing.domain.costing import CostProjection, IngredientUsage
from recipe_costing.domain.recipes import IngredientCostChange, Recipe, RecipeLine
from recipe_costing.services.cache import Cache
from recipe_costing.services.costing import project_cost

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes and their ingredient lines."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by name."""

    def list_recipe_lines(self, recipe_ids: list[UUID]) -> dict[UUID, list[RecipeLine]]:
        """Return ingredient lines grouped by recipe id."""

    def list_recipe_ids_for_ingredient(self, ingredient_id: UUID) -> list[UUID]:
        """Return ids of recipes that use an ingredient."""


@dataclass(frozen=True)
class _CachedProjection:
    snapshot: tuple[tuple[object, ...], ...]
    projection: CostProjection


@dataclass
class RecipePricingService:
    """Computes and caches cost projections for stored recipes."""

    repository: RecipeRepository
    cache: Cache
    cache_ttl_seconds: int = 300

    def get_projection(self, recipe_id: UUID) -> CostProjection | None:
        """Return the projection for one recipe, or None without ingredients."""
        lines = self.repository.list_recipe_lines([recipe_id]).get(recipe_id, [])
        return self._project(recipe_id, lines)

    def price_recipes(self, recipe_ids: list[UUID]) -> dict[UUID, CostProjection]:
        """Project costs for many recipes with a single store read.

        Recipes without ingredients are left out. A recipe that fails to
        price is logged and skipped.
        """
        if not recipe_ids:
            return {}
        grouped = self.repository.list_recipe_lines(recipe_ids)
        prices: dict[UUID, CostProjection] = {}
        for recipe_id in recipe_ids:
            try:
                projection = self._project(recipe_id, grouped.get(recipe_id, []))
            except Exception:
                _logger.exception("Failed to price recipe %s", recipe_id)
                continue
            if projection is not None:
                prices[recipe_id] = projection
        return prices

    def price_all_recipes(self) -> dict[UUID, CostProjection]:
        """Project costs for every stored recipe."""
        recipes = self.repository.list_recipes()
        return self.price_recipes([recipe.id for recipe in recipes])

    def handle_ingredient_change(
        self, change: IngredientCostChange
    ) -> dict[UUID, CostProjection]:
        """Recompute the recipes affected by an ingredient change."""
        if not change.affects_cost:
            _logger.info(
                "Ingredient %s changed without cost impact", change.ingredient_id
            )
            return {}
        recipe_ids = self.repository.list_recipe_ids_for_ingredient(
            change.ingredient_id
        )
        for recipe_id in recipe_ids:
            self.cache.delete(_cache_key(recipe_id))
        _logger.info(
            "Ingredient %s cost changed; repricing %s recipes",
            change.ingredient_id,
            len(recipe_ids),
        )
        return self.price_recipes(recipe_ids)

    def _project(
        self, recipe_id: UUID, lines: list[RecipeLine]
    ) -> CostProjection | None:
        snapshot = _snapshot(lines)
        cached = self.cache.get(_cache_key(recipe_id))
        if isinstance(cached, _CachedProjection) and cached.snapshot == snapshot:
            return cached.projection

        projection = project_cost(usages_for(lines))
        if projection is None:
            self.cache.delete(_cache_key(recipe_id))
            return None
        self.cache.set(
            _cache_key(recipe_id),
            _CachedProjection(snapshot=snapshot, projection=projection),
            ttl_seconds=self.cache_ttl_seconds,
        )
        return projection


def usages_for(lines: list[RecipeLine]) -> list[IngredientUsage]:
    """Map stored recipe lines to costing inputs."""
    return [
        IngredientUsage(
            quantity=line.quantity,
            unit=line.unit,
            cost_per_base_unit=line.ingredient.cost_per_unit,
            base_unit=line.ingredient.unit,
            ingredient_name=line.ingredient.name,
            waste_percent=line.ingredient.waste_percent,
            yield_percent=line.ingredient.yield_percent,
        )
        for line in lines
    ]


def _cache_key(recipe_id: UUID) -> str:
    return f"projection:{recipe_id}"


def _snapshot(lines: list[RecipeLine]) -> tuple[tuple[object, ...], ...]:
    return tuple(
        (
            str(line.ingredient.id),
            line.ingredient.name,
            line.quantity,
            line.unit,
            line.ingredient.cost_per_unit,
            line.ingredient.unit,
            line.ingredient.waste_percent,
            line.ingredient.yield_percent,
        )
        for line in lines
    )
