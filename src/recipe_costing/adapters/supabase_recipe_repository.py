"""Supabase implementation for recipes and recipe ingredients."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from recipe_costing.domain.recipes import Ingredient, Recipe, RecipeLine
from recipe_costing.services.pricing import RecipeRepository

_LINE_COLUMNS = (
    "id, recipe_id, quantity, unit, "
    "ingredients (id, ingredient_name, cost_per_unit, unit, "
    "trim_peel_waste_percentage, yield_percentage)"
)


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipe costing reads."""

    client: Client

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by name."""
        response = self.client.table("recipes").select("*").order("name").execute()
        return [_parse_recipe(row) for row in response.data or []]

    def list_recipe_lines(self, recipe_ids: list[UUID]) -> dict[UUID, list[RecipeLine]]:
        """Return ingredient lines joined with ingredients, grouped by recipe."""
        grouped: dict[UUID, list[RecipeLine]] = {}
        if not recipe_ids:
            return grouped
        response = (
            self.client.table("recipe_ingredients")
            .select(_LINE_COLUMNS)
            .in_("recipe_id", [str(recipe_id) for recipe_id in recipe_ids])
            .execute()
        )
        for row in response.data or []:
            ingredient_row = row.get("ingredients")
            if not isinstance(ingredient_row, dict):
                continue
            line = RecipeLine(
                id=UUID(row["id"]),
                recipe_id=UUID(row["recipe_id"]),
                quantity=float(row.get("quantity") or 0.0),
                unit=row.get("unit"),
                ingredient=parse_ingredient_row(ingredient_row),
            )
            grouped.setdefault(line.recipe_id, []).append(line)
        return grouped

    def list_recipe_ids_for_ingredient(self, ingredient_id: UUID) -> list[UUID]:
        """Return ids of recipes that use an ingredient."""
        response = (
            self.client.table("recipe_ingredients")
            .select("recipe_id")
            .eq("ingredient_id", str(ingredient_id))
            .execute()
        )
        recipe_ids: list[UUID] = []
        for row in response.data or []:
            recipe_id = UUID(row["recipe_id"])
            if recipe_id not in recipe_ids:
                recipe_ids.append(recipe_id)
        return recipe_ids


def parse_ingredient_row(row: dict[str, object]) -> Ingredient:
    """Parse an ingredients row into a domain model."""
    return Ingredient(
        id=UUID(str(row["id"])),
        name=str(row.get("ingredient_name") or ""),
        cost_per_unit=float(row.get("cost_per_unit") or 0.0),
        unit=row.get("unit"),
        waste_percent=_optional_float(row.get("trim_peel_waste_percentage")),
        yield_percent=_optional_float(row.get("yield_percentage")),
    )


def _parse_recipe(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        yield_quantity=float(row.get("yield") or 1),
        yield_unit=str(row.get("yield_unit") or "servings"),
        instructions=row.get("instructions"),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
