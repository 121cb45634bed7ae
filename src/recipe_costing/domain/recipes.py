"""Domain models for recipes and ingredients stored in the database."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Recipe:
    """Represents a recipe record."""

    id: UUID
    name: str
    yield_quantity: float
    yield_unit: str
    instructions: str | None


@dataclass(frozen=True)
class Ingredient:
    """Represents an ingredient with its purchase cost."""

    id: UUID
    name: str
    cost_per_unit: float
    unit: str | None
    waste_percent: float | None
    yield_percent: float | None


@dataclass(frozen=True)
class RecipeLine:
    """An ingredient used by a recipe, with the recipe's quantity and unit."""

    id: UUID
    recipe_id: UUID
    quantity: float
    unit: str | None
    ingredient: Ingredient


@dataclass(frozen=True)
class IngredientCostChange:
    """Before/after view of an ingredient row change."""

    ingredient_id: UUID
    before: Ingredient | None
    after: Ingredient

    @property
    def affects_cost(self) -> bool:
        """Return True when a field used for costing changed."""
        if self.before is None:
            return True
        return (
            self.before.cost_per_unit != self.after.cost_per_unit
            or self.before.unit != self.after.unit
            or self.before.waste_percent != self.after.waste_percent
            or self.before.yield_percent != self.after.yield_percent
        )
