"""Domain models for recipe costing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IngredientUsage:
    """One recipe line prepared for costing.

    ``cost_per_base_unit`` is the price of one ``base_unit`` of the ingredient
    as stored; ``quantity`` is expressed in ``unit``.
    """

    quantity: float
    cost_per_base_unit: float
    ingredient_name: str = ""
    unit: str | None = "g"
    base_unit: str | None = "g"
    waste_percent: float | None = 0.0
    yield_percent: float | None = 100.0


@dataclass(frozen=True)
class CostLine:
    """Cost breakdown for a single ingredient usage."""

    ingredient_name: str
    quantity: float
    unit: str
    cost_per_unit: float
    base_cost: float
    waste_adjusted_cost: float
    yield_adjusted_cost: float


@dataclass(frozen=True)
class CostProjection:
    """Cost per serving and the menu price derived from it."""

    cost_per_serving: float
    recommended_price: float
    food_cost_percent: float
    lines: tuple[CostLine, ...] = ()
