"""Recipe cost projection and menu price recommendation."""

import logging
import math
from collections.abc import Iterable

from recipe_costing.domain.costing import CostLine, CostProjection, IngredientUsage
from recipe_costing.services.unit_conversion import convert_ingredient_cost

TARGET_FOOD_COST_FRACTION = 0.30
CHARM_CENTS = 0.95
DEFAULT_UNIT = "g"

_logger = logging.getLogger(__name__)


def project_cost(usages: Iterable[IngredientUsage] | None) -> CostProjection | None:
    """Project cost per serving and a recommended price for recipe lines.

    Returns ``None`` when there is nothing to cost, so callers can tell an
    uncomputed recipe apart from a zero-cost one.
    """
    if not usages:
        return None
    lines = tuple(cost_line(usage) for usage in usages)
    if not lines:
        return None

    cost_per_serving = sum(line.yield_adjusted_cost for line in lines)
    recommended_price = charm_price(cost_per_serving / TARGET_FOOD_COST_FRACTION)
    return CostProjection(
        cost_per_serving=cost_per_serving,
        recommended_price=recommended_price,
        food_cost_percent=cost_per_serving / recommended_price * 100,
        lines=lines,
    )


def cost_line(usage: IngredientUsage) -> CostLine:
    """Cost a single usage with waste and yield adjustments applied."""
    unit = usage.unit or DEFAULT_UNIT
    base_unit = usage.base_unit or DEFAULT_UNIT
    cost_per_unit = convert_ingredient_cost(
        usage.cost_per_base_unit, base_unit, unit, usage.ingredient_name
    )
    base_cost = usage.quantity * cost_per_unit
    waste_percent = usage.waste_percent if usage.waste_percent is not None else 0.0
    waste_adjusted = base_cost * (1 + waste_percent / 100)
    yield_adjusted = waste_adjusted / (_effective_yield(usage) / 100)
    return CostLine(
        ingredient_name=usage.ingredient_name,
        quantity=usage.quantity,
        unit=unit,
        cost_per_unit=cost_per_unit,
        base_cost=base_cost,
        waste_adjusted_cost=waste_adjusted,
        yield_adjusted_cost=yield_adjusted,
    )


def charm_price(raw_price: float) -> float:
    """Drop the cents of ``raw_price`` and end it in .95.

    This always rounds down to the .95 of the same dollar: 10.02 and 10.99
    both become 10.95. NaN and infinite prices pass through unchanged.
    """
    if not math.isfinite(raw_price):
        return raw_price
    return math.floor(raw_price) + CHARM_CENTS


def _effective_yield(usage: IngredientUsage) -> float:
    if usage.yield_percent is None:
        return 100.0
    if usage.yield_percent == 0:
        _logger.warning(
            "Zero yield for %r; costing at 100%% yield", usage.ingredient_name
        )
        return 100.0
    return usage.yield_percent
