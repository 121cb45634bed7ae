"""JSON serializers for costing results."""

from dataclasses import asdict

from recipe_costing.domain.costing import CostProjection
from recipe_costing.services.formatting import format_quantity


def serialize_projection(projection: CostProjection | None) -> dict[str, object] | None:
    """Serialize a projection, keeping None as None."""
    if projection is None:
        return None
    return {
        "cost_per_serving": projection.cost_per_serving,
        "recommended_price": projection.recommended_price,
        "food_cost_percent": projection.food_cost_percent,
        "lines": [asdict(line) for line in projection.lines],
    }


def serialize_quantities(
    projection: CostProjection | None, target_yield: float, original_yield: float
) -> list[dict[str, str]]:
    """Display quantities for each costed line, scaled to ``target_yield``."""
    if projection is None:
        return []
    return [
        {
            "ingredient_name": line.ingredient_name,
            **asdict(
                format_quantity(
                    line.quantity,
                    line.unit,
                    target_yield=target_yield,
                    original_yield=original_yield,
                )
            ),
        }
        for line in projection.lines
    ]
