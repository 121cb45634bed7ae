"""Conversion between cooking volume and weight units."""

import logging

from recipe_costing.domain.units import ConversionResult, UnitKind
from recipe_costing.services.unit_registry import (
    VOLUME_UNITS_ML,
    WEIGHT_UNITS_G,
    get_ingredient_density,
    get_unit_kind,
    normalize_unit,
)

_logger = logging.getLogger(__name__)


def convert_unit(
    value: float,
    from_unit: str,
    to_unit: str,
    ingredient_name: str | None = None,
) -> ConversionResult:
    """Convert ``value`` from one unit to another.

    Volume and weight convert into each other through the ingredient's
    density. Unrecognized units never raise: the value comes back unchanged,
    still labelled with ``from_unit``, and the factor is 1.
    """
    source = normalize_unit(from_unit)
    target = normalize_unit(to_unit)
    if source == target:
        return ConversionResult(
            converted_value=value,
            converted_unit=to_unit,
            original_value=value,
            original_unit=from_unit,
            conversion_factor=1.0,
        )

    source_kind = get_unit_kind(source)
    target_kind = get_unit_kind(target)

    if source_kind is UnitKind.VOLUME and target_kind is UnitKind.VOLUME:
        factor = VOLUME_UNITS_ML[source] / VOLUME_UNITS_ML[target]
    elif source_kind is UnitKind.WEIGHT and target_kind is UnitKind.WEIGHT:
        factor = WEIGHT_UNITS_G[source] / WEIGHT_UNITS_G[target]
    elif source_kind is UnitKind.VOLUME and target_kind is UnitKind.WEIGHT:
        density = get_ingredient_density(ingredient_name)
        factor = (VOLUME_UNITS_ML[source] * density) / WEIGHT_UNITS_G[target]
    elif source_kind is UnitKind.WEIGHT and target_kind is UnitKind.VOLUME:
        density = get_ingredient_density(ingredient_name)
        factor = WEIGHT_UNITS_G[source] / (density * VOLUME_UNITS_ML[target])
    else:
        _logger.debug(
            "No conversion from %r to %r (ingredient=%r)",
            from_unit,
            to_unit,
            ingredient_name,
        )
        return ConversionResult(
            converted_value=value,
            converted_unit=from_unit,
            original_value=value,
            original_unit=from_unit,
            conversion_factor=1.0,
        )

    return ConversionResult(
        converted_value=value * factor,
        converted_unit=to_unit,
        original_value=value,
        original_unit=from_unit,
        conversion_factor=factor,
    )


def get_conversion_factor(
    from_unit: str, to_unit: str, ingredient_name: str | None = None
) -> float:
    """Return the multiplier that converts one ``from_unit`` into ``to_unit``."""
    return convert_unit(1, from_unit, to_unit, ingredient_name).conversion_factor


def convert_ingredient_cost(
    cost_per_unit: float,
    from_unit: str,
    to_unit: str,
    ingredient_name: str | None = None,
) -> float:
    """Re-express a cost per ``from_unit`` as a cost per ``to_unit``."""
    return cost_per_unit / get_conversion_factor(from_unit, to_unit, ingredient_name)
