"""Static lookup tables for cooking units and ingredient densities."""

from types import MappingProxyType

from recipe_costing.domain.units import UnitCatalog, UnitKind

DEFAULT_DENSITY_G_PER_ML = 0.8

# Base: milliliters.
VOLUME_UNITS_ML = MappingProxyType(
    {
        "ml": 1,
        "milliliter": 1,
        "l": 1000,
        "liter": 1000,
        "litre": 1000,
        "tsp": 5,
        "teaspoon": 5,
        "tbsp": 15,
        "tablespoon": 15,
        "cup": 240,
        "cups": 240,
        "fl oz": 30,
        "fluid ounce": 30,
        "pint": 480,
        "quart": 960,
        "gallon": 3840,
    }
)

# Base: grams.
WEIGHT_UNITS_G = MappingProxyType(
    {
        "g": 1,
        "gm": 1,
        "gram": 1,
        "grams": 1,
        "kg": 1000,
        "kilogram": 1000,
        "oz": 28.35,
        "ounce": 28.35,
        "lb": 453.6,
        "pound": 453.6,
        "mg": 0.001,
        "milligram": 0.001,
    }
)

# Grams per milliliter. Partial matches take the first entry in this order.
INGREDIENT_DENSITIES = MappingProxyType(
    {
        "water": 1.0,
        "milk": 1.03,
        "cream": 1.01,
        "oil": 0.92,
        "olive oil": 0.92,
        "vegetable oil": 0.92,
        "vinegar": 1.01,
        "honey": 1.42,
        "syrup": 1.33,
        "flour": 0.59,
        "all-purpose flour": 0.59,
        "plain flour": 0.59,
        "bread flour": 0.59,
        "cake flour": 0.59,
        "self-raising flour": 0.59,
        "whole wheat flour": 0.59,
        "sugar": 0.85,
        "white sugar": 0.85,
        "brown sugar": 0.8,
        "powdered sugar": 0.6,
        "cocoa powder": 0.4,
        "baking powder": 0.6,
        "baking soda": 0.87,
        "salt": 1.2,
        "cornstarch": 0.6,
        "almonds": 0.6,
        "walnuts": 0.65,
        "pecans": 0.7,
        "peanuts": 0.6,
        "sesame seeds": 0.6,
        "sunflower seeds": 0.5,
        "butter": 0.91,
        "cheese": 1.1,
        "cream cheese": 1.0,
        "yogurt": 1.03,
    }
)


def normalize_unit(unit: str | None) -> str:
    """Return the comparison form of a unit name."""
    return (unit or "").strip().lower()


def is_volume_unit(unit: str | None) -> bool:
    """Return True when the unit is a recognized volume unit."""
    return normalize_unit(unit) in VOLUME_UNITS_ML


def is_weight_unit(unit: str | None) -> bool:
    """Return True when the unit is a recognized weight unit."""
    return normalize_unit(unit) in WEIGHT_UNITS_G


def get_unit_kind(unit: str | None) -> UnitKind:
    """Classify a unit name, checking volume before weight."""
    if is_volume_unit(unit):
        return UnitKind.VOLUME
    if is_weight_unit(unit):
        return UnitKind.WEIGHT
    return UnitKind.UNKNOWN


def get_ingredient_density(name: str | None) -> float:
    """Return the density of an ingredient in grams per milliliter.

    Exact names win; otherwise the first table entry that contains the name,
    or is contained in it, is used. Unrecognized or empty names fall back to
    ``DEFAULT_DENSITY_G_PER_ML``.
    """
    key = (name or "").strip().lower()
    if not key:
        return DEFAULT_DENSITY_G_PER_ML
    exact = INGREDIENT_DENSITIES.get(key)
    if exact is not None:
        return exact
    for fragment, density in INGREDIENT_DENSITIES.items():
        if fragment in key or key in fragment:
            return density
    return DEFAULT_DENSITY_G_PER_ML


def get_all_units() -> UnitCatalog:
    """Return every recognized unit name for pickers."""
    return UnitCatalog(volume=list(VOLUME_UNITS_ML), weight=list(WEIGHT_UNITS_G))
