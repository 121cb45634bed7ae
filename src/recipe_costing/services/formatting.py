"""Display helpers for recipe names and quantities."""

from dataclasses import dataclass

from recipe_costing.services.unit_registry import normalize_unit

_PROMOTIONS = {"g": "kg", "ml": "l"}
_PROMOTION_THRESHOLD = 1000


@dataclass(frozen=True)
class FormattedQuantity:
    """Quantity prepared for display."""

    value: str
    unit: str
    original: str


def capitalize_recipe_name(name: str) -> str:
    """Title-case each space-separated word of a recipe name."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))


def format_quantity(
    quantity: float,
    unit: str,
    target_yield: float = 1,
    original_yield: float = 1,
) -> FormattedQuantity:
    """Scale a quantity to a target yield and format it for display.

    Large gram and milliliter amounts are promoted to kilograms and liters.
    ``original`` keeps the scaled amount in the source unit.
    """
    base_yield = original_yield if original_yield > 0 else 1
    scaled = quantity * target_yield / base_yield
    source_unit = normalize_unit(unit)

    display_value = scaled
    display_unit = source_unit
    promoted = _PROMOTIONS.get(source_unit)
    if promoted and abs(scaled) >= _PROMOTION_THRESHOLD:
        display_value = scaled / _PROMOTION_THRESHOLD
        display_unit = promoted

    return FormattedQuantity(
        value=_format_number(display_value),
        unit=display_unit,
        original=f"{_format_number(scaled)} {source_unit}".strip(),
    )


def _format_number(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in {"", "-0"} else text
