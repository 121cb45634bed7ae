"""Domain models for cooking units and conversions."""

from dataclasses import dataclass
from enum import Enum


class UnitKind(Enum):
    """Measurement family a unit name belongs to."""

    VOLUME = "volume"
    WEIGHT = "weight"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting a quantity between two units."""

    converted_value: float
    converted_unit: str
    original_value: float
    original_unit: str
    conversion_factor: float


@dataclass(frozen=True)
class UnitCatalog:
    """Recognized unit names grouped by kind."""

    volume: list[str]
    weight: list[str]
