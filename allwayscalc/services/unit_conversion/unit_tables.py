"""Static unit tables for the factor-based converters.

Each table maps a unit key to its multiplicative factor relative to one base unit
(kilogram for mass, meters/second for speed, meter for length, liter for volume).
Tables are built once at import time and exposed through read-only mappings.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    key: str
    display_name: str
    factor_to_base: float


class UnitTable(Mapping[str, UnitDefinition]):
    """Immutable unit family with exactly one base unit (factor 1)."""

    def __init__(self, quantity: str, units: tuple[UnitDefinition, ...], *, decimals: int = 6):
        self.quantity = quantity
        self.decimals = decimals
        self._units = MappingProxyType({unit.key: unit for unit in units})
        if not units or len(self._units) != len(units):
            raise ValueError(f"{quantity} table must define unique, non-empty unit keys")
        self._validate()

    def _validate(self) -> None:
        for unit in self._units.values():
            factor = unit.factor_to_base
            if not math.isfinite(factor) or factor <= 0:
                raise ValueError(f"{self.quantity}.{unit.key} factor must be positive and finite, got {factor!r}")
        base_units = [u.key for u in self._units.values() if u.factor_to_base == 1]
        if len(base_units) != 1:
            raise ValueError(f"{self.quantity} table must have exactly one base unit, found {base_units}")

    @property
    def base_unit(self) -> UnitDefinition:
        return next(u for u in self._units.values() if u.factor_to_base == 1)

    def choices(self) -> list[tuple[str, str]]:
        """(key, display name) pairs in declaration order, for select fields."""
        return [(unit.key, unit.display_name) for unit in self._units.values()]

    def __getitem__(self, key: str) -> UnitDefinition:
        return self._units[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitTable({self.quantity!r}, base={self.base_unit.key!r}, units={list(self._units)})"


MASS_UNITS = UnitTable(
    "mass",
    (
        UnitDefinition("kilogram", "Kilogram", 1),
        UnitDefinition("gram", "Gram", 0.001),
        UnitDefinition("milligram", "Milligram", 0.000001),
        UnitDefinition("pound", "Pound", 0.453592),
        UnitDefinition("ounce", "Ounce", 0.0283495),
        UnitDefinition("tonne", "Tonne", 1000),
    ),
)

SPEED_UNITS = UnitTable(
    "speed",
    (
        UnitDefinition("m/s", "Meters/second", 1),
        UnitDefinition("km/h", "Kilometers/hour", 0.277778),
        UnitDefinition("mph", "Miles/hour", 0.44704),
        UnitDefinition("knot", "Knot", 0.514444),
    ),
)

LENGTH_UNITS = UnitTable(
    "length",
    (
        UnitDefinition("meter", "Meter", 1),
        UnitDefinition("kilometer", "Kilometer", 1000),
        UnitDefinition("centimeter", "Centimeter", 0.01),
        UnitDefinition("millimeter", "Millimeter", 0.001),
        UnitDefinition("mile", "Mile", 1609.34),
        UnitDefinition("foot", "Foot", 0.3048),
        UnitDefinition("inch", "Inch", 0.0254),
        UnitDefinition("yard", "Yard", 0.9144),
    ),
)

VOLUME_UNITS = UnitTable(
    "volume",
    (
        UnitDefinition("liter", "Liter", 1),
        UnitDefinition("milliliter", "Milliliter", 0.001),
        UnitDefinition("gallon", "Gallon (US)", 3.78541),
        UnitDefinition("quart", "Quart (US)", 0.946353),
        UnitDefinition("pint", "Pint (US)", 0.473176),
        # standard cup, not the US legal cup
        UnitDefinition("cup", "Cup (US)", 0.24),
    ),
)

UNIT_TABLES: Mapping[str, UnitTable] = MappingProxyType({
    table.quantity: table
    for table in (MASS_UNITS, SPEED_UNITS, LENGTH_UNITS, VOLUME_UNITS)
})

TEMPERATURE_SCALES: Mapping[str, str] = MappingProxyType({
    "celsius": "Celsius",
    "fahrenheit": "Fahrenheit",
    "kelvin": "Kelvin",
})
TEMPERATURE_DECIMALS = 2
PIXEL_EM_DECIMALS = 4
