import logging
from dataclasses import dataclass, replace

from ...utils.number_format import format_number, parse_number, round_value
from .unit_tables import TEMPERATURE_DECIMALS, TEMPERATURE_SCALES, UNIT_TABLES, UnitTable

logger = logging.getLogger(__name__)

TEMPERATURE = "temperature"
PAIR_FIELDS = ("from_value", "to_value", "from_unit", "to_unit")


@dataclass(frozen=True)
class ConverterState:
    """Raw contents of a two-sided converter form."""

    from_value: str
    to_value: str
    from_unit: str
    to_unit: str


class ConversionEngine:
    """
    Unit conversion for the public converter pages.

    Factor-based quantities (mass, speed, length, volume) convert through their
    table's base unit. Temperature is affine and goes through Celsius.
    """

    round_value = staticmethod(round_value)

    @staticmethod
    def quantities():
        return tuple(UNIT_TABLES) + (TEMPERATURE,)

    @staticmethod
    def table_for(quantity: str) -> UnitTable:
        try:
            return UNIT_TABLES[quantity]
        except KeyError:
            raise ValueError(f"Unknown quantity: {quantity}") from None

    @staticmethod
    def unit_choices(quantity: str) -> list[tuple[str, str]]:
        if quantity == TEMPERATURE:
            return list(TEMPERATURE_SCALES.items())
        return ConversionEngine.table_for(quantity).choices()

    @staticmethod
    def decimals_for(quantity: str) -> int:
        if quantity == TEMPERATURE:
            return TEMPERATURE_DECIMALS
        return ConversionEngine.table_for(quantity).decimals

    @staticmethod
    def convert(value: float, from_unit: str, to_unit: str, table: UnitTable) -> float:
        """Convert ``value`` between two units of the same table via the base unit."""
        try:
            from_factor = table[from_unit].factor_to_base
            to_factor = table[to_unit].factor_to_base
        except KeyError as exc:
            raise ValueError(f"Unit {exc.args[0]!r} is not a {table.quantity} unit") from None
        if from_unit == to_unit:
            return value
        return value * from_factor / to_factor

    @staticmethod
    def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
        for unit in (from_unit, to_unit):
            if unit not in TEMPERATURE_SCALES:
                raise ValueError(f"Unit {unit!r} is not a temperature scale")
        if from_unit == to_unit:
            return value

        celsius = value
        if from_unit == "fahrenheit":
            celsius = (value - 32) * 5 / 9
        elif from_unit == "kelvin":
            celsius = value - 273.15

        if to_unit == "fahrenheit":
            return celsius * 9 / 5 + 32
        if to_unit == "kelvin":
            return celsius + 273.15
        return celsius

    @staticmethod
    def convert_quantity(quantity: str, value: float, from_unit: str, to_unit: str) -> float:
        if quantity == TEMPERATURE:
            return ConversionEngine.convert_temperature(value, from_unit, to_unit)
        return ConversionEngine.convert(value, from_unit, to_unit, ConversionEngine.table_for(quantity))

    @staticmethod
    def sync_pair(quantity: str, state: ConverterState, changed: str) -> ConverterState:
        """
        Recompute the dependent side of a converter after one field changed.

        Editing the value on the left or either unit select rewrites the right
        value; editing the right value rewrites the left one. The rounded result
        becomes the new field content. An unparseable source leaves the state as is.
        """
        if changed not in PAIR_FIELDS:
            raise ValueError(f"Unknown converter field: {changed}")

        if changed == "to_value":
            source_raw, source_unit, target_unit, target_field = (
                state.to_value, state.to_unit, state.from_unit, "from_value"
            )
        else:
            source_raw, source_unit, target_unit, target_field = (
                state.from_value, state.from_unit, state.to_unit, "to_value"
            )

        source = parse_number(source_raw)
        if source is None:
            logger.debug("Skipping %s sync; %r is not a number", quantity, source_raw)
            return state

        converted = ConversionEngine.convert_quantity(quantity, source, source_unit, target_unit)
        rendered = format_number(converted, ConversionEngine.decimals_for(quantity))
        return replace(state, **{target_field: rendered})
