import itertools

import pytest

from allwayscalc.services.unit_conversion import (
    UNIT_TABLES,
    ConversionEngine,
    ConverterState,
    UnitDefinition,
    UnitTable,
)


def _all_pairs():
    for quantity, table in UNIT_TABLES.items():
        for from_unit, to_unit in itertools.permutations(table, 2):
            yield quantity, from_unit, to_unit


@pytest.mark.parametrize("quantity,from_unit,to_unit", list(_all_pairs()))
def test_round_trip_returns_original_value(quantity, from_unit, to_unit):
    table = UNIT_TABLES[quantity]
    there = ConversionEngine.convert(123.456, from_unit, to_unit, table)
    back = ConversionEngine.convert(there, to_unit, from_unit, table)
    assert back == pytest.approx(123.456, abs=1e-4)


def test_same_unit_is_identity():
    for table in UNIT_TABLES.values():
        for unit in table:
            assert ConversionEngine.convert(42.5, unit, unit, table) == 42.5


def test_basic_conversion():
    mass = UNIT_TABLES["mass"]
    assert ConversionEngine.convert(1000, "gram", "kilogram", mass) == pytest.approx(1.0)
    assert ConversionEngine.convert(1, "kilogram", "pound", mass) == pytest.approx(2.204624, abs=1e-6)
    assert ConversionEngine.convert(1, "meter", "foot", UNIT_TABLES["length"]) == pytest.approx(3.28084, abs=1e-5)


def test_negative_values_convert():
    length = UNIT_TABLES["length"]
    assert ConversionEngine.convert(-2, "kilometer", "meter", length) == pytest.approx(-2000)


def test_invalid_unit_raises_value_error():
    with pytest.raises(ValueError):
        ConversionEngine.convert(100, "liter", "furlong", UNIT_TABLES["volume"])
    with pytest.raises(ValueError):
        ConversionEngine.convert_temperature(10, "celsius", "rankine")
    with pytest.raises(ValueError):
        ConversionEngine.table_for("energy")


def test_temperature_scales():
    assert ConversionEngine.convert_temperature(25, "celsius", "fahrenheit") == pytest.approx(77)
    assert ConversionEngine.convert_temperature(212, "fahrenheit", "celsius") == pytest.approx(100)
    assert ConversionEngine.convert_temperature(0, "kelvin", "celsius") == pytest.approx(-273.15)
    assert ConversionEngine.convert_temperature(-40, "celsius", "fahrenheit") == pytest.approx(-40)


def test_every_table_has_exactly_one_base_unit():
    for table in UNIT_TABLES.values():
        assert [u.key for u in table.values() if u.factor_to_base == 1] == [table.base_unit.key]


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        UNIT_TABLES["mass"] = UNIT_TABLES["length"]
    with pytest.raises(TypeError):
        UNIT_TABLES["mass"]["kilogram"] = UnitDefinition("kilogram", "Kilogram", 2)


def test_table_rejects_bad_factors():
    with pytest.raises(ValueError):
        UnitTable("broken", (UnitDefinition("a", "A", 1), UnitDefinition("b", "B", 0)))
    with pytest.raises(ValueError):
        UnitTable("no-base", (UnitDefinition("a", "A", 2), UnitDefinition("b", "B", 3)))


def test_sync_pair_from_left_rewrites_right():
    state = ConverterState(from_value="1", to_value="", from_unit="kilogram", to_unit="pound")
    synced = ConversionEngine.sync_pair("mass", state, "from_value")
    assert synced.to_value == "2.204624"
    assert synced.from_value == "1"


def test_sync_pair_from_right_rewrites_left():
    state = ConverterState(from_value="", to_value="10", from_unit="kilogram", to_unit="pound")
    synced = ConversionEngine.sync_pair("mass", state, "to_value")
    assert synced.from_value == "4.53592"
    assert synced.to_value == "10"


def test_sync_pair_unit_change_recomputes_right_side():
    state = ConverterState(from_value="25", to_value="77", from_unit="celsius", to_unit="kelvin")
    synced = ConversionEngine.sync_pair("temperature", state, "to_unit")
    assert synced.to_value == "298.15"


def test_sync_pair_ignores_unparseable_source():
    state = ConverterState(from_value="abc", to_value="5", from_unit="meter", to_unit="foot")
    assert ConversionEngine.sync_pair("length", state, "from_value") == state


def test_sync_pair_rejects_unknown_field():
    state = ConverterState(from_value="1", to_value="", from_unit="meter", to_unit="foot")
    with pytest.raises(ValueError):
        ConversionEngine.sync_pair("length", state, "speed")


def test_sync_pair_handles_very_large_values():
    state = ConverterState(from_value="1e22", to_value="", from_unit="kilogram", to_unit="gram")
    synced = ConversionEngine.sync_pair("mass", state, "from_value")
    assert float(synced.to_value) == pytest.approx(1e25)
