import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tsfilters.errors import DimensionMismatchError
from tsfilters.units import (
    CUBIC_FOOT,
    CUBIC_METER_PER_SECOND,
    DEGREE_CELSIUS,
    DEGREE_FARENHEIT,
    DEGREE_KELVIN,
    DIMENSIONLESS,
    FOOT,
    GALLON_PER_DAY,
    GALLON_PER_MINUTE,
    METER,
    MICROGRAMS_PER_LITER,
    MILLION_LITER_PER_DAY,
    NO_UNITS,
    SECOND,
    SQ_FOOT,
    UNIT_STRINGS,
    CUBIC_METER,
    Units,
    convert_value,
    unit_of_type,
)


@pytest.mark.parametrize("name, units", list(UNIT_STRINGS.items()))
def test_units_strings(name, units):
    from_raw = unit_of_type(units.raw_unit_string())
    assert from_raw.is_same_dimension_as(units) or from_raw.is_invalid()
    assert from_raw.conversion == pytest.approx(units.conversion, rel=1e-8)


def test_units_convert_nan():
    result = convert_value(math.nan, GALLON_PER_MINUTE, GALLON_PER_DAY)
    assert math.isnan(result)


def test_lookup_by_name():
    assert unit_of_type("ft") == FOOT
    assert unit_of_type("gpm") == GALLON_PER_MINUTE


def test_empty_string_is_no_units():
    assert unit_of_type("") == NO_UNITS


def test_case_insensitive_lookup():
    assert unit_of_type("GPM") == GALLON_PER_MINUTE
    assert unit_of_type("FT") == FOOT


def test_superscript_and_micro_substitutions():
    assert unit_of_type("m3") == CUBIC_METER
    assert unit_of_type("ft2") == SQ_FOOT
    assert unit_of_type("ug/L") == MICROGRAMS_PER_LITER


def test_unrecognized_is_no_units():
    assert unit_of_type("garbage") == NO_UNITS
    assert unit_of_type("garbage").is_invalid()


def test_parse_raw_string():
    assert unit_of_type("0.3048*[m^1]") == FOOT


def test_parse_long_dimension_names_and_offset():
    parsed = unit_of_type("1*[Kelvin^1]+[offset=273.15]")
    assert parsed == DEGREE_CELSIUS


def test_raw_unit_string():
    assert FOOT.raw_unit_string() == "0.30480000000000002*[m^1]"
    assert METER.raw_unit_string(False) == (
        "1*[kg^0]*[m^1]*[s^0]*[A^0]*[K^0]*[mol^0]*[cd^0]+[offset=0]"
    )


def test_str():
    assert str(DIMENSIONLESS) == "dimensionless"
    assert str(NO_UNITS) == "no_units"
    assert str(FOOT) == FOOT.raw_unit_string(True)


def test_to_string_exact_and_approximate():
    assert FOOT.to_string() == "ft"
    assert Units(0.30480001, meter=1).to_string() == "ft"
    assert DEGREE_CELSIUS.to_string() == "celsius"
    assert DEGREE_KELVIN.to_string() == "kelvin"


def test_to_string_first_name_wins():
    assert MILLION_LITER_PER_DAY.to_string() == "kcmd"


def test_to_string_unknown_falls_back_to_raw():
    odd = Units(7.0, kilogram=3)
    assert odd.to_string() == odd.raw_unit_string(True)


def test_convert_value():
    assert convert_value(1.0, FOOT, METER) == pytest.approx(0.3048)
    assert convert_value(32.0, DEGREE_FARENHEIT, DEGREE_CELSIUS) == pytest.approx(0.0, abs=1e-9)


def test_convert_value_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        convert_value(1.0, FOOT, SECOND)


def test_same_dimension():
    assert FOOT.is_same_dimension_as(METER)
    assert not FOOT.is_same_dimension_as(SECOND)
    assert not NO_UNITS.is_same_dimension_as(NO_UNITS)


def test_multiplication_and_division():
    foot = unit_of_type("ft")
    cube = foot * foot * foot
    assert cube.is_same_dimension_as(unit_of_type("ft³"))
    assert cube.conversion == pytest.approx(CUBIC_FOOT.conversion, rel=1e-6)
    assert unit_of_type("m³") / unit_of_type("s") == CUBIC_METER_PER_SECOND
    assert unit_of_type("") * foot == NO_UNITS
    assert foot / unit_of_type("") == NO_UNITS


def test_scalar_multiplication_keeps_offset():
    celsius = unit_of_type("celsius")
    scaled = celsius * 2
    assert scaled.conversion == 2
    assert scaled.offset == 273.15
    foot = unit_of_type("ft")
    assert (2 * foot).conversion == pytest.approx(0.6096)
    assert 2 * foot == foot * 2


def test_power():
    assert (FOOT ** 3).is_same_dimension_as(CUBIC_FOOT)
    assert (FOOT ** 3).conversion == pytest.approx(CUBIC_FOOT.conversion, rel=1e-6)
    assert (Units(1, meter=1) ** 0.5).meter == 1
    assert (Units(1, meter=-1) ** 0.5).meter == -1


def test_dimensionless_and_invalid():
    assert DIMENSIONLESS.is_dimensionless()
    assert not DIMENSIONLESS.is_invalid()
    assert NO_UNITS.is_invalid()
    assert not FOOT.is_dimensionless()


@given(
    conversion=st.floats(min_value=1e-12, max_value=1e12),
    dims=st.lists(st.integers(min_value=-5, max_value=5), min_size=7, max_size=7),
)
def test_raw_round_trip(conversion, dims):
    units = Units(conversion, *dims)
    parsed = unit_of_type(units.raw_unit_string())
    assert parsed == units