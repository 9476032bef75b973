"""
Unit Tests for Units and Unit Converters

Run with: pytest tests/test_units.py -v
"""

from decimal import Decimal
from itertools import permutations

import pytest

from shared.arithmetic import DecimalMath
from shared.errors import ConfigurationError
from shared.units import (
    LengthUnit,
    MassUnit,
    LENGTH_FACTORS,
    MASS_FACTORS,
    FactorTableConverter,
    create_length_converter,
    create_weight_converter,
    parse_unit,
)


@pytest.fixture
def length():
    return create_length_converter()


@pytest.fixture
def weight():
    return create_weight_converter()


# =============================================================================
# PARSING
# =============================================================================

class TestParseUnit:

    @pytest.mark.parametrize("value,expected", [
        ("cm", LengthUnit.CM),
        ("IN", LengthUnit.IN),
        (" inches ", LengthUnit.IN),
        (LengthUnit.FT, LengthUnit.FT),
    ])
    def test_length_units(self, value, expected):
        assert parse_unit(value, LengthUnit) is expected

    @pytest.mark.parametrize("value,expected", [
        ("kg", MassUnit.KG),
        ("lbs", MassUnit.LB),
        ("LB", MassUnit.LB),
        ("oz", MassUnit.OZ),
    ])
    def test_mass_units(self, value, expected):
        assert parse_unit(value, MassUnit) is expected

    def test_wrong_kind_rejected(self):
        """A mass unit is not a length unit."""
        with pytest.raises(ConfigurationError):
            parse_unit("kg", LengthUnit)
        with pytest.raises(ConfigurationError):
            parse_unit(MassUnit.KG, LengthUnit)

    @pytest.mark.parametrize("value", ["stone", "", None, 5])
    def test_unknown_rejected(self, value):
        with pytest.raises(ConfigurationError):
            parse_unit(value, MassUnit)


# =============================================================================
# CONVERSION
# =============================================================================

class TestLengthConverter:

    def test_inch_to_cm(self, length):
        assert length.convert("10", LengthUnit.IN, LengthUnit.CM) == Decimal("25.40")

    def test_cm_to_inch(self, length):
        assert length.convert("2.54", LengthUnit.CM, LengthUnit.IN) == Decimal("1")

    def test_mm_to_m(self, length):
        assert length.convert("1500", LengthUnit.MM, LengthUnit.M) == Decimal("1.5")

    def test_same_unit_is_identity(self, length):
        assert str(length.convert("12.30", LengthUnit.CM, LengthUnit.CM)) == "12.30"


class TestWeightConverter:

    def test_lb_to_kg(self, weight):
        assert weight.convert("1", MassUnit.LB, MassUnit.KG) == Decimal("0.45359237")

    def test_oz_to_lb(self, weight):
        assert weight.convert("16", MassUnit.OZ, MassUnit.LB) == Decimal("1")

    def test_g_to_kg(self, weight):
        assert weight.convert("250", MassUnit.G, MassUnit.KG) == Decimal("0.25")

    def test_cross_kind_rejected(self, weight, length):
        with pytest.raises(ConfigurationError):
            weight.convert("1", MassUnit.KG, LengthUnit.CM)
        with pytest.raises(ConfigurationError):
            length.convert("1", LengthUnit.IN, MassUnit.LB)


class TestFactorTableConverter:

    def test_custom_table(self):
        converter = FactorTableConverter("volume", {"l": Decimal("1"), "ml": Decimal("0.001")})
        assert converter.convert("2500", "ml", "l") == Decimal("2.5")

    def test_unit_outside_table_rejected(self):
        converter = FactorTableConverter("volume", {"l": Decimal("1")})
        with pytest.raises(ConfigurationError, match="volume"):
            converter.convert("1", "gal", "l")


# =============================================================================
# ROUND TRIP
# =============================================================================

class TestRoundTrip:
    """convert(convert(x, A, B), B, A) == x within 10 decimal places, every pair."""

    VALUES = ["1", "7.4", "22.0462", "0.001", "1234.5678"]

    @pytest.mark.parametrize("value", VALUES)
    @pytest.mark.parametrize("a,b", list(permutations(MASS_FACTORS, 2)))
    def test_mass(self, weight, a, b, value):
        math = DecimalMath()
        back = weight.convert(weight.convert(value, a, b), b, a)
        assert math.round(back, 10) == math.round(value, 10)

    @pytest.mark.parametrize("value", VALUES)
    @pytest.mark.parametrize("a,b", list(permutations(LENGTH_FACTORS, 2)))
    def test_length(self, length, a, b, value):
        math = DecimalMath()
        back = length.convert(length.convert(value, a, b), b, a)
        assert math.round(back, 10) == math.round(value, 10)
