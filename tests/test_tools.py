"""
Unit Tests for Dimensions Normalizer and Volumetric Weight

Run with: pytest tests/test_tools.py -v
"""

from decimal import Decimal
from itertools import permutations

import pytest

from shared.errors import CalculationArithmeticError
from shared.models import Dimensions
from shared.tools import DimensionsNormalizer, VolumetricWeightCalculator
from shared.units import LengthUnit, MassUnit


# =============================================================================
# NORMALIZER
# =============================================================================

class TestDimensionsNormalizer:

    @pytest.mark.parametrize("sides", list(permutations(("30", "20", "10"))))
    def test_sorted_largest_first(self, sides):
        result = DimensionsNormalizer().normalize(Dimensions.of(*sides))
        assert result.values() == (Decimal("30"), Decimal("20"), Decimal("10"))

    def test_unit_kept(self):
        result = DimensionsNormalizer().normalize(Dimensions.of("1", "3", "2", unit="in"))
        assert result.unit is LengthUnit.IN

    def test_idempotent(self):
        normalizer = DimensionsNormalizer()
        once = normalizer.normalize(Dimensions.of("5", "12.5", "12.4"))
        assert normalizer.normalize(once) == once

    def test_input_not_modified(self):
        dimensions = Dimensions.of("10", "30", "20")
        DimensionsNormalizer().normalize(dimensions)
        assert dimensions.values() == (Decimal("10"), Decimal("30"), Decimal("20"))


# =============================================================================
# VOLUMETRIC WEIGHT
# =============================================================================

class TestVolumetricWeight:

    def test_centimeters_to_kilograms(self):
        """30 x 20 x 10 / 5000 = 1.2 kg."""
        result = VolumetricWeightCalculator().calculate(Dimensions.of("30", "20", "10"), MassUnit.KG)
        assert str(result.value) == "1.200"
        assert result.unit is MassUnit.KG

    def test_rounds_up_to_grams(self):
        """1000.003 / 5000 = 0.2000006 -> 0.201, never down."""
        result = VolumetricWeightCalculator().calculate(
            Dimensions.of("10", "10", "10.0003"), MassUnit.KG
        )
        assert result.value == Decimal("0.201")

    def test_inches_converted_first(self):
        """10 in cube = 16387.064 cm^3 -> 3.2774128 kg -> 3.278."""
        result = VolumetricWeightCalculator().calculate(
            Dimensions.of("10", "10", "10", unit="in"), MassUnit.KG
        )
        assert result.value == Decimal("3.278")

    def test_pounds_target(self):
        """1.2 kg = 2.64554... lb -> 2.646."""
        result = VolumetricWeightCalculator().calculate(Dimensions.of("30", "20", "10"), MassUnit.LB)
        assert result.value == Decimal("2.646")
        assert result.unit is MassUnit.LB

    def test_custom_factor(self):
        calculator = VolumetricWeightCalculator(factor="6000")
        result = calculator.calculate(Dimensions.of("30", "20", "10"), MassUnit.KG)
        assert str(result.value) == "1.000"

    def test_zero_factor_is_arithmetic_error(self):
        calculator = VolumetricWeightCalculator(factor=0)
        with pytest.raises(CalculationArithmeticError):
            calculator.calculate(Dimensions.of("30", "20", "10"), MassUnit.KG)
