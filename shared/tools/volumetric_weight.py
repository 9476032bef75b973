"""
Volumetric Weight Calculator

    volumetric_weight_kg = length_cm * width_cm * height_cm / factor

The result is converted to the requested mass unit and rounded UP to 3
decimal places; rounding down would under-bill.
"""

from decimal import Decimal

from shared.arithmetic import Math, DecimalMath
from shared.models import Dimensions, Quantity
from shared.units import (
    LengthUnit,
    MassUnit,
    UnitConverter,
    create_length_converter,
    create_weight_converter,
)


DEFAULT_FACTOR = Decimal("5000")   # cm^3 per kg
WEIGHT_PLACES = 3

# Divisor factors are expressed against these units
LENGTH_UNIT = LengthUnit.CM
MASS_UNIT = MassUnit.KG


class VolumetricWeightCalculator:

    def __init__(
        self,
        math: Math | None = None,
        weight_converter: UnitConverter | None = None,
        length_converter: UnitConverter | None = None,
        factor=DEFAULT_FACTOR,
    ):
        self.math = math or DecimalMath()
        self.weight_converter = weight_converter or create_weight_converter(self.math)
        self.length_converter = length_converter or create_length_converter(self.math)
        self.factor = self.math.to_decimal(factor)

    def calculate(self, dimensions: Dimensions, target_weight_unit: MassUnit) -> Quantity:
        length, width, height = (
            self.length_converter.convert(side, dimensions.unit, LENGTH_UNIT)
            for side in dimensions.values()
        )

        volume = self.math.mul(self.math.mul(length, width), height)
        value = self.math.div(volume, self.factor)
        value = self.weight_converter.convert(value, MASS_UNIT, target_weight_unit)
        value = self.math.round_up(value, WEIGHT_PLACES)

        return Quantity(value, target_weight_unit)
