"""
Quantity and Dimensions

Immutable measurement values. Numbers are kept as given; they are turned
into exact decimals by the from_config factories or by the Math in use.
"""

from decimal import Decimal
from typing import NamedTuple, Mapping

from shared.arithmetic import Math, DecimalMath
from shared.errors import ConfigurationError, CalculationArithmeticError
from shared.units import LengthUnit, MassUnit, parse_unit


class Quantity(NamedTuple):
    """A value with its unit (weight in practice)."""
    value: Decimal
    unit: MassUnit | LengthUnit

    @classmethod
    def weight(cls, value, unit, math: Math | None = None) -> "Quantity":
        return cls((math or DecimalMath()).to_decimal(value), parse_unit(unit, MassUnit))


class Dimensions(NamedTuple):
    """Length, width and height of a box in one unit."""
    length: Decimal
    width: Decimal
    height: Decimal
    unit: LengthUnit = LengthUnit.CM

    @classmethod
    def of(cls, length, width, height, unit=LengthUnit.CM, math: Math | None = None) -> "Dimensions":
        math = math or DecimalMath()
        return cls(
            math.to_decimal(length),
            math.to_decimal(width),
            math.to_decimal(height),
            parse_unit(unit, LengthUnit),
        )

    def values(self) -> tuple[Decimal, Decimal, Decimal]:
        return (self.length, self.width, self.height)

    @classmethod
    def from_config(cls, value, unit=None, math: Math | None = None) -> "Dimensions":
        """
        Build Dimensions from a Dimensions instance or a mapping.

        The mapping may use length/width/height keys or be any ordered
        mapping of three values, taken in order. A "unit" key overrides
        the unit argument.
        """
        if isinstance(value, Dimensions):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(f"Dimensions must be a mapping, got {type(value).__name__}.")

        unit = parse_unit(value.get("unit", unit or LengthUnit.CM), LengthUnit)
        if {"length", "width", "height"} <= value.keys():
            sides = [value["length"], value["width"], value["height"]]
        else:
            sides = [v for k, v in value.items() if k != "unit"]
        if len(sides) != 3:
            raise ConfigurationError(f"Dimensions need exactly three values, got {len(sides)}.")

        return cls(*(_decimal(side, "dimension", math) for side in sides), unit=unit)


def _decimal(value, label: str, math: Math | None) -> Decimal:
    try:
        return (math or DecimalMath()).to_decimal(value)
    except CalculationArithmeticError as e:
        raise ConfigurationError(f"Invalid {label} value {value!r}.") from e
