"""
Unit Converters

One converter per quantity kind. Converting between kinds (kg to cm) is a
configuration defect, not a data problem.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from shared.arithmetic import Math, DecimalMath
from shared.errors import ConfigurationError

from .units import LENGTH_FACTORS, MASS_FACTORS


class UnitConverter(ABC):
    """Converts a scalar between units of one quantity kind."""

    @abstractmethod
    def convert(self, value, from_unit, to_unit) -> Decimal: ...


class FactorTableConverter(UnitConverter):
    """
    Converts through the base unit: value * factor[from] / factor[to].

    Attributes:
        kind    - Name of the quantity kind ("length", "mass")
        factors - Unit -> size of one unit expressed in the base unit
    """

    def __init__(self, kind: str, factors: dict, math: Math | None = None):
        self.kind = kind
        self.factors = dict(factors)
        self.math = math or DecimalMath()

    def convert(self, value, from_unit, to_unit) -> Decimal:
        if from_unit == to_unit and from_unit in self.factors:
            return self.math.to_decimal(value)
        from_factor = self._factor(from_unit)
        to_factor = self._factor(to_unit)
        return self.math.div(self.math.mul(value, from_factor), to_factor)

    def _factor(self, unit) -> Decimal:
        try:
            return self.factors[unit]
        except (KeyError, TypeError):
            raise ConfigurationError(
                f"Cannot convert '{getattr(unit, 'value', unit)}' with the {self.kind} converter."
            ) from None


def create_length_converter(math: Math | None = None) -> FactorTableConverter:
    return FactorTableConverter("length", LENGTH_FACTORS, math)


def create_weight_converter(math: Math | None = None) -> FactorTableConverter:
    return FactorTableConverter("mass", MASS_FACTORS, math)
