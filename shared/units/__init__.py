"""
Units and Unit Conversion
"""

from .units import LengthUnit, MassUnit, LENGTH_FACTORS, MASS_FACTORS, parse_unit
from .converter import UnitConverter, FactorTableConverter, create_length_converter, create_weight_converter

__all__ = [
    "LengthUnit",
    "MassUnit",
    "LENGTH_FACTORS",
    "MASS_FACTORS",
    "parse_unit",
    "UnitConverter",
    "FactorTableConverter",
    "create_length_converter",
    "create_weight_converter",
]
