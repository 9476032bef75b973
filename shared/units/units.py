"""
Units

Length and mass units with their conversion factors to the base unit of
each kind (centimeter, kilogram).
"""

from decimal import Decimal
from enum import Enum

from shared.errors import ConfigurationError


class LengthUnit(str, Enum):
    CM = "cm"
    MM = "mm"
    M = "m"
    IN = "in"
    FT = "ft"


class MassUnit(str, Enum):
    KG = "kg"
    G = "g"
    LB = "lb"
    OZ = "oz"


# Base unit: centimeter
LENGTH_FACTORS = {
    LengthUnit.CM: Decimal("1"),
    LengthUnit.MM: Decimal("0.1"),
    LengthUnit.M: Decimal("100"),
    LengthUnit.IN: Decimal("2.54"),
    LengthUnit.FT: Decimal("30.48"),
}

# Base unit: kilogram (international avoirdupois pound)
MASS_FACTORS = {
    MassUnit.KG: Decimal("1"),
    MassUnit.G: Decimal("0.001"),
    MassUnit.LB: Decimal("0.45359237"),
    MassUnit.OZ: Decimal("0.028349523125"),
}

_ALIASES = {
    "lbs": MassUnit.LB,
    "kgs": MassUnit.KG,
    "inch": LengthUnit.IN,
    "inches": LengthUnit.IN,
}


def parse_unit(value, kind: type[Enum]):
    """
    Resolve a unit of the given kind from an enum member or its string code.

    Args:
        value: LengthUnit/MassUnit member or code such as "cm", "LB", "lbs"
        kind: LengthUnit or MassUnit

    Raises:
        ConfigurationError: if the value is not a unit of that kind
    """
    if isinstance(value, kind):
        return value

    if isinstance(value, str):
        code = value.strip().lower()
        unit = _ALIASES.get(code)
        if unit is None:
            try:
                unit = kind(code)
            except ValueError:
                unit = None
        if isinstance(unit, kind):
            return unit

    raise ConfigurationError(f"'{value}' is not a {kind.__name__}.")
