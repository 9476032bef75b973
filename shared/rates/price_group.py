"""
Price Group

A destination-independent weight -> price table. Countries are mapped to a
price group by name.
"""

from decimal import Decimal
from typing import NamedTuple, Mapping

from shared.arithmetic import Math, DecimalMath
from shared.errors import ConfigurationError

from .weight_breaks import WeightBreaks, build_weight_breaks, lookup_price


class PriceGroup(NamedTuple):
    name: str
    weight_breaks: WeightBreaks

    def price(self, weight, math: Math) -> Decimal:
        return lookup_price(self.weight_breaks, weight, math, f"Price group '{self.name}'")

    @classmethod
    def from_config(cls, value, math: Math | None = None) -> "PriceGroup":
        """
        Build from a PriceGroup or {"name": ..., "weight_prices": ...}.

        weight_prices takes any form build_weight_breaks accepts.
        """
        if isinstance(value, PriceGroup):
            return value
        if not isinstance(value, Mapping) or value.get("name") in (None, ""):
            raise ConfigurationError(f"Each price group needs a 'name': got {value!r}.")

        name = str(value["name"])
        breaks = build_weight_breaks(
            value.get("weight_prices"),
            math or DecimalMath(),
            f"Price group '{name}'",
        )
        return cls(name, breaks)
