"""
Zone Calculators

A zone calculator is a named pricing expression: weight in, amount out.
Two expressions are supported from configuration:

    TIERED  {"name": "5", "weight_prices": [{"weight": 0.5, "price": 41.20}, ...]}
            price of the smallest weight break >= weight

    LINEAR  {"name": "5", "base_price": 30.00, "price_per_unit": 6.50}
            base_price + price_per_unit * weight

Any other callable can be wrapped directly: ZoneCalculator("5", my_function).
"""

from decimal import Decimal
from typing import Callable, NamedTuple, Mapping

from shared.arithmetic import Math, DecimalMath
from shared.errors import ConfigurationError, CalculationArithmeticError

from .weight_breaks import build_weight_breaks, lookup_price


PriceFunction = Callable[[Decimal], Decimal]


class ZoneCalculator(NamedTuple):
    name: str
    price_function: PriceFunction

    def calculate(self, weight) -> Decimal:
        return self.price_function(weight)

    @classmethod
    def from_config(cls, value, math: Math | None = None) -> "ZoneCalculator":
        if isinstance(value, ZoneCalculator):
            return value
        if not isinstance(value, Mapping) or value.get("name") in (None, ""):
            raise ConfigurationError(f"Each zone calculator needs a 'name': got {value!r}.")

        math = math or DecimalMath()
        name = str(value["name"])
        label = f"Zone '{name}'"

        if "weight_prices" in value:
            function = tiered_price(build_weight_breaks(value["weight_prices"], math, label), math, label)
        elif "base_price" in value or "price_per_unit" in value:
            try:
                base = math.to_decimal(value.get("base_price", 0))
                per_unit = math.to_decimal(value.get("price_per_unit", 0))
            except CalculationArithmeticError as e:
                raise ConfigurationError(f"{label}: invalid linear price ({e}).") from e
            function = linear_price(base, per_unit, math)
        else:
            raise ConfigurationError(f"{label}: needs 'weight_prices' or 'base_price'/'price_per_unit'.")

        return cls(name, function)


def tiered_price(breaks, math: Math, label: str) -> PriceFunction:
    def price(weight) -> Decimal:
        return lookup_price(breaks, weight, math, label)
    return price


def linear_price(base_price: Decimal, price_per_unit: Decimal, math: Math) -> PriceFunction:
    def price(weight) -> Decimal:
        return math.add(base_price, math.mul(price_per_unit, weight))
    return price
