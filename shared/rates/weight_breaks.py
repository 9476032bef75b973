"""
Weight Breaks

A rate table as an ordered tuple of (threshold, price) pairs. The price of a
break applies to weights above the previous threshold up to and including
its own:

    breaks = ((1, 5.00), (5, 9.50), (10, 20.00))
    0.4 -> 5.00,  1 -> 5.00,  1.001 -> 9.50,  10 -> 20.00,  10.5 -> error

Weights above the last threshold are not extrapolated.
"""

from decimal import Decimal
from typing import Mapping

from shared.arithmetic import Math
from shared.errors import ConfigurationError, CalculationArithmeticError


WeightBreaks = tuple[tuple[Decimal, Decimal], ...]


def build_weight_breaks(value, math: Math, label: str) -> WeightBreaks:
    """
    Normalize a rate table definition into sorted, validated weight breaks.

    Accepts a mapping {threshold: price}, a sequence of (threshold, price)
    pairs, or a sequence of {"weight": ..., "price": ...} mappings.

    Raises:
        ConfigurationError: empty table, bad numbers, negative prices or
            duplicate thresholds
    """
    try:
        if isinstance(value, Mapping):
            pairs = list(value.items())
        else:
            pairs = [
                (item["weight"], item["price"]) if isinstance(item, Mapping) else tuple(item)
                for item in value or ()
            ]
        breaks = sorted(
            ((math.to_decimal(weight), math.to_decimal(price)) for weight, price in pairs),
            key=lambda pair: pair[0],
        )
    except (CalculationArithmeticError, KeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"{label}: invalid rate table entry ({e!r}).") from e

    if not breaks:
        raise ConfigurationError(f"{label}: rate table is empty.")

    previous = None
    for threshold, price in breaks:
        if math.less_or_equal(threshold, 0):
            raise ConfigurationError(f"{label}: weight threshold {threshold} must be positive.")
        if math.less_than(price, 0):
            raise ConfigurationError(f"{label}: price {price} must not be negative.")
        if previous is not None and not math.greater_than(threshold, previous):
            raise ConfigurationError(f"{label}: duplicate weight threshold {threshold}.")
        previous = threshold

    return tuple(breaks)


def lookup_price(breaks: WeightBreaks, weight, math: Math, label: str) -> Decimal:
    """Price of the smallest threshold >= weight."""
    for threshold, price in breaks:
        if math.less_or_equal(weight, threshold):
            return price

    raise ConfigurationError(
        f"{label}: weight {weight} exceeds the last rate table threshold {breaks[-1][0]}."
    )
