"""
Rate Resolvers

Price groups, zone calculators and the strategies that apply them.
"""

from .weight_breaks import WeightBreaks, build_weight_breaks, lookup_price
from .price_group import PriceGroup
from .zone import ZoneCalculator, tiered_price, linear_price
from .strategy import (
    RateStrategy,
    PriceGroupRate,
    ZoneRate,
    PRICE_GROUP_RATE,
    ZONE_RATE,
    STRATEGIES,
)

__all__ = [
    "WeightBreaks",
    "build_weight_breaks",
    "lookup_price",
    "PriceGroup",
    "ZoneCalculator",
    "tiered_price",
    "linear_price",
    "RateStrategy",
    "PriceGroupRate",
    "ZoneRate",
    "PRICE_GROUP_RATE",
    "ZONE_RATE",
    "STRATEGIES",
]
