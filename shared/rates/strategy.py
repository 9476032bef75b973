"""
Rate Strategies

The validation and orchestration core is shared by all carriers; what
differs is how the billable weight is derived and how a rate table turns it
into a price. A strategy is picked when the configuration is built.

    PRICE_GROUP_RATE  actual weight, price group lookup + fuel surcharge
    ZONE_RATE         max(actual, volumetric) weight, zone price function

Strategies are stateless. The context they receive carries the
configuration, the Math and the converters of the engine.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from shared.models import Package, Quantity

from .price_group import PriceGroup
from .zone import ZoneCalculator


class RateStrategy(ABC):
    """
    Attributes:
        name                         - Strategy code
        table_option                 - Configuration option holding the rate tables
        requires_positive_dimensions - Reject packages with a side <= 0
    """

    name: str
    table_option: str
    requires_positive_dimensions: bool = False

    @abstractmethod
    def build_table(self, value, math):
        """Typed rate table from a built entity or its configuration mapping."""

    @abstractmethod
    def billable_weight(self, context, package: Package) -> Quantity:
        """Weight the rate is resolved for, in the configuration mass unit."""

    @abstractmethod
    def price(self, context, table, weight: Decimal) -> Decimal:
        """Unrounded total for the billable weight."""

    def configuration_errors(self, configuration) -> list[str]:
        """Problems with strategy-specific configuration options."""
        return []

    def actual_weight(self, context, package: Package) -> Quantity:
        unit = context.configuration.mass_unit
        value = context.weight_converter.convert(package.weight.value, package.weight.unit, unit)
        return Quantity(value, unit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# PRICE GROUP
# =============================================================================

class PriceGroupRate(RateStrategy):
    """
    price = price_group(weight)
    fuel  = floor(weight) * fuel_subcharge_rate
    total = price + fuel

    Fuel is billed per WHOLE weight unit: 7.99 lb pays fuel for 7 lb.
    """

    name = "price_group"
    table_option = "price_groups"

    def build_table(self, value, math) -> PriceGroup:
        return PriceGroup.from_config(value, math)

    def billable_weight(self, context, package: Package) -> Quantity:
        return self.actual_weight(context, package)

    def price(self, context, table: PriceGroup, weight: Decimal) -> Decimal:
        math = context.math
        base = table.price(weight, math)
        fuel = math.mul(math.round_down(weight, 0), context.configuration.fuel_subcharge_rate)
        return math.add(base, fuel)

    def configuration_errors(self, configuration) -> list[str]:
        rate = configuration.fuel_subcharge_rate
        if rate is None:
            return ["fuel_subcharge_rate is required for price group rates"]
        if rate < 0:
            return [f"fuel_subcharge_rate {rate} must not be negative"]
        return []


# =============================================================================
# ZONE
# =============================================================================

class ZoneRate(RateStrategy):
    """
    billable = volumetric if volumetric > actual else actual
    total    = zone.price_function(billable)
    """

    name = "zone"
    table_option = "zone_calculators"
    requires_positive_dimensions = True

    def build_table(self, value, math) -> ZoneCalculator:
        return ZoneCalculator.from_config(value, math)

    def billable_weight(self, context, package: Package) -> Quantity:
        actual = self.actual_weight(context, package)
        volumetric = context.volumetric_weight_calculator.calculate(
            package.dimensions, context.configuration.mass_unit
        )
        # Tie goes to actual weight
        if context.math.greater_than(volumetric.value, actual.value):
            return volumetric
        return actual

    def price(self, context, table: ZoneCalculator, weight: Decimal) -> Decimal:
        return context.math.to_decimal(table.calculate(weight))

    def configuration_errors(self, configuration) -> list[str]:
        factor = configuration.volumetric_divisor_factor
        if factor is None or factor <= 0:
            return [f"volumetric_calculation_factor {factor} must be positive"]
        return []


PRICE_GROUP_RATE = PriceGroupRate()
ZONE_RATE = ZoneRate()

STRATEGIES = {s.name: s for s in (PRICE_GROUP_RATE, ZONE_RATE)}
