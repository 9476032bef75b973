"""
Tariff Engine

Validates a package against a carrier configuration and prices it.

PROCESSING ORDER
----------------
    1. Validate sender      - export country
    2. Validate recipient   - import country with a rate table
    3. Validate dimensions  - positive (zone carriers), within maxima
    4. Validate weight      - within maximum
    5. Billable weight      - from the rate strategy
    6. Resolve rate         - price group / zone price function
    7. Round                - UP to cents, rendered as "DDDD.CC"

FAIL_FAST stops at the first violation with a typed ViolationError.
COLLECT_ALL visits every check and only prices packages with no violations.
ConfigurationError and CalculationArithmeticError always propagate.

The engine holds no per-call state and can be shared between threads.
"""

import logging

from shared.arithmetic import Math, DecimalMath
from shared.context import create_context
from shared.errors import ViolationError
from shared.models import Package, Quantity, Result
from shared.units import UnitConverter
from shared.validation import Validator, ValidationMode, fail_fast, collect_all

from .configuration import Configuration, create_configuration

logger = logging.getLogger(__name__)


COST_PLACES = 2


class TariffEngine:

    def __init__(
        self,
        configuration: Configuration,
        math: Math | None = None,
        length_converter: UnitConverter | None = None,
        weight_converter: UnitConverter | None = None,
    ):
        self.configuration = configuration
        self.context = create_context(configuration, math, length_converter, weight_converter)
        self.validator = Validator(self.context)

    @classmethod
    def create(cls, options, rate_strategy, math: Math | None = None) -> "TariffEngine":
        """Build the configuration from raw options and wrap it in an engine."""
        math = math or DecimalMath()
        return cls(create_configuration(options, rate_strategy, math), math)

    @property
    def math(self) -> Math:
        return self.context.math

    @property
    def extra_data(self):
        return self.configuration.extra_data

    # =========================================================================
    # ENTRY POINTS
    # =========================================================================

    def calculate(self, package: Package, mode=ValidationMode.FAIL_FAST) -> Result:
        """
        Price a package.

        Args:
            package: Package to price
            mode: ValidationMode.FAIL_FAST (raise) or COLLECT_ALL (record)

        Returns:
            Result with total_cost and currency, or with violations

        Raises:
            ViolationError: first failed rule, FAIL_FAST only
            ConfigurationError: rate table missing or incomplete
        """
        return self.visit(Result(package), package, mode)

    def visit(self, result: Result, package: Package, mode=ValidationMode.FAIL_FAST) -> Result:
        """Same as calculate() but fills a caller-supplied Result."""
        mode = ValidationMode(mode)

        if mode is ValidationMode.FAIL_FAST:
            try:
                fail_fast(self.validator.checks, package)
            except ViolationError as e:
                result.error = e
                raise
        else:
            self.validate(result, package)
            if result.violations:
                logger.info(
                    "%s: package rejected (%s)",
                    self.configuration.carrier,
                    ", ".join(v.kind.value for v in result.violations),
                )
                return result

        return self._price(result, package)

    def validate(self, result: Result, package: Package) -> Result:
        """Run every check, recording violations on the result."""
        return collect_all(self.validator.checks, package, result)

    # =========================================================================
    # PRICING
    # =========================================================================

    def billable_weight(self, package: Package) -> Quantity:
        strategy = self.configuration.rate_strategy
        return strategy.billable_weight(self.context, package)

    def rate_table(self, package: Package):
        """
        Rate table for the recipient's zone or price group.

        Raises:
            ConfigurationError: if the zone has no rate table
        """
        return self.configuration.registry.resolve_zone(
            package.recipient_address.country_code,
            self.configuration.rate_tables,
        )

    def _price(self, result: Result, package: Package) -> Result:
        strategy = self.configuration.rate_strategy
        math = self.context.math

        weight = self.billable_weight(package)
        table = self.rate_table(package)
        total = strategy.price(self.context, table, weight.value)
        total = math.round_up(total, COST_PLACES)

        result.billable_weight = weight
        result.total_cost = math.format(total, COST_PLACES)
        result.currency = self.configuration.currency

        logger.debug(
            "%s: %s %s -> %s %s (%s '%s')",
            self.configuration.carrier,
            weight.value,
            weight.unit.value,
            result.total_cost,
            result.currency,
            strategy.name,
            table.name,
        )
        return result
