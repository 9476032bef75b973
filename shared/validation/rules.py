"""
Validation Rules

One check per carrier rule. Each check is a pure predicate over the package:
it returns None when the rule passes and a Violation when it fails.
Configuration defects found along the way raise ConfigurationError instead,
they are never reported as violations.

Check order is fixed: sender -> recipient -> dimensions -> weight.
"""

from shared.context import CalculationContext
from shared.errors import CountryNotEligibleError
from shared.models import Dimensions, Package, Violation, ViolationKind


SENDER_NOT_ELIGIBLE = "Can not send a package from this country."
RECIPIENT_NOT_ELIGIBLE = "Can not send a package to this country."
DIMENSIONS_NOT_POSITIVE = "Dimensions must be greater than zero."
DIMENSIONS_EXCEEDED = "Dimensions limit is exceeded."
WEIGHT_NEGATIVE = "Weight must not be negative."
WEIGHT_EXCEEDED = "Weight limit is exceeded."


class Validator:

    def __init__(self, context: CalculationContext):
        self.context = context

    @property
    def checks(self):
        """Checks in the order they run."""
        return (
            self.check_sender_address,
            self.check_recipient_address,
            self.check_dimensions,
            self.check_weight,
        )

    # -------------------------------------------------------------------------
    # ADDRESSES
    # -------------------------------------------------------------------------

    def check_sender_address(self, package: Package) -> Violation | None:
        registry = self.context.configuration.registry
        if registry.has_export(package.sender_address.country_code):
            return None
        return Violation(ViolationKind.SENDER, SENDER_NOT_ELIGIBLE)

    def check_recipient_address(self, package: Package) -> Violation | None:
        configuration = self.context.configuration
        try:
            configuration.registry.resolve_zone(
                package.recipient_address.country_code,
                configuration.rate_tables,
            )
        except CountryNotEligibleError:
            return Violation(ViolationKind.RECIPIENT, RECIPIENT_NOT_ELIGIBLE)
        return None

    # -------------------------------------------------------------------------
    # DIMENSIONS
    # -------------------------------------------------------------------------

    def check_dimensions(self, package: Package) -> Violation | None:
        strategy = self.context.configuration.rate_strategy
        if strategy.requires_positive_dimensions:
            violation = self.check_dimensions_positive(package)
            if violation is not None:
                return violation
        return self.check_dimension_limits(package)

    def check_dimensions_positive(self, package: Package) -> Violation | None:
        math = self.context.math
        if any(math.less_or_equal(side, 0) for side in package.dimensions.values()):
            return Violation(ViolationKind.DIMENSIONS, DIMENSIONS_NOT_POSITIVE)
        return None

    def check_dimension_limits(self, package: Package) -> Violation | None:
        """
        Sorted package sides against sorted maxima, side by side:
        longest <= max longest, middle <= max middle, shortest <= max shortest.
        """
        configuration = self.context.configuration
        math = self.context.math
        normalizer = self.context.dimensions_normalizer

        unit = configuration.dimensions_unit
        dimensions = normalizer.normalize(self._in_unit(package.dimensions, unit))
        maximum = normalizer.normalize(self._in_unit(configuration.maximum_dimensions, unit))

        for side, limit in zip(dimensions.values(), maximum.values()):
            if math.greater_than(side, limit):
                return Violation(ViolationKind.DIMENSIONS, DIMENSIONS_EXCEEDED)
        return None

    def _in_unit(self, dimensions: Dimensions, unit) -> Dimensions:
        if dimensions.unit == unit:
            return dimensions
        converter = self.context.length_converter
        return Dimensions(
            *(converter.convert(side, dimensions.unit, unit) for side in dimensions.values()),
            unit=unit,
        )

    # -------------------------------------------------------------------------
    # WEIGHT
    # -------------------------------------------------------------------------

    def check_weight(self, package: Package) -> Violation | None:
        configuration = self.context.configuration
        math = self.context.math

        weight = self.context.weight_converter.convert(
            package.weight.value, package.weight.unit, configuration.mass_unit
        )
        if math.less_than(weight, 0):
            return Violation(ViolationKind.WEIGHT, WEIGHT_NEGATIVE)
        if math.greater_than(weight, configuration.maximum_weight):
            return Violation(ViolationKind.WEIGHT, WEIGHT_EXCEEDED)
        return None
