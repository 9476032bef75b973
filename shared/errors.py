"""
Shipping Calculator Errors

Three families of failure:

    DATA VALIDITY (caller's package is the cause)
        ViolationError and its subclasses. Raised by fail-fast validation,
        recorded as Violations by collect-all validation.

    CONFIGURATION (operator/setup is the cause)
        ConfigurationError. Always fatal, never recorded as a violation.

    ARITHMETIC
        CalculationArithmeticError. Always fatal.
"""


class ShippingCalculatorError(Exception):
    """Base class for every error raised by the calculator."""


# =============================================================================
# DATA VALIDITY
# =============================================================================

class ViolationError(ShippingCalculatorError):
    """A package broke one of the carrier's rules."""

    def __init__(self, violation):
        super().__init__(violation.message)
        self.violation = violation


class InvalidSenderAddressError(ViolationError):
    """Sender country is not an export country."""


class InvalidRecipientAddressError(ViolationError):
    """Recipient country is not an import country."""


class InvalidDimensionsError(ViolationError):
    """Dimensions are not positive or exceed the carrier maximum."""


class InvalidWeightError(ViolationError):
    """Weight is negative or exceeds the carrier maximum."""


class CountryNotEligibleError(ShippingCalculatorError, LookupError):
    """Country code is unknown to a registry."""

    def __init__(self, code: str):
        super().__init__(f"Country '{code}' is not eligible.")
        self.code = code


# =============================================================================
# FATAL
# =============================================================================

class ConfigurationError(ShippingCalculatorError, ValueError):
    """Carrier configuration cannot answer the question for any package."""


class CalculationArithmeticError(ShippingCalculatorError, ArithmeticError):
    """Division by zero or a non-finite value reached the calculation."""
