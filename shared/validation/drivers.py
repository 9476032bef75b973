"""
Validation Drivers

Two ways to run the same checks:

    FAIL_FAST    raise the typed error of the first failing check,
                 later checks do not run
    COLLECT_ALL  run every check, append each Violation to the Result

ConfigurationError and CalculationArithmeticError pass through both.
"""

from enum import Enum
from typing import Callable, Iterable

from shared.errors import (
    ViolationError,
    InvalidSenderAddressError,
    InvalidRecipientAddressError,
    InvalidDimensionsError,
    InvalidWeightError,
)
from shared.models import Package, Result, Violation, ViolationKind


Check = Callable[[Package], Violation | None]


class ValidationMode(str, Enum):
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


VIOLATION_ERRORS: dict[ViolationKind, type[ViolationError]] = {
    ViolationKind.SENDER: InvalidSenderAddressError,
    ViolationKind.RECIPIENT: InvalidRecipientAddressError,
    ViolationKind.DIMENSIONS: InvalidDimensionsError,
    ViolationKind.WEIGHT: InvalidWeightError,
}


def to_error(violation: Violation) -> ViolationError:
    return VIOLATION_ERRORS[violation.kind](violation)


def fail_fast(checks: Iterable[Check], package: Package) -> None:
    """Raise on the first failing check."""
    for check in checks:
        violation = check(package)
        if violation is not None:
            raise to_error(violation)


def collect_all(checks: Iterable[Check], package: Package, result: Result) -> Result:
    """Run every check and record each failure on the result."""
    for check in checks:
        violation = check(package)
        if violation is not None:
            result.add_violation(violation)
    return result
