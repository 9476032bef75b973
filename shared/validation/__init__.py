"""
Package Validation

Rules as pure checks, run fail-fast or collect-all.
"""

from .rules import (
    Validator,
    SENDER_NOT_ELIGIBLE,
    RECIPIENT_NOT_ELIGIBLE,
    DIMENSIONS_NOT_POSITIVE,
    DIMENSIONS_EXCEEDED,
    WEIGHT_NEGATIVE,
    WEIGHT_EXCEEDED,
)
from .drivers import ValidationMode, VIOLATION_ERRORS, to_error, fail_fast, collect_all

__all__ = [
    "Validator",
    "ValidationMode",
    "VIOLATION_ERRORS",
    "to_error",
    "fail_fast",
    "collect_all",
    # Messages
    "SENDER_NOT_ELIGIBLE",
    "RECIPIENT_NOT_ELIGIBLE",
    "DIMENSIONS_NOT_POSITIVE",
    "DIMENSIONS_EXCEEDED",
    "WEIGHT_NEGATIVE",
    "WEIGHT_EXCEEDED",
]
