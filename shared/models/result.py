"""
Calculation Result

One Result per calculation call. In collect-all mode it accumulates every
violation; a cost is only set when there are none.
"""

from enum import Enum
from typing import NamedTuple

from .package import Package
from .quantity import Quantity


class ViolationKind(str, Enum):
    SENDER = "sender"
    RECIPIENT = "recipient"
    DIMENSIONS = "dimensions"
    WEIGHT = "weight"


class Violation(NamedTuple):
    kind: ViolationKind
    message: str


class Result:
    """
    Outcome of one calculation.

    Attributes:
        package         - Package the result belongs to
        total_cost      - Fixed-point string ("20.70"), None until calculated
        currency        - Carrier currency code, set with total_cost
        billable_weight - Weight the rate was resolved for
        violations      - Failed rules, in check order
        error           - Typed failure raised in fail-fast mode
    """

    def __init__(self, package: Package | None = None):
        self.package = package
        self.total_cost: str | None = None
        self.currency: str | None = None
        self.billable_weight: Quantity | None = None
        self.violations: list[Violation] = []
        self.error: Exception | None = None

    def add_violation(self, violation: Violation) -> None:
        self.violations.append(violation)

    @property
    def is_valid(self) -> bool:
        return not self.violations and self.error is None

    @property
    def calculation_date(self):
        return self.package.calculation_date if self.package is not None else None

    def as_dict(self) -> dict:
        return {
            "cost_total": self.total_cost,
            "currency": self.currency,
            "billable_weight": str(self.billable_weight.value) if self.billable_weight else None,
            "billable_weight_unit": self.billable_weight.unit.value if self.billable_weight else None,
            "violations": [v.message for v in self.violations],
            "is_valid": self.is_valid,
        }

    def __repr__(self) -> str:
        if self.total_cost is not None:
            return f"Result(total_cost={self.total_cost!r}, currency={self.currency!r})"
        return f"Result(violations={[v.kind.value for v in self.violations]!r}, error={self.error!r})"
