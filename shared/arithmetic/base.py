"""
Math Interface

Every money and weight operation goes through a Math implementation so the
precision backend can be swapped without touching calculation code.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class Math(ABC):
    """Exact arithmetic capability."""

    @abstractmethod
    def to_decimal(self, value) -> Decimal:
        """Convert an int, str, float or Decimal to an exact value."""

    @abstractmethod
    def add(self, a, b) -> Decimal: ...

    @abstractmethod
    def sub(self, a, b) -> Decimal: ...

    @abstractmethod
    def mul(self, a, b) -> Decimal: ...

    @abstractmethod
    def div(self, a, b) -> Decimal:
        """Divide a by b. Raises CalculationArithmeticError when b is zero."""

    @abstractmethod
    def compare(self, a, b) -> int:
        """Return -1, 0 or 1."""

    @abstractmethod
    def round_up(self, value, places: int = 0) -> Decimal:
        """Round towards positive infinity at the given decimal places."""

    @abstractmethod
    def round_down(self, value, places: int = 0) -> Decimal:
        """Round towards negative infinity at the given decimal places."""

    @abstractmethod
    def round(self, value, places: int = 0) -> Decimal:
        """Round half up at the given decimal places."""

    @abstractmethod
    def format(self, value, places: int = 2) -> str:
        """Fixed-point string with exactly `places` fractional digits."""

    # -------------------------------------------------------------------------
    # COMPARISONS
    # -------------------------------------------------------------------------

    def greater_than(self, a, b) -> bool:
        return self.compare(a, b) > 0

    def less_than(self, a, b) -> bool:
        return self.compare(a, b) < 0

    def greater_or_equal(self, a, b) -> bool:
        return self.compare(a, b) >= 0

    def less_or_equal(self, a, b) -> bool:
        return self.compare(a, b) <= 0

    def max(self, a, b) -> Decimal:
        """Larger of a and b; a wins ties."""
        return self.to_decimal(b) if self.greater_than(b, a) else self.to_decimal(a)
