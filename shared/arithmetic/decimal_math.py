"""
Decimal Math

Default Math implementation backed by decimal.Decimal with its own context,
so the caller's thread-local decimal context never leaks into money math.
"""

import decimal
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP

from shared.errors import CalculationArithmeticError

from .base import Math


DEFAULT_PRECISION = 28


class DecimalMath(Math):
    """Exact decimal arithmetic with explicit rounding direction."""

    def __init__(self, precision: int = DEFAULT_PRECISION):
        self.precision = precision
        self._context = decimal.Context(
            prec=precision,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )

    # -------------------------------------------------------------------------
    # CONVERSION
    # -------------------------------------------------------------------------

    def to_decimal(self, value) -> Decimal:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            # repr gives the shortest round-tripping form: 7.4 -> "7.4"
            result = self._parse(repr(value))
        elif isinstance(value, (int, str)):
            result = self._parse(value.strip() if isinstance(value, str) else value)
        else:
            raise CalculationArithmeticError(
                f"Cannot use {type(value).__name__} value {value!r} as a number."
            )

        if not result.is_finite():
            raise CalculationArithmeticError(f"Non-finite value: {value!r}")
        return result

    @staticmethod
    def _parse(value) -> Decimal:
        try:
            return Decimal(value)
        except (decimal.InvalidOperation, ValueError) as e:
            raise CalculationArithmeticError(f"Not a number: {value!r}") from e

    # -------------------------------------------------------------------------
    # OPERATIONS
    # -------------------------------------------------------------------------

    def add(self, a, b) -> Decimal:
        return self._apply(self._context.add, a, b)

    def sub(self, a, b) -> Decimal:
        return self._apply(self._context.subtract, a, b)

    def mul(self, a, b) -> Decimal:
        return self._apply(self._context.multiply, a, b)

    def div(self, a, b) -> Decimal:
        divisor = self.to_decimal(b)
        if divisor.is_zero():
            raise CalculationArithmeticError(f"Division by zero: {a} / {b}")
        return self._apply(self._context.divide, a, divisor)

    def compare(self, a, b) -> int:
        return int(self.to_decimal(a).compare(self.to_decimal(b)))

    def _apply(self, operation, a, b) -> Decimal:
        try:
            result = operation(self.to_decimal(a), self.to_decimal(b))
        except decimal.DecimalException as e:
            raise CalculationArithmeticError(f"{operation.__name__}({a}, {b}) failed: {e!r}") from e

        if not result.is_finite():
            raise CalculationArithmeticError(f"{operation.__name__}({a}, {b}) is not finite")
        return result

    # -------------------------------------------------------------------------
    # ROUNDING
    # -------------------------------------------------------------------------

    def round_up(self, value, places: int = 0) -> Decimal:
        return self._quantize(value, places, ROUND_CEILING)

    def round_down(self, value, places: int = 0) -> Decimal:
        return self._quantize(value, places, ROUND_FLOOR)

    def round(self, value, places: int = 0) -> Decimal:
        return self._quantize(value, places, ROUND_HALF_UP)

    def format(self, value, places: int = 2) -> str:
        rounded = self.round(value, places)
        if rounded.is_zero():
            rounded = abs(rounded)  # no "-0.00"
        return format(rounded, "f")

    def _quantize(self, value, places: int, rounding: str) -> Decimal:
        exponent = Decimal(1).scaleb(-places)
        try:
            return self.to_decimal(value).quantize(exponent, rounding=rounding, context=self._context)
        except decimal.DecimalException as e:
            raise CalculationArithmeticError(
                f"Cannot round {value} to {places} places: {e!r}"
            ) from e
