"""
Dimensions Normalizer

Carriers publish maximum length/width/height without caring which way the
box is turned, so limits are compared on sorted sides:
length >= width >= height.
"""

from functools import cmp_to_key

from shared.arithmetic import Math, DecimalMath
from shared.models import Dimensions


class DimensionsNormalizer:

    def __init__(self, math: Math | None = None):
        self.math = math or DecimalMath()

    def normalize(self, dimensions: Dimensions) -> Dimensions:
        """Return a new Dimensions with sides sorted largest first, same unit."""
        longest, middle, shortest = sorted(
            dimensions.values(),
            key=cmp_to_key(self.math.compare),
            reverse=True,
        )
        return Dimensions(longest, middle, shortest, dimensions.unit)
