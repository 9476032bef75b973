"""
Calculation Tools

Dimension normalization and volumetric weight.
"""

from .dimensions_normalizer import DimensionsNormalizer
from .volumetric_weight import VolumetricWeightCalculator, DEFAULT_FACTOR

__all__ = [
    "DimensionsNormalizer",
    "VolumetricWeightCalculator",
    "DEFAULT_FACTOR",
]
