"""
Shipping Models

Packages, countries and calculation results.
"""

from .quantity import Quantity, Dimensions
from .package import Address, Package
from .country import ExportCountry, ImportCountry
from .result import Result, Violation, ViolationKind

__all__ = [
    "Quantity",
    "Dimensions",
    "Address",
    "Package",
    "ExportCountry",
    "ImportCountry",
    "Result",
    "Violation",
    "ViolationKind",
]
