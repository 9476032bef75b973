"""
DHL Carrier Module

Expected shipping cost calculator for DHL Express Worldwide (zone based).
"""

from .calculate_costs import calculate_costs, calculate_package, get_engine
from .version import VERSION

__all__ = ["calculate_costs", "calculate_package", "get_engine", "VERSION"]
