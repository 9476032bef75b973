"""
Asendia Carrier Module

Expected shipping cost calculator for Asendia e-PAQ (price groups + fuel).
"""

from .calculate_costs import calculate_costs, calculate_package, get_engine
from .version import VERSION

__all__ = ["calculate_costs", "calculate_package", "get_engine", "VERSION"]
