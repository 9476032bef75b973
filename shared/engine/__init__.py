"""
Tariff Engine

Configuration, orchestration and batch entry point shared by all carriers.
"""

from .configuration import Configuration, create_configuration, DEFAULT_CURRENCY
from .tariff import TariffEngine
from .batch import calculate_costs, package_from_row, normalize_country_code, REQUIRED_COLUMNS

__all__ = [
    "Configuration",
    "create_configuration",
    "DEFAULT_CURRENCY",
    "TariffEngine",
    "calculate_costs",
    "package_from_row",
    "normalize_country_code",
    "REQUIRED_COLUMNS",
]
