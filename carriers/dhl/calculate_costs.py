"""
DHL Express Shipping Cost Calculator

Zone carrier: destination country -> zone -> tiered rate by billable weight,
where billable weight is the greater of actual and volumetric weight
(length x width x height / 5000, in cm and kg).

DataFrame in, DataFrame out for batches; calculate_package() for one
shipment.

REQUIRED INPUT COLUMNS
----------------------
    sender_country, recipient_country
    length, width, height, dimensions_unit
    weight, weight_unit
    ship_date (optional)

OUTPUT COLUMNS ADDED
--------------------
    billable_weight, billable_weight_unit
    cost_total, currency, violations, is_valid
    calculator_version

USAGE
-----
    from carriers.dhl.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

from functools import lru_cache

import polars as pl

from shared.engine import TariffEngine, calculate_costs as calculate_batch
from shared.models import Package, Result
from shared.rates import ZONE_RATE
from shared.validation import ValidationMode

from .version import VERSION
from .data import build_options


# =============================================================================
# ENGINE
# =============================================================================

@lru_cache(maxsize=1)
def get_engine() -> TariffEngine:
    """Engine built once from the reference data and reused."""
    return TariffEngine.create(build_options(), ZONE_RATE)


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    mode: ValidationMode = ValidationMode.COLLECT_ALL,
) -> pl.DataFrame:
    """
    Calculate shipping costs for a shipment DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)
        mode: COLLECT_ALL records rejections per row, FAIL_FAST raises

    Returns:
        DataFrame with billable weight, costs, violations and version
    """
    df = calculate_batch(df, get_engine(), mode)
    return _stamp_version(df)


def calculate_package(
    package: Package,
    mode: ValidationMode = ValidationMode.FAIL_FAST,
) -> Result:
    """Calculate the cost of a single package."""
    return get_engine().calculate(package, mode)


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "get_engine",
    "calculate_costs",
    "calculate_package",
]
