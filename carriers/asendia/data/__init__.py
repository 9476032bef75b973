"""
Asendia Data

Reference data and loaders for price groups, countries and configuration.

Structure:
    - reference/: Static reference data (price groups, countries, fuel, limits)
"""

import polars as pl
from pathlib import Path

from .reference.fuel import FUEL_SUBCHARGE_RATE
from .reference.limits import (
    CARRIER,
    CURRENCY,
    MASS_UNIT,
    DIMENSIONS_UNIT,
    MAXIMUM_WEIGHT,
    MAXIMUM_DIMENSIONS,
    EXPORT_COUNTRIES,
)


REFERENCE_DIR = Path(__file__).parent / "reference"


def load_price_groups() -> pl.DataFrame:
    """
    Load price group rates in long format.

    Returns:
        DataFrame with columns:
            - price_group: Price group name
            - weight_lbs_upper: Upper bound of weight bracket (inclusive)
            - rate: Rate for this price group/weight combination
    """
    return pl.read_csv(
        REFERENCE_DIR / "price_groups.csv",
        schema_overrides={
            "price_group": pl.Utf8,
            "weight_lbs_upper": pl.Utf8,
            "rate": pl.Utf8,
        },
    )


def load_countries() -> pl.DataFrame:
    """
    Load destination country to price group mappings.

    Returns:
        DataFrame with columns: country_code, price_group
    """
    return pl.read_csv(
        REFERENCE_DIR / "countries.csv",
        schema_overrides={
            "country_code": pl.Utf8,
            "price_group": pl.Utf8,
        },
    )


def build_options(
    countries: pl.DataFrame | None = None,
    price_groups: pl.DataFrame | None = None,
) -> dict:
    """
    Assemble configuration options for the price group rate strategy.

    Args:
        countries: Country mapping DataFrame (loaded from countries.csv if not provided)
        price_groups: Rate DataFrame (loaded from price_groups.csv if not provided)
    """
    if countries is None:
        countries = load_countries()
    if price_groups is None:
        price_groups = load_price_groups()

    grouped = (
        price_groups
        .group_by("price_group", maintain_order=True)
        .agg(pl.col("weight_lbs_upper"), pl.col("rate"))
    )

    return {
        "carrier": CARRIER,
        "currency": CURRENCY,
        "export_countries": [{"code": code} for code in EXPORT_COUNTRIES],
        "import_countries": [
            {"code": row["country_code"], "zone": row["price_group"]}
            for row in countries.iter_rows(named=True)
        ],
        "price_groups": [
            {
                "name": row["price_group"],
                "weight_prices": list(zip(row["weight_lbs_upper"], row["rate"])),
            }
            for row in grouped.iter_rows(named=True)
        ],
        "mass_unit": MASS_UNIT,
        "dimensions_unit": DIMENSIONS_UNIT,
        "maximum_weight": MAXIMUM_WEIGHT,
        "maximum_dimensions": MAXIMUM_DIMENSIONS,
        "fuel_subcharge_rate": FUEL_SUBCHARGE_RATE,
    }


__all__ = [
    "load_price_groups",
    "load_countries",
    "build_options",
    "REFERENCE_DIR",
    "FUEL_SUBCHARGE_RATE",
    "CARRIER",
    "CURRENCY",
    "MASS_UNIT",
    "DIMENSIONS_UNIT",
    "MAXIMUM_WEIGHT",
    "MAXIMUM_DIMENSIONS",
    "EXPORT_COUNTRIES",
]
