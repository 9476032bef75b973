"""
DHL Data

Reference data and loaders for zones, rates and configuration.

Structure:
    - reference/: Static reference data (zones, rates, limits, billable weight)
"""

import polars as pl
from pathlib import Path

from .reference.billable_weight import VOLUMETRIC_FACTOR
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


def load_rates() -> pl.DataFrame:
    """
    Load base rates in long format.

    Values are read as strings so rates reach the engine as exact decimals.

    Returns:
        DataFrame with columns:
            - zone: Zone name
            - weight_kg_upper: Upper bound of weight bracket (inclusive)
            - rate: Base rate for this zone/weight combination
    """
    return pl.read_csv(
        REFERENCE_DIR / "base_rates.csv",
        schema_overrides={
            "zone": pl.Utf8,
            "weight_kg_upper": pl.Utf8,
            "rate": pl.Utf8,
        },
    )


def load_zones() -> pl.DataFrame:
    """
    Load destination country to zone mappings.

    Returns:
        DataFrame with columns: country_code, zone
    """
    return pl.read_csv(
        REFERENCE_DIR / "zones.csv",
        schema_overrides={
            "country_code": pl.Utf8,
            "zone": pl.Utf8,
        },
    )


def build_options(
    zones: pl.DataFrame | None = None,
    rates: pl.DataFrame | None = None,
) -> dict:
    """
    Assemble configuration options for the zone rate strategy.

    Args:
        zones: Zone mapping DataFrame (loaded from zones.csv if not provided)
        rates: Rate DataFrame (loaded from base_rates.csv if not provided)
    """
    if zones is None:
        zones = load_zones()
    if rates is None:
        rates = load_rates()

    grouped = (
        rates
        .group_by("zone", maintain_order=True)
        .agg(pl.col("weight_kg_upper"), pl.col("rate"))
    )

    return {
        "carrier": CARRIER,
        "currency": CURRENCY,
        "export_countries": [{"code": code} for code in EXPORT_COUNTRIES],
        "import_countries": [
            {"code": row["country_code"], "zone": row["zone"]}
            for row in zones.iter_rows(named=True)
        ],
        "zone_calculators": [
            {
                "name": row["zone"],
                "weight_prices": list(zip(row["weight_kg_upper"], row["rate"])),
            }
            for row in grouped.iter_rows(named=True)
        ],
        "mass_unit": MASS_UNIT,
        "dimensions_unit": DIMENSIONS_UNIT,
        "maximum_weight": MAXIMUM_WEIGHT,
        "maximum_dimensions": MAXIMUM_DIMENSIONS,
        "volumetric_calculation_factor": VOLUMETRIC_FACTOR,
    }


__all__ = [
    "load_rates",
    "load_zones",
    "build_options",
    "REFERENCE_DIR",
    "VOLUMETRIC_FACTOR",
    "CARRIER",
    "CURRENCY",
    "MASS_UNIT",
    "DIMENSIONS_UNIT",
    "MAXIMUM_WEIGHT",
    "MAXIMUM_DIMENSIONS",
    "EXPORT_COUNTRIES",
]
