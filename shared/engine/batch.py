"""
Batch Calculation

DataFrame in, DataFrame out. Each row is priced by one engine call; the
input columns are kept and the result columns appended.

REQUIRED INPUT COLUMNS
----------------------
    sender_country      - Origin country code
    recipient_country   - Destination country code
    length              - Package length
    width               - Package width
    height              - Package height
    dimensions_unit     - Unit of length/width/height ("cm", "in", ...)
    weight              - Actual weight
    weight_unit         - Unit of weight ("kg", "lb", ...)

OPTIONAL INPUT COLUMNS
----------------------
    ship_date           - Carried to the package as calculation_date

OUTPUT COLUMNS ADDED
--------------------
    billable_weight, billable_weight_unit
    cost_total          - "DDDD.CC" string, null when rejected
    currency
    violations          - list of violation messages
    is_valid

A row whose weight, dimensions or units cannot be read is not priced: it
gets an "Invalid shipment data: ..." violation and the batch goes on.
FAIL_FAST raises on it instead.
"""

import logging

import polars as pl

from shared.errors import CalculationArithmeticError, ConfigurationError
from shared.models import Address, Dimensions, Package, Quantity
from shared.validation import ValidationMode

logger = logging.getLogger(__name__)


INVALID_ROW = "Invalid shipment data"

REQUIRED_COLUMNS = [
    "sender_country",
    "recipient_country",
    "length",
    "width",
    "height",
    "dimensions_unit",
    "weight",
    "weight_unit",
]

OUTPUT_SCHEMA = {
    "billable_weight": pl.Utf8,
    "billable_weight_unit": pl.Utf8,
    "cost_total": pl.Utf8,
    "currency": pl.Utf8,
    "violations": pl.List(pl.Utf8),
    "is_valid": pl.Boolean,
}


def calculate_costs(
    df: pl.DataFrame,
    engine,
    mode=ValidationMode.COLLECT_ALL,
) -> pl.DataFrame:
    """
    Price every shipment in a DataFrame.

    Args:
        df: Shipments with the required columns (see module docstring)
        engine: TariffEngine of the carrier
        mode: COLLECT_ALL records rejections per row; FAIL_FAST raises on
            the first rejected row

    Returns:
        Input DataFrame with the result columns appended
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    mode = ValidationMode(mode)
    math = engine.math
    results = []
    for index, row in enumerate(df.iter_rows(named=True)):
        try:
            package = package_from_row(row, math)
        except (CalculationArithmeticError, ConfigurationError) as e:
            if mode is ValidationMode.FAIL_FAST:
                raise
            logger.warning("%s: row %d not priced: %s", engine.configuration.carrier, index, e)
            results.append(_invalid_row(f"{INVALID_ROW}: {e}"))
            continue
        results.append(engine.calculate(package, mode).as_dict())

    rejected = sum(1 for r in results if not r["is_valid"])
    logger.info(
        "%s: priced %d shipment(s), %d rejected",
        engine.configuration.carrier,
        len(results) - rejected,
        rejected,
    )

    return df.with_columns([
        pl.Series(name, [r[name] for r in results], dtype=dtype)
        for name, dtype in OUTPUT_SCHEMA.items()
    ])


def package_from_row(row: dict, math) -> Package:
    """Build a Package from one shipment row; country codes are trimmed and upper-cased."""
    return Package(
        weight=Quantity.weight(row["weight"], row["weight_unit"], math),
        dimensions=Dimensions.of(
            row["length"],
            row["width"],
            row["height"],
            row["dimensions_unit"],
            math,
        ),
        sender_address=Address(normalize_country_code(row["sender_country"])),
        recipient_address=Address(normalize_country_code(row["recipient_country"])),
        calculation_date=row.get("ship_date"),
    )


def _invalid_row(message: str) -> dict:
    return {
        "cost_total": None,
        "currency": None,
        "billable_weight": None,
        "billable_weight_unit": None,
        "violations": [message],
        "is_valid": False,
    }


def normalize_country_code(value) -> str:
    return str(value or "").strip().upper()
