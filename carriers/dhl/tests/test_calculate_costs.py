"""
Unit Tests for DHL Express Cost Calculator

Tests reference data loading, zone rates, volumetric weight and limits
against the published rate card.

Run with: pytest carriers/dhl/tests/test_calculate_costs.py -v
"""

from datetime import date
from decimal import Decimal

import pytest
import polars as pl

from carriers.dhl import VERSION
from carriers.dhl.calculate_costs import calculate_costs, calculate_package, get_engine
from carriers.dhl.data import (
    load_rates,
    load_zones,
    build_options,
    DIMENSIONS_UNIT,
    MAXIMUM_DIMENSIONS,
    MAXIMUM_WEIGHT,
    VOLUMETRIC_FACTOR,
)
from shared.errors import InvalidDimensionsError, InvalidRecipientAddressError
from shared.models import Address, Dimensions, Package, Quantity
from shared.tools import VolumetricWeightCalculator
from shared.units import MassUnit
from shared.validation import ValidationMode, DIMENSIONS_EXCEEDED, WEIGHT_EXCEEDED


# =============================================================================
# FIXTURES
# =============================================================================

def package(weight="1.0", recipient="DE", dimensions=("30", "20", "10"), weight_unit="kg", dimensions_unit="cm"):
    """US export package; 30 x 20 x 10 cm is 1.2 kg volumetric."""
    return Package(
        weight=Quantity.weight(weight, weight_unit),
        dimensions=Dimensions.of(*dimensions, unit=dimensions_unit),
        sender_address=Address("US"),
        recipient_address=Address(recipient),
    )


@pytest.fixture
def base_shipments():
    return pl.DataFrame({
        "ship_date": [date(2026, 6, 15), date(2026, 6, 16)],
        "sender_country": ["US", "US"],
        "recipient_country": ["DE", "CA"],
        "length": [30.0, 130.0],
        "width": [20.0, 20.0],
        "height": [10.0, 10.0],
        "dimensions_unit": ["cm", "cm"],
        "weight": [1.0, 1.0],
        "weight_unit": ["kg", "kg"],
    })


# =============================================================================
# REFERENCE DATA
# =============================================================================

class TestReferenceData:

    def test_zones_loaded_as_strings(self):
        zones = load_zones()
        assert zones.schema["zone"] == pl.Utf8
        assert zones.filter(pl.col("country_code") == "DE")["zone"][0] == "2"

    def test_every_zone_has_rates(self):
        assert set(load_zones()["zone"]) <= set(load_rates()["zone"])

    def test_rates_cover_billable_weight_limit(self):
        """
        Every zone must price the largest billable weight validation lets
        through: max(MAXIMUM_WEIGHT, volumetric weight of MAXIMUM_DIMENSIONS).
        """
        volumetric = VolumetricWeightCalculator(factor=VOLUMETRIC_FACTOR).calculate(
            Dimensions.from_config(MAXIMUM_DIMENSIONS, DIMENSIONS_UNIT), MassUnit.KG
        )
        assert volumetric.value == Decimal("153.600")
        heaviest = max(Decimal(MAXIMUM_WEIGHT), volumetric.value)

        rates = load_rates()
        for zone in rates["zone"].unique().to_list():
            thresholds = rates.filter(pl.col("zone") == zone)["weight_kg_upper"].to_list()
            assert max(Decimal(t) for t in thresholds) >= heaviest, f"zone {zone}"

    def test_build_options(self):
        options = build_options()
        assert options["mass_unit"] == "kg"
        assert {z["name"] for z in options["zone_calculators"]} == {"1", "2", "3", "4"}


# =============================================================================
# PRICING
# =============================================================================

class TestPricing:

    def test_volumetric_weight_billed(self):
        """1.2 kg volumetric -> zone 2, 2 kg break."""
        result = calculate_package(package(recipient="DE"))
        assert str(result.billable_weight.value) == "1.200"
        assert result.total_cost == "50.95"
        assert result.currency == "USD"

    def test_actual_weight_billed(self):
        assert calculate_package(package("5", recipient="CA")).total_cost == "55.40"

    @pytest.mark.parametrize("weight,expected", [
        ("0.5", "28.50"),
        ("0.501", "32.10"),
        ("1", "32.10"),
        ("20", "121.60"),
    ])
    def test_weight_breaks(self, weight, expected):
        result = calculate_package(package(weight, recipient="CA", dimensions=("10", "10", "10")))
        assert result.total_cost == expected

    def test_inches(self):
        """12 in cube = 28316.85 cm^3 -> 5.664 kg -> 10 kg break."""
        result = calculate_package(
            package("2", recipient="CA", dimensions=("12", "12", "12"), dimensions_unit="in")
        )
        assert str(result.billable_weight.value) == "5.664"
        assert result.total_cost == "79.90"

    def test_pounds(self):
        """11 lb = 4.9895 kg -> 5 kg break, zone 3."""
        assert calculate_package(package("11", recipient="JP", weight_unit="lb")).total_cost == "90.20"

    def test_maximum_weight(self):
        assert calculate_package(package("70", recipient="BR")).total_cost == "616.00"

    def test_volumetric_weight_above_actual_limit(self):
        """100 x 60 x 60 cm = 72 kg volumetric at 5 kg actual -> zone 2, 100 kg break."""
        result = calculate_package(package("5", recipient="DE", dimensions=("100", "60", "60")))
        assert str(result.billable_weight.value) == "72.000"
        assert result.total_cost == "536.00"

    def test_largest_accepted_box(self):
        """120 x 80 x 80 cm = 153.6 kg volumetric -> 160 kg break."""
        result = calculate_package(
            package("1", recipient="CA", dimensions=("120", "80", "80")), ValidationMode.COLLECT_ALL
        )
        assert result.is_valid
        assert str(result.billable_weight.value) == "153.600"
        assert result.total_cost == "573.00"

    def test_over_maximum_weight(self):
        result = calculate_package(package("70.001", recipient="CA"), ValidationMode.COLLECT_ALL)
        assert [v.message for v in result.violations] == [WEIGHT_EXCEEDED]


# =============================================================================
# VALIDATION
# =============================================================================

class TestValidation:

    def test_too_long(self):
        with pytest.raises(InvalidDimensionsError):
            calculate_package(package(dimensions=("121", "20", "10")))

    def test_rotated_box_fits(self):
        """20 x 120 x 80 fits the 120 x 80 x 80 maximum turned on its side; 38.4 kg volumetric."""
        result = calculate_package(package("1", recipient="CA", dimensions=("20", "120", "80")))
        assert result.is_valid
        assert result.total_cost == "224.00"

    def test_unknown_destination(self):
        with pytest.raises(InvalidRecipientAddressError):
            calculate_package(package(recipient="XX"))


# =============================================================================
# BATCH
# =============================================================================

class TestCalculateCosts:

    def test_batch(self, base_shipments):
        df = calculate_costs(base_shipments)

        assert df["cost_total"].to_list() == ["50.95", None]
        assert df["violations"].to_list() == [[], [DIMENSIONS_EXCEEDED]]
        assert df["is_valid"].to_list() == [True, False]

    def test_bulky_row_priced_with_the_rest(self):
        df = calculate_costs(pl.DataFrame({
            "sender_country": ["US", "US"],
            "recipient_country": ["DE", "CA"],
            "length": ["30", "120"],
            "width": ["20", "80"],
            "height": ["10", "80"],
            "dimensions_unit": ["cm", "cm"],
            "weight": ["1", "1"],
            "weight_unit": ["kg", "kg"],
        }))
        assert df["cost_total"].to_list() == ["50.95", "573.00"]

    def test_version_stamped(self, base_shipments):
        df = calculate_costs(base_shipments)
        assert df["calculator_version"].to_list() == [VERSION, VERSION]

    def test_engine_cached(self):
        assert get_engine() is get_engine()
