"""
Shared fixtures for the shipping calculator core tests.

Two small carriers:
    zone carrier         kg / cm, max 10 kg, max 100 x 50 x 40 cm
                         DE -> zone "1" (tiered), JP -> zone "2" (linear)
    price group carrier  lb / in, max 20 lb, max 36 x 24 x 12 in, fuel 0.10/lb
                         GB -> group "1" (single 10 lb break), AU -> group "2"
"""

import copy

import pytest

from shared.engine import TariffEngine
from shared.models import Address, Dimensions, Package, Quantity
from shared.rates import PRICE_GROUP_RATE, ZONE_RATE


ZONE_OPTIONS = {
    "carrier": "Test Zone",
    "export_countries": [{"code": "US"}],
    "import_countries": [
        {"code": "DE", "zone": "1"},
        {"code": "JP", "zone": "2"},
    ],
    "zone_calculators": [
        {
            "name": "1",
            "weight_prices": [
                {"weight": "1", "price": "10.00"},
                {"weight": "2", "price": "15.00"},
                {"weight": "5", "price": "25.00"},
                {"weight": "10", "price": "40.00"},
            ],
        },
        {"name": "2", "base_price": "20.00", "price_per_unit": "3.333"},
    ],
    "mass_unit": "kg",
    "dimensions_unit": "cm",
    "maximum_weight": "10",
    "maximum_dimensions": {"length": "100", "width": "50", "height": "40"},
}


PRICE_GROUP_OPTIONS = {
    "carrier": "Test Price Group",
    "export_countries": ["US"],
    "import_countries": [
        {"code": "GB", "zone": "1"},
        {"code": "AU", "zone": "2"},
    ],
    "price_groups": [
        {"name": "1", "weight_prices": {"10": "20.00"}},
        {"name": "2", "weight_prices": [("2", "12.00"), ("10", "30.00"), ("20", "45.50")]},
    ],
    "mass_unit": "lb",
    "dimensions_unit": "in",
    "maximum_weight": "20",
    "maximum_dimensions": {"length": "36", "width": "24", "height": "12"},
    "fuel_subcharge_rate": "0.10",
}


@pytest.fixture
def zone_options():
    return copy.deepcopy(ZONE_OPTIONS)


@pytest.fixture
def price_group_options():
    return copy.deepcopy(PRICE_GROUP_OPTIONS)


@pytest.fixture
def zone_engine(zone_options):
    return TariffEngine.create(zone_options, ZONE_RATE)


@pytest.fixture
def price_group_engine(price_group_options):
    return TariffEngine.create(price_group_options, PRICE_GROUP_RATE)


@pytest.fixture
def make_package():
    """Package builder with a valid zone-carrier shipment as default."""

    def build(
        weight="1.0",
        weight_unit="kg",
        dimensions=("30", "20", "10"),
        dimensions_unit="cm",
        sender="US",
        recipient="DE",
        calculation_date=None,
    ) -> Package:
        return Package(
            weight=Quantity.weight(weight, weight_unit),
            dimensions=Dimensions.of(*dimensions, unit=dimensions_unit),
            sender_address=Address(sender),
            recipient_address=Address(recipient),
            calculation_date=calculation_date,
        )

    return build
