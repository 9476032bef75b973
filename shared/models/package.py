"""
Package and Address

Created by the caller per shipment; read-only to the engine.
"""

from datetime import date
from typing import NamedTuple

from .quantity import Dimensions, Quantity


class Address(NamedTuple):
    country_code: str


class Package(NamedTuple):
    weight: Quantity
    dimensions: Dimensions
    sender_address: Address
    recipient_address: Address
    calculation_date: date | None = None
