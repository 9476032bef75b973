"""
Asendia Fuel Surcharge Configuration

Fuel is billed per WHOLE pound of actual weight on top of the price group
rate: a 7.40 lb parcel pays fuel for 7 lb.

Update frequency: Monthly (Asendia USA fuel notice)
"""

FUEL_SUBCHARGE_RATE = "0.10"   # USD per whole lb
