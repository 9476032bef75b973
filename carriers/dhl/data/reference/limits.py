"""
DHL Express Worldwide Limits

Units, limits and origin countries for the international export contract.
Maximum dimensions are per side after sorting (longest, middle, shortest).
"""

CARRIER = "DHL Express"
CURRENCY = "USD"

MASS_UNIT = "kg"
DIMENSIONS_UNIT = "cm"

MAXIMUM_WEIGHT = "70"                  # kg per piece
MAXIMUM_DIMENSIONS = {
    "length": "120",                   # cm
    "width": "80",
    "height": "80",
}

EXPORT_COUNTRIES = ["US"]
