"""
Asendia e-PAQ Limits

Units, limits and origin countries for the e-PAQ contract. Rates and limits
are published in pounds and inches; parcels ship from the US only.
"""

CARRIER = "Asendia e-PAQ"
CURRENCY = "USD"

MASS_UNIT = "lb"
DIMENSIONS_UNIT = "in"

MAXIMUM_WEIGHT = "66"                  # lb, last price group bracket
MAXIMUM_DIMENSIONS = {
    "length": "36",                    # in
    "width": "24",
    "height": "24",
}

EXPORT_COUNTRIES = ["US"]
