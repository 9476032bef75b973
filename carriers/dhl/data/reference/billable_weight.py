"""
Billable Weight Configuration

DHL Express bills the greater of actual and volumetric weight:
    volumetric_weight_kg = length_cm * width_cm * height_cm / 5000

Volumetric weight is rounded UP to 3 decimals (grams). A box at the maximum
dimensions (120 x 80 x 80 cm) bills 153.6 kg, so the rate brackets run past
the 70 kg actual weight limit up to 160 kg.
"""

VOLUMETRIC_FACTOR = 5000      # Cubic centimeters per kilogram
