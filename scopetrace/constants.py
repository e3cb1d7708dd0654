"""
Optical and angular constants.

Lengths are in millimetres throughout the engine.
"""

import numpy as np

# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------
DEG2RAD = np.pi / 180.0
ARCSEC2RAD = DEG2RAD / 3600.0

# ---------------------------------------------------------------------------
# Wavelengths [mm]
# ---------------------------------------------------------------------------
WAVELENGTH_VISIBLE = 550e-6             # green, peak photopic sensitivity

# ---------------------------------------------------------------------------
# Diffraction and resolution coefficients
# ---------------------------------------------------------------------------
AIRY_DIAMETER_FACTOR = 2.44             # first dark ring diameter = 2.44 λ N
DAWES_CONSTANT = 11.6                   # arcsec · cm

# ---------------------------------------------------------------------------
# Drawing constants
# ---------------------------------------------------------------------------
FAR_FIELD_X = 9999999999999.0           # stand-in for a source at infinity
REFLECTED_RAY_LENGTH_FACTOR = 2.5       # fixed-length reflected ray = 2.5 f
BLUR_SPREAD_WEIGHT = 0.66               # share of the spread in front of the sensor
