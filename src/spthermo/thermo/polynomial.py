"""Temperature polynomial shared by all parameterization families.

A manager builds the polynomial once per temperature and hands it to every
species, so the logarithm and powers of T are evaluated only once per
update regardless of the number of species.
"""

from __future__ import annotations

import numpy as np

# Positions in the array returned by temperature_polynomial.
POLY_T = 0
POLY_T2 = 1
POLY_T3 = 2
POLY_T4 = 3
POLY_INV_T = 4
POLY_LOG_T = 5

POLY_SIZE = 6


def temperature_polynomial(temperature: float) -> np.ndarray:
    """Return [T, T^2, T^3, T^4, 1/T, ln T] for a temperature in K (T > 0)."""
    t = float(temperature)
    t2 = t * t
    t3 = t2 * t
    return np.array([t, t2, t3, t3 * t, 1.0 / t, np.log(t)])
