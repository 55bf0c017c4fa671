"""Shomate polynomials (NIST Chemistry WebBook convention).

With t = T / 1000, cp in J/mol/K, h in kJ/mol and s in J/mol/K:
    cp = A + B t + C t^2 + D t^3 + E / t^2
    h  = A t + B t^2/2 + C t^3/3 + D t^4/4 - E/t + F
    s  = A ln t + B t + C t^2/2 + D t^3/3 - E/(2 t^2) + G

NIST tabulates H - H298 = (the expression above) - H; the H term is not
subtracted here, so h is on the formation-enthalpy basis.
"""

from __future__ import annotations

from typing import MutableSequence, Tuple

import numpy as np

from spthermo.constants import R_GAS
from spthermo.exceptions import ConfigurationError
from spthermo.models import FamilyTag
from spthermo.thermo.base import SpeciesThermoInterp
from spthermo.thermo.polynomial import (
    POLY_INV_T,
    POLY_LOG_T,
    POLY_T,
    POLY_T2,
    POLY_T3,
    POLY_T4,
)
from spthermo.thermo.registry import register

_LOG_1000 = float(np.log(1000.0))


def _eval_shomate(a: Tuple[float, ...], tt: np.ndarray) -> Tuple[float, float, float]:
    A, B, C, D, E, F, G = a
    # Rescale the shared polynomial to t = T/1000 instead of rebuilding it.
    t = tt[POLY_T] * 1.0e-3
    t2 = tt[POLY_T2] * 1.0e-6
    t3 = tt[POLY_T3] * 1.0e-9
    t4 = tt[POLY_T4] * 1.0e-12
    inv_t = tt[POLY_INV_T] * 1.0e3
    inv_t2 = inv_t * inv_t
    log_t = tt[POLY_LOG_T] - _LOG_1000

    cp = A + B * t + C * t2 + D * t3 + E * inv_t2
    h = A * t + B * t2 / 2.0 + C * t3 / 3.0 + D * t4 / 4.0 - E * inv_t + F
    s = A * log_t + B * t + C * t2 / 2.0 + D * t3 / 3.0 - E * inv_t2 / 2.0 + G
    # h [kJ/mol] / (R [J/mol/K] * T [K]) == h / (R * t)
    return cp / R_GAS, h * inv_t / R_GAS, s / R_GAS


@register(FamilyTag.SHOMATE1)
class ShomatePoly(SpeciesThermoInterp):
    """Single-zone Shomate polynomial; coefficients are [A..G]."""

    def _set_coefficients(self, coeffs: np.ndarray) -> None:
        self._a = tuple(float(c) for c in coeffs)

    def update_properties(
        self,
        temp_poly: np.ndarray,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        k = self._index
        cp_R[k], h_RT[k], s_R[k] = _eval_shomate(self._a, temp_poly)


@register(FamilyTag.SHOMATE2)
class ShomatePoly2(SpeciesThermoInterp):
    """Two-zone Shomate polynomial.

    Coefficients are [T_mid, low A..G, high A..G]; T >= T_mid selects the
    high zone.
    """

    def _set_coefficients(self, coeffs: np.ndarray) -> None:
        mid_temp = float(coeffs[0])
        if not self._min_temp <= mid_temp <= self._max_temp:
            raise ConfigurationError(
                f"Midpoint temperature {mid_temp} K outside [{self._min_temp}, {self._max_temp}] K"
            )
        low = tuple(float(c) for c in coeffs[1:8])
        high = tuple(float(c) for c in coeffs[8:15])
        self._mid_temp = mid_temp
        self._low = low
        self._high = high

    @property
    def mid_temp(self) -> float:
        return self._mid_temp

    def update_properties(
        self,
        temp_poly: np.ndarray,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        a = self._low if temp_poly[POLY_T] < self._mid_temp else self._high
        k = self._index
        cp_R[k], h_RT[k], s_R[k] = _eval_shomate(a, temp_poly)
