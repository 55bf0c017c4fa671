"""NASA 7-coefficient polynomials, in one or two temperature zones.

Form (NASA Glenn / CHEMKIN):
    cp/R = a1 + a2 T + a3 T^2 + a4 T^3 + a5 T^4
    h/RT = a1 + a2 T/2 + a3 T^2/3 + a4 T^3/4 + a5 T^4/5 + a6/T
    s/R  = a1 ln T + a2 T + a3 T^2/2 + a4 T^3/3 + a5 T^4/4 + a7
"""

from __future__ import annotations

from typing import MutableSequence, Tuple

import numpy as np

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


def _eval_nasa7(a: Tuple[float, ...], tt: np.ndarray) -> Tuple[float, float, float]:
    a1, a2, a3, a4, a5, a6, a7 = a
    t, t2, t3, t4 = tt[POLY_T], tt[POLY_T2], tt[POLY_T3], tt[POLY_T4]
    cp = a1 + a2 * t + a3 * t2 + a4 * t3 + a5 * t4
    h = a1 + a2 * t / 2.0 + a3 * t2 / 3.0 + a4 * t3 / 4.0 + a5 * t4 / 5.0 + a6 * tt[POLY_INV_T]
    s = a1 * tt[POLY_LOG_T] + a2 * t + a3 * t2 / 2.0 + a4 * t3 / 3.0 + a5 * t4 / 4.0 + a7
    return cp, h, s


@register(FamilyTag.NASA1)
class NasaPoly1(SpeciesThermoInterp):
    """Single-zone NASA polynomial; coefficients are [a1..a7]."""

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
        cp_R[k], h_RT[k], s_R[k] = _eval_nasa7(self._a, temp_poly)


@register(FamilyTag.NASA2)
class NasaPoly2(SpeciesThermoInterp):
    """Two-zone NASA polynomial.

    Coefficients are [T_mid, low a1..a7, high a1..a7]. The low zone is used
    for T < T_mid and the high zone for T >= T_mid, so a temperature equal
    to the midpoint is evaluated with the high-zone coefficients.
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
        cp_R[k], h_RT[k], s_R[k] = _eval_nasa7(a, temp_poly)
