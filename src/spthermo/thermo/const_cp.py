"""Constant heat capacity parameterization."""

from __future__ import annotations

from typing import MutableSequence

import numpy as np

from spthermo.exceptions import ConfigurationError
from spthermo.models import FamilyTag
from spthermo.thermo.base import SpeciesThermoInterp
from spthermo.thermo.polynomial import POLY_INV_T, POLY_LOG_T, POLY_T
from spthermo.thermo.registry import register


@register(FamilyTag.CONSTANT_CP)
class ConstCpPoly(SpeciesThermoInterp):
    """Species with a temperature-independent heat capacity.

    Coefficients are [T0, h0/R, s0/R, cp0/R] with T0 in K and h0/R in K:

        cp/R = cp0/R
        h/RT = (h0/R + cp0/R * (T - T0)) / T
        s/R  = s0/R + cp0/R * ln(T / T0)
    """

    def _set_coefficients(self, coeffs: np.ndarray) -> None:
        t0, h0_R, s0_R, cp0_R = (float(c) for c in coeffs)
        if t0 <= 0.0:
            raise ConfigurationError(f"Reference temperature T0 must be positive, got {t0} K")
        self._t0 = t0
        self._log_t0 = float(np.log(t0))
        self._h0_R = h0_R
        self._s0_R = s0_R
        self._cp0_R = cp0_R

    def update_properties(
        self,
        temp_poly: np.ndarray,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        k = self._index
        cp = self._cp0_R
        cp_R[k] = cp
        h_RT[k] = (self._h0_R + cp * (temp_poly[POLY_T] - self._t0)) * temp_poly[POLY_INV_T]
        s_R[k] = self._s0_R + cp * (temp_poly[POLY_LOG_T] - self._log_t0)
