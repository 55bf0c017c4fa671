"""Piecewise interpolation of the standard chemical potential."""

from __future__ import annotations

from typing import MutableSequence

import numpy as np

from spthermo.exceptions import ConfigurationError
from spthermo.models import FamilyTag
from spthermo.thermo.base import SpeciesThermoInterp
from spthermo.thermo.polynomial import POLY_INV_T, POLY_LOG_T, POLY_T
from spthermo.thermo.registry import register


@register(FamilyTag.MU0_INTERP)
class Mu0Poly(SpeciesThermoInterp):
    """Species defined by tabulated values of mu0(T).

    Coefficients are [n, h0/R, T_1, mu0_1/R, ..., T_n, mu0_n/R] where h0/R
    is the enthalpy at T_1. The heat capacity is constant within each
    interval and chosen so that h and s are continuous and mu0 = h - T s
    reproduces every tabulated point.

    Interval i covers [T_i, T_{i+1}); a temperature equal to an interior
    point uses the interval above it. Temperatures outside [T_1, T_n] use
    the first or last interval.
    """

    def _set_coefficients(self, coeffs: np.ndarray) -> None:
        n_points = int(coeffs[0])
        h0_R = float(coeffs[1])
        temps = np.array(coeffs[2::2], dtype=float)
        mu0_R = np.array(coeffs[3::2], dtype=float)
        if temps[0] <= 0.0:
            raise ConfigurationError(f"Tabulated temperatures must be positive, got {temps[0]} K")
        if np.any(np.diff(temps) <= 0.0):
            raise ConfigurationError("Tabulated temperatures must be strictly increasing")

        n_int = n_points - 1
        h_R = np.empty(n_points)
        s_R = np.empty(n_points)
        cp_R = np.empty(n_int)
        h_R[0] = h0_R
        s_R[0] = (h0_R - mu0_R[0]) / temps[0]
        for i in range(n_int):
            t1, t2 = temps[i], temps[i + 1]
            log_ratio = np.log(t2 / t1)
            delta_mu = mu0_R[i + 1] - mu0_R[i]
            cp = (delta_mu + (t2 - t1) * s_R[i]) / ((t2 - t1) - t2 * log_ratio)
            cp_R[i] = cp
            h_R[i + 1] = h_R[i] + cp * (t2 - t1)
            s_R[i + 1] = s_R[i] + cp * log_ratio

        self._temps = temps
        self._log_temps = np.log(temps)
        self._h_R = h_R
        self._s_R = s_R
        self._cp_R = cp_R

    def update_properties(
        self,
        temp_poly: np.ndarray,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        t = temp_poly[POLY_T]
        i = int(np.searchsorted(self._temps, t, side="right")) - 1
        i = min(max(i, 0), len(self._cp_R) - 1)
        cp = self._cp_R[i]
        k = self._index
        cp_R[k] = cp
        h_RT[k] = (self._h_R[i] + cp * (t - self._temps[i])) * temp_poly[POLY_INV_T]
        s_R[k] = self._s_R[i] + cp * (temp_poly[POLY_LOG_T] - self._log_temps[i])
