"""Base interfaces for species reference-state thermodynamics."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import ClassVar, MutableSequence, Optional, Sequence

import numpy as np

from spthermo.exceptions import ConfigurationError
from spthermo.models import FamilyTag, ThermoParameters
from spthermo.thermo.polynomial import temperature_polynomial


class SpeciesThermoInterp(ABC):
    """Reference-state parameterization of a single species.

    The update methods write into arrays that span every species of a
    phase, so each instance carries the index of the slot it owns. Nothing
    outside that slot is ever touched.

    Evaluation outside [min_temp, max_temp] extrapolates silently; callers
    that care compare the temperature against the limits themselves.
    """

    family: ClassVar[FamilyTag]

    def __init__(
        self,
        index: int,
        min_temp: float,
        max_temp: float,
        ref_pressure: float,
        coefficients: Sequence[float],
    ) -> None:
        min_temp = float(min_temp)
        max_temp = float(max_temp)
        ref_pressure = float(ref_pressure)
        if not (np.isfinite(min_temp) and np.isfinite(max_temp)) or min_temp >= max_temp:
            raise ConfigurationError(
                f"Invalid temperature range [{min_temp}, {max_temp}] K for {self.family.name}"
            )
        if not np.isfinite(ref_pressure) or ref_pressure <= 0.0:
            raise ConfigurationError(f"Reference pressure must be positive, got {ref_pressure} Pa")

        self._index = operator.index(index)
        self._min_temp = min_temp
        self._max_temp = max_temp
        self._ref_pressure = ref_pressure
        self._coeffs = self._checked_coefficients(coefficients)
        self._set_coefficients(self._coeffs)

    def species_index(self) -> int:
        return self._index

    def min_temp(self) -> float:
        return self._min_temp

    def max_temp(self) -> float:
        return self._max_temp

    def ref_pressure(self) -> float:
        return self._ref_pressure

    def report_type(self) -> FamilyTag:
        return self.family

    def update_properties_temp(
        self,
        temperature: float,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        """Write cp/R, h/RT and s/R at `temperature` into this species' slot."""
        self.update_properties(temperature_polynomial(temperature), cp_R, h_RT, s_R)

    @abstractmethod
    def update_properties(
        self,
        temp_poly: np.ndarray,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        """Same as update_properties_temp, from a precomputed temperature polynomial."""

    def report_parameters(self) -> ThermoParameters:
        """Return the family, limits, reference pressure and coefficients as installed."""
        return ThermoParameters(
            self.family,
            self._min_temp,
            self._max_temp,
            self._ref_pressure,
            self._coeffs.copy(),
        )

    def modify_parameters(self, coefficients: Sequence[float]) -> None:
        """Replace the coefficients, keeping family, limits and reference pressure."""
        coeffs = self._checked_coefficients(coefficients)
        self._set_coefficients(coeffs)
        self._coeffs = coeffs

    def copy(self) -> "SpeciesThermoInterp":
        return deepcopy(self)

    @abstractmethod
    def _set_coefficients(self, coeffs: np.ndarray) -> None:
        """Derive the evaluation state from `coeffs`.

        Implementations must raise before assigning anything, so that a
        rejected modification leaves the previous state intact.
        """

    def _checked_coefficients(self, coefficients: Sequence[float]) -> np.ndarray:
        try:
            coeffs = np.array(coefficients, dtype=float)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Coefficients for {self.family.name} must be real numbers") from exc
        if coeffs.ndim != 1:
            raise ConfigurationError(f"Coefficients for {self.family.name} must be a flat sequence")
        self.family.check_arity(coeffs)
        if not np.all(np.isfinite(coeffs)):
            raise ConfigurationError(f"Coefficients for {self.family.name} must be finite")
        return coeffs

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} index={self._index} "
            f"{self._min_temp:g}-{self._max_temp:g} K>"
        )


class SpeciesThermo(ABC):
    """Abstract base class for managers of a whole phase's species."""

    @abstractmethod
    def install(
        self,
        name: str,
        index: int,
        family: FamilyTag | int | str,
        coefficients: Sequence[float],
        min_temp: float,
        max_temp: float,
        ref_pressure: float,
    ) -> None:
        """Install (or replace) the parameterization of species `index`."""

    @abstractmethod
    def update(
        self,
        temperature: float,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        """Compute cp/R, h/RT and s/R for every species at `temperature`."""

    @abstractmethod
    def update_one(
        self,
        k: int,
        temperature: float,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        """Like update(), but only writes the slot of species `k`."""

    @abstractmethod
    def min_temp(self, k: Optional[int] = None) -> float:
        """Minimum valid temperature of species `k`, or of every species if omitted."""

    @abstractmethod
    def max_temp(self, k: Optional[int] = None) -> float:
        """Maximum valid temperature of species `k`, or of every species if omitted."""

    @abstractmethod
    def ref_pressure(self, k: Optional[int] = None) -> float:
        """Reference pressure (Pa) of species `k`, or of the first species if omitted."""

    @abstractmethod
    def report_type(self, k: int) -> FamilyTag:
        pass

    @abstractmethod
    def report_params(self, k: int) -> ThermoParameters:
        pass

    @abstractmethod
    def modify_params(self, k: int, coefficients: Sequence[float]) -> None:
        pass
