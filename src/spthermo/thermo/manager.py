"""Managers evaluating the reference-state properties of every species in a phase."""

from __future__ import annotations

import logging
import operator
from copy import deepcopy
from typing import List, MutableSequence, Optional, Sequence, Tuple

import numpy as np

from spthermo.exceptions import (
    ConfigurationError,
    InconsistentReferenceStateError,
    NotReadyError,
    SpeciesIndexError,
)
from spthermo.models import CoefficientRecord, FamilyTag, ThermoParameters
from spthermo.thermo.base import SpeciesThermo, SpeciesThermoInterp
from spthermo.thermo.factory import new_species_thermo_interp
from spthermo.thermo.polynomial import temperature_polynomial

logger = logging.getLogger(__name__)


class GeneralSpeciesThermo(SpeciesThermo):
    """Species thermo manager that accepts any mix of parameterization families.

    The manager holds one slot per declared species. It is ready once every
    slot has been installed; installing again at an index replaces that
    species only. Property arrays passed to the update methods belong to
    the caller and must have length `species_count`.
    """

    def __init__(self, species_count: int) -> None:
        species_count = operator.index(species_count)
        if species_count < 0:
            raise ConfigurationError(f"Species count must be non-negative, got {species_count}")
        self._sp: List[Optional[SpeciesThermoInterp]] = [None] * species_count
        self._names: List[Optional[str]] = [None] * species_count
        self._n_installed = 0

    @property
    def species_count(self) -> int:
        return len(self._sp)

    @property
    def is_ready(self) -> bool:
        return self._n_installed == len(self._sp)

    def installed(self, k: int) -> bool:
        return self._sp[self._check_bounds(k)] is not None

    def species_name(self, k: int) -> str:
        self._installed_interp(k)
        return self._names[k]

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
        k = self._check_bounds(index)
        interp = new_species_thermo_interp(family, k, min_temp, max_temp, ref_pressure, coefficients)
        self._check_reference_state(k, interp)

        if self._sp[k] is None:
            self._n_installed += 1
        self._sp[k] = interp
        self._names[k] = name
        logger.debug(
            "Installed %s parameterization for species '%s' at index %d (%g-%g K, %g Pa)",
            interp.report_type().name,
            name,
            k,
            interp.min_temp(),
            interp.max_temp(),
            interp.ref_pressure(),
        )

    def install_record(self, record: CoefficientRecord) -> None:
        self.install(
            record.name,
            record.species_index,
            record.family,
            record.coefficients,
            record.min_temp,
            record.max_temp,
            record.ref_pressure,
        )

    def update(
        self,
        temperature: float,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        self._require_ready()
        tt = temperature_polynomial(temperature)
        for interp in self._sp:
            interp.update_properties(tt, cp_R, h_RT, s_R)

    def update_one(
        self,
        k: int,
        temperature: float,
        cp_R: MutableSequence[float],
        h_RT: MutableSequence[float],
        s_R: MutableSequence[float],
    ) -> None:
        self._require_ready()
        self._installed_interp(k).update_properties_temp(temperature, cp_R, h_RT, s_R)

    def evaluate(self, temperature: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return freshly allocated (cp_R, h_RT, s_R) arrays at `temperature`."""
        n = len(self._sp)
        cp_R, h_RT, s_R = np.empty(n), np.empty(n), np.empty(n)
        self.update(temperature, cp_R, h_RT, s_R)
        return cp_R, h_RT, s_R

    def min_temp(self, k: Optional[int] = None) -> float:
        if k is None:
            return max((sp.min_temp() for sp in self._sp if sp is not None), default=0.0)
        return self._installed_interp(k).min_temp()

    def max_temp(self, k: Optional[int] = None) -> float:
        if k is None:
            return min((sp.max_temp() for sp in self._sp if sp is not None), default=np.inf)
        return self._installed_interp(k).max_temp()

    def ref_pressure(self, k: Optional[int] = None) -> float:
        if k is None:
            for sp in self._sp:
                if sp is not None:
                    return sp.ref_pressure()
            raise SpeciesIndexError("No species installed; reference pressure is undefined")
        return self._installed_interp(k).ref_pressure()

    def report_type(self, k: int) -> FamilyTag:
        return self._installed_interp(k).report_type()

    def report_params(self, k: int) -> ThermoParameters:
        return self._installed_interp(k).report_parameters()

    def modify_params(self, k: int, coefficients: Sequence[float]) -> None:
        interp = self._installed_interp(k)
        interp.modify_parameters(coefficients)
        logger.debug("Modified coefficients of species '%s' at index %d", self._names[k], k)

    def copy(self) -> "GeneralSpeciesThermo":
        return deepcopy(self)

    def _check_reference_state(self, k: int, interp: SpeciesThermoInterp) -> None:
        """Hook for managers that restrict reference pressures across species."""

    def _check_bounds(self, k: int) -> int:
        k = operator.index(k)
        if not 0 <= k < len(self._sp):
            raise SpeciesIndexError(f"Species index {k} outside [0, {len(self._sp)})")
        return k

    def _installed_interp(self, k: int) -> SpeciesThermoInterp:
        interp = self._sp[self._check_bounds(k)]
        if interp is None:
            raise SpeciesIndexError(f"No parameterization installed for species index {k}")
        return interp

    def _require_ready(self) -> None:
        if self._n_installed != len(self._sp):
            missing = [k for k, sp in enumerate(self._sp) if sp is None]
            raise NotReadyError(f"Species at indices {missing} have not been installed")


class UniformPressureSpeciesThermo(GeneralSpeciesThermo):
    """Manager for phases (such as ideal gases) that need one reference pressure.

    Installing a species whose reference pressure differs from those already
    installed raises InconsistentReferenceStateError.
    """

    rel_tol = 1.0e-12

    def _check_reference_state(self, k: int, interp: SpeciesThermoInterp) -> None:
        for j, sp in enumerate(self._sp):
            if sp is None or j == k:
                continue
            if not np.isclose(sp.ref_pressure(), interp.ref_pressure(), rtol=self.rel_tol, atol=0.0):
                raise InconsistentReferenceStateError(
                    f"Reference pressure {interp.ref_pressure()} Pa of species index {k} differs "
                    f"from {sp.ref_pressure()} Pa used by species index {j}"
                )
            return
