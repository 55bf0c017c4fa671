"""Construction of species parameterizations from a family tag."""

from __future__ import annotations

from typing import Sequence, Tuple

from spthermo.exceptions import ConfigurationError
from spthermo.models import FamilyTag
from spthermo.thermo.base import SpeciesThermoInterp

# Imported for their registration side effect.
from spthermo.thermo import const_cp  # noqa: F401
from spthermo.thermo import mu0  # noqa: F401
from spthermo.thermo import nasa  # noqa: F401
from spthermo.thermo import shomate  # noqa: F401

from spthermo.thermo.registry import REGISTRY


def new_species_thermo_interp(
    family: FamilyTag | int | str,
    index: int,
    min_temp: float,
    max_temp: float,
    ref_pressure: float,
    coefficients: Sequence[float],
) -> SpeciesThermoInterp:
    """Build the parameterization registered for `family`."""
    tag = FamilyTag.parse(family)
    try:
        cls = REGISTRY[tag]
    except KeyError as exc:
        raise ConfigurationError(f"No parameterization registered for family {tag.name}") from exc
    return cls(index, min_temp, max_temp, ref_pressure, coefficients)


def registered_families() -> Tuple[FamilyTag, ...]:
    return tuple(sorted(REGISTRY))
