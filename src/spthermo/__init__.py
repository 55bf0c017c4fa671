"""SpThermo core package."""

from spthermo.exceptions import (
    ConfigurationError,
    InconsistentReferenceStateError,
    NotReadyError,
    SpeciesIndexError,
    SpThermoError,
)
from spthermo.models import FAMILY_TAG_VERSION, CoefficientRecord, FamilyTag, ThermoParameters
from spthermo.thermo import (
    GeneralSpeciesThermo,
    SpeciesThermoInterp,
    UniformPressureSpeciesThermo,
    new_species_thermo_interp,
)

__all__ = [
    "ConfigurationError",
    "InconsistentReferenceStateError",
    "NotReadyError",
    "SpeciesIndexError",
    "SpThermoError",
    "FAMILY_TAG_VERSION",
    "CoefficientRecord",
    "FamilyTag",
    "ThermoParameters",
    "GeneralSpeciesThermo",
    "SpeciesThermoInterp",
    "UniformPressureSpeciesThermo",
    "new_species_thermo_interp",
]
