from .base import SpeciesThermo, SpeciesThermoInterp
from .const_cp import ConstCpPoly
from .factory import new_species_thermo_interp, registered_families
from .manager import GeneralSpeciesThermo, UniformPressureSpeciesThermo
from .mu0 import Mu0Poly
from .nasa import NasaPoly1, NasaPoly2
from .polynomial import temperature_polynomial
from .shomate import ShomatePoly, ShomatePoly2

__all__ = [
    "SpeciesThermo",
    "SpeciesThermoInterp",
    "ConstCpPoly",
    "Mu0Poly",
    "NasaPoly1",
    "NasaPoly2",
    "ShomatePoly",
    "ShomatePoly2",
    "GeneralSpeciesThermo",
    "UniformPressureSpeciesThermo",
    "new_species_thermo_interp",
    "registered_families",
    "temperature_polynomial",
]
