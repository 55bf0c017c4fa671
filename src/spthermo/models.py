"""Data structures for species parameterizations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping, NamedTuple, Sequence

import numpy as np

from spthermo.constants import ONE_ATM
from spthermo.exceptions import ConfigurationError

# Bumped whenever a tag is added or the coefficient layout of a tag changes.
FAMILY_TAG_VERSION = 1


class FamilyTag(IntEnum):
    """Identifier of a species parameterization family.

    The integer values are shared with whatever produces the coefficients,
    so existing values must never be renumbered.

    Coefficient layouts:
        NASA2: [T_mid, a1..a7 (low zone), a1..a7 (high zone)]
        SHOMATE2: [T_mid, A..G (low zone), A..G (high zone)]
        CONSTANT_CP: [T0, h0/R, s0/R, cp0/R]
        MU0_INTERP: [n, h0/R, T_1, mu0_1/R, ..., T_n, mu0_n/R]
        NASA1: [a1..a7]
        SHOMATE1: [A..G]
    """

    NASA2 = 1
    SHOMATE2 = 2
    CONSTANT_CP = 4
    MU0_INTERP = 5
    NASA1 = 6
    SHOMATE1 = 7

    @classmethod
    def parse(cls, value: Any) -> "FamilyTag":
        """Resolve a tag from a member, its integer value or its name."""
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls[value.strip().upper()]
            return cls(int(value))
        except (KeyError, ValueError, TypeError) as exc:
            raise ConfigurationError(f"Unknown parameterization family: {value!r}") from exc

    def expected_arity(self, coefficients: Sequence[float]) -> int:
        if self is FamilyTag.MU0_INTERP:
            if len(coefficients) == 0:
                raise ConfigurationError("MU0_INTERP parameterization requires a point count")
            n_points = float(coefficients[0])
            if not n_points.is_integer() or n_points < 2:
                raise ConfigurationError(
                    f"MU0_INTERP point count must be an integer >= 2, got {coefficients[0]!r}"
                )
            return 2 + 2 * int(n_points)
        return _FIXED_ARITY[self]

    def check_arity(self, coefficients: Sequence[float]) -> None:
        expected = self.expected_arity(coefficients)
        if len(coefficients) != expected:
            raise ConfigurationError(
                f"{self.name} parameterization expects {expected} coefficients, got {len(coefficients)}"
            )


_FIXED_ARITY = {
    FamilyTag.NASA2: 15,
    FamilyTag.SHOMATE2: 15,
    FamilyTag.CONSTANT_CP: 4,
    FamilyTag.NASA1: 7,
    FamilyTag.SHOMATE1: 7,
}


class ThermoParameters(NamedTuple):
    family: FamilyTag
    min_temp: float  # K
    max_temp: float  # K
    ref_pressure: float  # Pa
    coefficients: np.ndarray


@dataclass(frozen=True)
class CoefficientRecord:
    """Everything needed to install one species into a manager."""

    species_index: int
    family: FamilyTag
    coefficients: tuple[float, ...]
    min_temp: float  # K
    max_temp: float  # K
    ref_pressure: float = ONE_ATM  # Pa
    name: str = ""

    @classmethod
    def from_mapping(cls, species_index: int, data: Mapping[str, Any]) -> "CoefficientRecord":
        try:
            return cls(
                species_index=species_index,
                family=FamilyTag.parse(data["family"]),
                coefficients=tuple(float(c) for c in data["coefficients"]),
                min_temp=float(data["min_temp"]),
                max_temp=float(data["max_temp"]),
                ref_pressure=float(data.get("ref_pressure", ONE_ATM)),
                name=str(data.get("name", f"species_{species_index}")),
            )
        except KeyError as exc:
            raise ConfigurationError(
                f"Species entry {species_index} is missing field {exc.args[0]!r}"
            ) from exc
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Species entry {species_index} is malformed: {exc}") from exc
