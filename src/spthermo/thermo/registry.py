"""Registry mapping family tags to species parameterization classes."""

from __future__ import annotations

from typing import Callable, Dict, Type, TypeVar

from spthermo.models import FamilyTag

_T = TypeVar("_T", bound=type)

REGISTRY: Dict[FamilyTag, Type] = {}  # tag -> SpeciesThermoInterp subclass


def register(family: FamilyTag) -> Callable[[_T], _T]:
    def deco(cls: _T) -> _T:
        if family in REGISTRY:
            raise ValueError(f"Family {family.name} already registered to {REGISTRY[family].__name__}")
        cls.family = family
        REGISTRY[family] = cls
        return cls

    return deco
