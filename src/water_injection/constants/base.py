# src/water_injection/constants/base.py
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from contextlib import contextmanager
from typing import Iterator, TypeVar
import math

N = TypeVar("N", bound="FrozenNamespace")


@dataclass(frozen=True)
class FrozenNamespace:
    """Immutable set of physical constants (kJ, kg, K, Pa, g/mol). Every value must be a finite positive number."""

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0.0):
                raise ValueError(f'{type(self).__name__}.{f.name} must be a finite positive number, {value!r} was provided')


@contextmanager
def override(constants: N, **updates: float) -> Iterator[N]:
    """
    Yields a copy of a set of constants with some values replaced; the original is left untouched.
        with override(PSYCHRO, cp_dry_mixture=1.05) as P:
            mixture_specific_enthalpy(T, w, constants=P)
    """
    unknown = set(updates) - {f.name for f in fields(constants)}
    if unknown:
        raise TypeError(f'{type(constants).__name__} has no constants named {sorted(unknown)}')
    yield replace(constants, **updates)
