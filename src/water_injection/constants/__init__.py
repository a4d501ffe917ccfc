# src/water_injection/constants/__init__.py
from .fluids import WATER, AIR
from .psychro import PSYCHRO, Psychrometrics
from .base import FrozenNamespace, override

__all__ = ["WATER", "AIR", "PSYCHRO", "Psychrometrics", "FrozenNamespace", "override"]
