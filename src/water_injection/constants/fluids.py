# src/water_injection/constants/fluids.py
from __future__ import annotations
from dataclasses import dataclass
from .base import FrozenNamespace

@dataclass(frozen=True)
class Water(FrozenNamespace):
    # Reference values at 273 K, except density (25°C)
    molar_mass: float = 18.0153    # [g·mol⁻¹]
    cp_vapor: float = 1.805        # specific heat of vapour [kJ·kg⁻¹·K⁻¹]
    latent_heat: float = 2501.0    # enthalpy of vaporisation [kJ·kg⁻¹]
    rho: float = 997.0             # liquid density [kg·m⁻³]

@dataclass(frozen=True)
class Air(FrozenNamespace):
    # Dry air at 273 K
    molar_mass: float = 28.9645    # [g·mol⁻¹]
    cp: float = 1.006              # [kJ·kg⁻¹·K⁻¹]
    density_factor: float = 3.483e-3  # rho = density_factor * p / T, ~M/R_univ [kg·K·m⁻³·Pa⁻¹]

WATER = Water()
AIR = Air()
