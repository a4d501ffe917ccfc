# src/water_injection/constants/psychro.py
from __future__ import annotations
from dataclasses import dataclass
from .base import FrozenNamespace
from .fluids import WATER, AIR

@dataclass(frozen=True)
class Psychrometrics(FrozenNamespace):
    # The dry mixture is taken as dry air (no fuel vapour)
    cp_dry_mixture: float = AIR.cp        # [kJ·kg⁻¹·K⁻¹]
    cp_vapor: float = WATER.cp_vapor      # [kJ·kg⁻¹·K⁻¹]
    latent_heat: float = WATER.latent_heat  # [kJ·kg⁻¹]
    molar_mass_water: float = WATER.molar_mass  # [g·mol⁻¹]
    molar_mass_air: float = AIR.molar_mass      # [g·mol⁻¹]

    @property
    def molar_mass_ratio(self) -> float:
        return self.molar_mass_water / self.molar_mass_air

PSYCHRO = Psychrometrics()
