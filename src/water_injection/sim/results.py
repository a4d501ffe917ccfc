from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np
import pandas as pd

from water_injection.helpers import Pa2hPa


@dataclass(frozen=True)
class CellError:
    pressure: float
    engine_speed: float
    message: str


@dataclass
class OperatingMapResults:
    pressure_breakpoints: np.ndarray
    speed_breakpoints: np.ndarray
    air_temperature: float
    duty_cycle: np.ndarray                # [%], NaN where the cell failed
    air_mass_rate: np.ndarray             # [kg/s]
    water_mass_rate: np.ndarray           # [kg/s]
    wet_bulb_temperature: np.ndarray      # [K]
    converged: np.ndarray                 # bool
    errors: List[CellError] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        return (len(self.pressure_breakpoints), len(self.speed_breakpoints))

    @property
    def out_of_range(self) -> np.ndarray:
        with np.errstate(invalid='ignore'):
            return (self.duty_cycle > 100.0) | (self.duty_cycle < 0.0)

    def to_dataframe(self, quantity: str = "duty cycle") -> pd.DataFrame:
        match quantity:
            case "duty cycle":
                data = self.duty_cycle
            case "air mass rate":
                data = self.air_mass_rate
            case "water mass rate":
                data = self.water_mass_rate
            case "wet bulb temperature":
                data = self.wet_bulb_temperature
            case _:
                raise ValueError(quantity)
        return pd.DataFrame(data,
                            index=pd.Index(Pa2hPa(self.pressure_breakpoints), name='pressure [hPa]'),
                            columns=pd.Index(self.speed_breakpoints.astype(int), name='engine speed [rpm]'))
