from water_injection.helpers import hPa2Pa
from abc import abstractmethod
from importlib.resources import files
import numpy as np
import pandas as pd
from scipy.interpolate import RegularGridInterpolator


class VolumetricEfficiency:
    """Volumetric efficiency [-] of the engine as a function of manifold pressure [Pa] and engine speed [rpm]"""
    def __call__(self, pressure: float, engine_speed: float) -> float:
        return self.get_efficiency(pressure, engine_speed)

    @abstractmethod
    def get_efficiency(self, pressure: float, engine_speed: float) -> float:
        raise NotImplementedError


class ConstantVolumetricEfficiency(VolumetricEfficiency):
    efficiency: float
    def __init__(self, efficiency: float = 1.0):
        if not 0.0 < efficiency <= 1.0:
            raise ValueError(f'Volumetric efficiency should be in (0, 1]. {efficiency} was provided')
        self.efficiency = efficiency

    def get_efficiency(self, pressure: float, engine_speed: float) -> float:
        return self.efficiency


class TabulatedVolumetricEfficiency(VolumetricEfficiency):
    pressure_breakpoints: np.ndarray
    speed_breakpoints: np.ndarray
    table: np.ndarray
    def __init__(self, pressure_breakpoints, speed_breakpoints, table):
        """
        Bilinear interpolation over a table of volumetric efficiencies.
        Queries outside the table are clamped to its edges.

        Parameters
        ----------
        pressure_breakpoints : array-like
            Strictly increasing manifold pressures [Pa], one per table row
        speed_breakpoints : array-like
            Strictly increasing engine speeds [rpm], one per table column
        table : array-like
            Volumetric efficiency [%], shape (len(pressure_breakpoints), len(speed_breakpoints))
        """
        self.pressure_breakpoints = np.asarray(pressure_breakpoints, dtype=float)
        self.speed_breakpoints = np.asarray(speed_breakpoints, dtype=float)
        self.table = np.asarray(table, dtype=float)
        if self.table.shape != (len(self.pressure_breakpoints), len(self.speed_breakpoints)):
            raise ValueError(f'Volumetric efficiency table has shape {self.table.shape}, while the breakpoints require '
                             f'{(len(self.pressure_breakpoints), len(self.speed_breakpoints))}')
        if ((self.table <= 0.0) | (self.table > 100.0)).any():
            raise ValueError('Volumetric efficiency table values should be percentages in (0, 100]')
        self._interpolator = RegularGridInterpolator((self.pressure_breakpoints, self.speed_breakpoints), self.table, method='linear')

    @classmethod
    def from_csv(cls, path):
        # Rows: pressure [hPa]; columns: engine speed [rpm]; values: volumetric efficiency [%]
        df = pd.read_csv(path, sep=';', decimal='.', index_col=0, header=0)
        return cls(hPa2Pa(df.index.to_numpy(dtype=float)), df.columns.astype(float).to_numpy(), df.to_numpy(dtype=float))

    @classmethod
    def default(cls):
        return cls.from_csv(files("water_injection.data") / "ve_table.csv")

    def get_efficiency(self, pressure: float, engine_speed: float) -> float:
        p = np.clip(pressure, self.pressure_breakpoints[0], self.pressure_breakpoints[-1])
        s = np.clip(engine_speed, self.speed_breakpoints[0], self.speed_breakpoints[-1])
        return float(self._interpolator([[p, s]])[0]) / 100.0
