from water_injection.components.volumetric_efficiency import VolumetricEfficiency, ConstantVolumetricEfficiency
from water_injection.constants import AIR, PSYCHRO, Psychrometrics
from water_injection.core.psychrometrics import equilibrium_water_content, mixture_specific_enthalpy
from water_injection.core.solver import solve_wet_bulb, SolverSettings, SolverResult, DEFAULT_SETTINGS
from water_injection.helpers import NonConvergenceError
from water_injection.sim.config import EngineConfig
from dataclasses import dataclass
from typing import Callable
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperatingPoint:
    pressure_Pa: float
    temperature_K: float
    engine_speed_rpm: float


@dataclass(frozen=True)
class FlowResult:
    air_mass_rate_kgs: float
    water_mass_rate_kgs: float
    duty_cycle_pct: int              # not clamped to [0, 100]
    wet_bulb_temperature_K: float
    specific_water_content: float


class FlowModel:
    engine: EngineConfig
    volumetric_efficiency: Callable[[float, float], float]
    constants: Psychrometrics
    solver_settings: SolverSettings
    def __init__(self,
                 engine: EngineConfig | None = None,
                 volumetric_efficiency: VolumetricEfficiency | Callable[[float, float], float] | None = None,
                 constants: Psychrometrics = PSYCHRO,
                 solver_settings: SolverSettings = DEFAULT_SETTINGS,
                 density_factor: float = AIR.density_factor):
        """
        Air and water mass flow rates and injector duty cycle of a water-injected engine, assuming the
        injected water brings the intake charge to its wet-bulb state.

        Parameters
        ----------
        engine : EngineConfig, optional
            Displacement and injector parameters. Defaults to EngineConfig()
        volumetric_efficiency : callable, optional
            Any callable (pressure [Pa], engine speed [rpm]) -> volumetric efficiency [-].
            Defaults to a constant efficiency of 1.0
        constants : Psychrometrics, optional
            Physical constants of the mixture
        solver_settings : SolverSettings, optional
            Settings of the wet-bulb solver
        density_factor : float, optional
            Factor k such that the charge density is k * p / T [kg/m³]
        """
        self.engine = engine if engine is not None else EngineConfig()
        self.volumetric_efficiency = volumetric_efficiency if volumetric_efficiency is not None else ConstantVolumetricEfficiency()
        self.constants = constants
        self.solver_settings = solver_settings
        self.density_factor = density_factor

    def air_mass_rate(self, pressure: float, temperature: float, engine_speed: float) -> float:
        # Four-stroke: one intake stroke every two revolutions, hence 120 s/min
        ve = self.volumetric_efficiency(pressure, engine_speed)
        return self.density_factor * pressure * self.engine.displacement * ve * engine_speed / temperature / 120.0

    def wet_bulb(self, pressure: float, temperature: float) -> SolverResult:
        h1 = mixture_specific_enthalpy(temperature, 0.0, self.constants)
        result = solve_wet_bulb(h1, pressure, self.solver_settings, self.constants)
        if not result.converged:
            raise NonConvergenceError(result)
        return result

    def water_mass_rate(self, pressure: float, temperature: float, engine_speed: float) -> float:
        return self.evaluate(OperatingPoint(pressure, temperature, engine_speed)).water_mass_rate_kgs

    def duty_cycle(self, pressure: float, temperature: float, engine_speed: float) -> int:
        return self.evaluate(OperatingPoint(pressure, temperature, engine_speed)).duty_cycle_pct

    def evaluate(self, point: OperatingPoint) -> FlowResult:
        wet_bulb = self.wet_bulb(point.pressure_Pa, point.temperature_K)
        w_eq = equilibrium_water_content(point.pressure_Pa, wet_bulb.temperature_K, self.constants)
        mdot_air = self.air_mass_rate(point.pressure_Pa, point.temperature_K, point.engine_speed_rpm)
        mdot_water = w_eq * mdot_air
        duty_cycle = round(100.0 * mdot_water / self.engine.max_water_mass_flow_rate)
        logger.debug('%s: T_wb=%.3f K, w_eq=%.5f, mdot_air=%.5g kg/s, mdot_water=%.5g kg/s, duty cycle %d%%',
                     point, wet_bulb.temperature_K, w_eq, mdot_air, mdot_water, duty_cycle)
        return FlowResult(air_mass_rate_kgs=mdot_air,
                          water_mass_rate_kgs=mdot_water,
                          duty_cycle_pct=duty_cycle,
                          wet_bulb_temperature_K=wet_bulb.temperature_K,
                          specific_water_content=w_eq)
