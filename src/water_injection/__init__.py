# Re-export a stable public API
from .constants import PSYCHRO, WATER, AIR, Psychrometrics, override
from .core.psychrometrics import saturation_pressure, equilibrium_water_content, mixture_specific_enthalpy, ThermodynamicState, MixtureComposition
from .core.solver import wet_bulb_residual, solve_wet_bulb, boiling_point, SolverParameters, SolverResult, SolverSettings
from .components.volumetric_efficiency import VolumetricEfficiency, ConstantVolumetricEfficiency, TabulatedVolumetricEfficiency
from .components.flow_model import FlowModel, FlowResult, OperatingPoint
from .sim.config import EngineConfig, MapConfig, load_config
from .sim.operating_map import evaluate_operating_map, evaluate_map_config
from .sim.results import OperatingMapResults
from .sim.report import evaluate_scenario, render_report, render_duty_cycle_table
from .helpers import WaterInjectionError, SingularEquilibriumError, NonConvergenceError, ConfigurationError, OutOfRangeCorrelationWarning

__all__ = [
    "PSYCHRO", "WATER", "AIR", "Psychrometrics", "override",
    "saturation_pressure", "equilibrium_water_content", "mixture_specific_enthalpy", "ThermodynamicState", "MixtureComposition",
    "wet_bulb_residual", "solve_wet_bulb", "boiling_point", "SolverParameters", "SolverResult", "SolverSettings",
    "VolumetricEfficiency", "ConstantVolumetricEfficiency", "TabulatedVolumetricEfficiency",
    "FlowModel", "FlowResult", "OperatingPoint",
    "EngineConfig", "MapConfig", "load_config",
    "evaluate_operating_map", "evaluate_map_config", "OperatingMapResults",
    "evaluate_scenario", "render_report", "render_duty_cycle_table",
    "WaterInjectionError", "SingularEquilibriumError", "NonConvergenceError", "ConfigurationError", "OutOfRangeCorrelationWarning",
]
