from dataclasses import dataclass
from typing import List
import numpy as np

from water_injection.constants import PSYCHRO, Psychrometrics
from water_injection.core.psychrometrics import equilibrium_water_content, mixture_specific_enthalpy
from water_injection.core.solver import solve_wet_bulb, SolverResult
from water_injection.helpers import C2K, K2C, Pa2hPa
from water_injection.sim.results import OperatingMapResults


@dataclass(frozen=True)
class ScenarioSummary:
    temperature: float             # dry mixture temperature [K]
    pressure: float                # [Pa]
    specific_enthalpy: float       # [kJ/kg]
    wet_bulb: SolverResult
    specific_water_content: float  # at the wet-bulb state, NaN if the solver did not converge


def evaluate_scenario(temperature: float = C2K(170.0), pressure: float = 2e5, constants: Psychrometrics = PSYCHRO) -> ScenarioSummary:
    """Wet-bulb state of a dry mixture, 170°C at 2 bar by default"""
    h1 = mixture_specific_enthalpy(temperature, 0.0, constants)
    wet_bulb = solve_wet_bulb(h1, pressure, constants=constants)
    w_eq = equilibrium_water_content(pressure, wet_bulb.temperature_K, constants) if wet_bulb.converged else float('nan')
    return ScenarioSummary(temperature, pressure, h1, wet_bulb, w_eq)


def render_scenario(summary: ScenarioSummary) -> str:
    lines = [
        f't1 = {K2C(summary.temperature):f} °C',
        f'p2 = {summary.pressure:f} Pa',
        f'h1: {summary.specific_enthalpy:f} kJ/kg',
        f'wet bulb temp: {K2C(summary.wet_bulb.temperature_K):f} °C',
        f'w_eq = {summary.specific_water_content:f}',
    ]
    if not summary.wet_bulb.converged:
        lines.append(f'warning: solver did not converge after {summary.wet_bulb.iterations} iterations '
                     f'(residual {summary.wet_bulb.residual:.3e} kJ/kg)')
    return '\n'.join(lines)


def render_duty_cycle_table(results: OperatingMapResults) -> str:
    """
    Duty cycle table: one row per pressure breakpoint [hPa], one column per engine speed [rpm],
    with the rpm header as the last row. Failed cells show as ----, cells above 100% are starred.
    """
    lines: List[str] = []
    for i, p in enumerate(results.pressure_breakpoints):
        cells = [f'{Pa2hPa(p):4.0f}']
        for j in range(len(results.speed_breakpoints)):
            dc = results.duty_cycle[i, j]
            if np.isnan(dc):
                cells.append('----')
            elif results.out_of_range[i, j]:
                cells.append(f'{int(dc):3d}*')
            else:
                cells.append(f'{int(dc):4d}')
        lines.append(' '.join(cells) + ' ')
    lines.append(' '.join([f'{"":4s}'] + [f'{int(s):4d}' for s in results.speed_breakpoints]) + ' ')
    return '\n'.join(lines)


def render_report(summary: ScenarioSummary, results: OperatingMapResults) -> str:
    text = render_scenario(summary) + '\n\nDuty cycle table:\n' + render_duty_cycle_table(results)
    if results.errors:
        text += '\n\nFailed operating points:\n' + '\n'.join(
            f'{Pa2hPa(e.pressure):4.0f} hPa, {e.engine_speed:.0f} rpm: {e.message}' for e in results.errors)
    return text
