"""
Wet-bulb temperature of a dry mixture saturated by injected water.

The wet-bulb temperature is the root in T of

    cp_dry_mixture*T + w_eq(p2, T)*(cp_vapor*T + L) - h1 = 0

i.e. the temperature at which the mixture saturated with water at pressure p2
carries the same specific enthalpy h1 as the dry mixture before injection.
"""
from dataclasses import dataclass
from typing import List, Tuple
import logging, math, warnings
from scipy import optimize

from water_injection.constants import PSYCHRO, Psychrometrics
from water_injection.core.psychrometrics import equilibrium_water_content, saturation_pressure, CORRELATION_RANGE_K
from water_injection.helpers import OutOfRangeCorrelationWarning

logger = logging.getLogger(__name__)

# Relative margin kept below the boiling point, where the residual has a pole
BOILING_MARGIN = 1e-9


@dataclass(frozen=True)
class SolverSettings:
    T_init: float = 298.0           # ambient starting point [K]
    abs_tolerance: float = 1e-7     # on the residual [kJ/kg]
    max_iterations: int = 1000
    T_min: float = 150.0            # search interval [K]
    T_max: float = 647.096          # critical point of water [K]
    x_tolerance: float = 1e-10      # on the temperature step [K]

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError(f'At least one solver iteration is required, {self.max_iterations} was provided')
        if not 0.0 < self.T_min < self.T_max:
            raise ValueError(f'Invalid search interval [{self.T_min}, {self.T_max}] K')
        if self.abs_tolerance <= 0.0 or self.x_tolerance <= 0.0:
            raise ValueError('Solver tolerances must be positive')


@dataclass(frozen=True)
class SolverParameters:
    target_enthalpy_kJkg: float
    pressure_Pa: float


@dataclass(frozen=True)
class SolverResult:
    temperature_K: float
    iterations: int
    converged: bool
    residual: float


DEFAULT_SETTINGS = SolverSettings()


def wet_bulb_residual(temperature: float, params: SolverParameters, constants: Psychrometrics = PSYCHRO, check_range: bool = False) -> float:
    """Enthalpy mismatch [kJ/kg] of the saturated mixture at the candidate temperature [K]"""
    w_eq = equilibrium_water_content(params.pressure_Pa, temperature, constants, check_range=check_range)
    return (constants.cp_dry_mixture * temperature
            + w_eq * (constants.cp_vapor * temperature + constants.latent_heat)
            - params.target_enthalpy_kJkg)


def boiling_point(pressure: float, settings: SolverSettings = DEFAULT_SETTINGS) -> float | None:
    """
    Temperature [K] at which the saturation pressure reaches the given pressure [Pa], searched in
    [settings.T_min, settings.T_max]. Returns settings.T_max if water does not boil below it,
    None if it already boils at settings.T_min.
    """
    def excess(T):
        return saturation_pressure(T, check_range=False) - pressure
    if excess(settings.T_min) >= 0.0:
        return None
    if excess(settings.T_max) <= 0.0:
        return settings.T_max
    return optimize.brentq(excess, settings.T_min, settings.T_max, xtol=1e-12)


def solve_wet_bulb(target_enthalpy: float, pressure: float, settings: SolverSettings = DEFAULT_SETTINGS, constants: Psychrometrics = PSYCHRO) -> SolverResult:
    """
    Wet-bulb temperature for a target specific enthalpy [kJ/kg] at pressure [Pa]

    The root is first sought with the secant variant of scipy's Newton method, starting from
    settings.T_init. If that fails to meet the tolerance, or steps to a temperature where the
    equilibrium water content is undefined, Brent's method takes over on the bracket between
    settings.T_min and just below the boiling point at the given pressure.

    Non-convergence is not raised: the returned SolverResult holds the best iterate found, its
    residual and converged=False. Callers decide what to do with it.

    Parameters
    ----------
    target_enthalpy : float
        Specific enthalpy h1 [kJ/kg] of the mixture before water injection
    pressure : float
        Absolute pressure p2 [Pa] at which the water evaporates
    settings : SolverSettings, optional
        Starting point, tolerances, iteration cap and search interval
    constants : Psychrometrics, optional
        Physical constants of the mixture
    """
    if not math.isfinite(target_enthalpy):
        raise ValueError(f'Target enthalpy must be finite, {target_enthalpy} was provided')
    if not pressure > 0.0:
        raise ValueError(f'Pressure must be positive, {pressure} Pa was provided')
    params = SolverParameters(target_enthalpy, pressure)
    T_boil = boiling_point(pressure, settings)
    if T_boil is None:
        logger.debug('Water boils below %.1f K at %.6g Pa, no wet-bulb state', settings.T_min, pressure)
        return SolverResult(temperature_K=settings.T_min, iterations=0, converged=False, residual=math.inf)
    lo = settings.T_min
    hi = T_boil * (1.0 - BOILING_MARGIN) if T_boil < settings.T_max else settings.T_max

    # Every successful evaluation, the best one is reported
    trace: List[Tuple[float, float]] = []
    def residual(T):
        r = wet_bulb_residual(T, params, constants)
        trace.append((T, r))
        return r

    T0 = settings.T_init if lo <= settings.T_init <= hi else 0.5 * (lo + hi)
    try:
        _, newton_info = optimize.newton(residual, T0, tol=settings.x_tolerance, maxiter=settings.max_iterations,
                                         full_output=True, disp=False)
        iterations = newton_info.iterations
    except (ValueError, OverflowError) as exc:
        # A secant step left the domain of the equilibrium water content
        iterations = max(len(trace) - 1, 1)
        logger.debug('Secant iteration abandoned after %d steps: %s', iterations, exc)

    T_best, r_best = min(trace, key=lambda tr: abs(tr[1])) if trace else (T0, math.inf)
    budget = settings.max_iterations - iterations
    if abs(r_best) >= settings.abs_tolerance and budget > 0:
        if residual(lo) < 0.0 < residual(hi):
            _, brent_info = optimize.brentq(residual, lo, hi, xtol=settings.x_tolerance, maxiter=budget,
                                            full_output=True, disp=False)
            iterations += brent_info.iterations
        else:
            logger.debug('No sign change of the residual on [%.3f, %.3f] K', lo, hi)
        T_best, r_best = min(trace, key=lambda tr: abs(tr[1]))

    converged = abs(r_best) < settings.abs_tolerance
    if not converged:
        logger.debug('Wet-bulb solve for h1=%.6g kJ/kg, p2=%.6g Pa stopped after %d iterations at %.6f K (residual %.3e)',
                     target_enthalpy, pressure, iterations, T_best, r_best)
    if not CORRELATION_RANGE_K[0] <= T_best <= CORRELATION_RANGE_K[1]:
        warnings.warn(f'Wet-bulb temperature {T_best:.2f} K lies outside the fitted range of the saturation pressure correlation',
                      OutOfRangeCorrelationWarning, stacklevel=2)
    return SolverResult(temperature_K=T_best, iterations=iterations, converged=converged, residual=r_best)
