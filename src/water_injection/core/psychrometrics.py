"""
Psychrometric relations for a dry air/fuel mixture and water vapour.

Temperatures are absolute [K], pressures [Pa], specific enthalpies [kJ/kg] per
kg of dry mixture, specific water contents [kg water / kg dry mixture].
"""
from dataclasses import dataclass
import math, warnings

from water_injection.constants import PSYCHRO, Psychrometrics
from water_injection.helpers import SingularEquilibriumError, OutOfRangeCorrelationWarning

# Wexler (1976), saturation vapour pressure over liquid water
WEXLER_COEFFICIENTS = (
    -2.9912729e3,   # T^-2
    -6.0170128e3,   # T^-1
    1.887643845e1,  # T^0
    -2.8354721e-2,  # T^1
    1.7838301e-5,   # T^2
    -8.4150417e-10, # T^3
    4.4412543e-13,  # T^4
)
WEXLER_LOG_COEFFICIENT = 2.858487
CORRELATION_RANGE_K = (250.0, 400.0)


def saturation_pressure(temperature: float, check_range: bool = True) -> float:
    """
    Saturation vapour pressure of water [Pa] at the absolute temperature [K], Wexler (1976)

    Parameters
    ----------
    temperature : float
        Absolute temperature [K]
    check_range : bool, optional
        If True (default), an OutOfRangeCorrelationWarning is emitted when the temperature lies outside
        the range the correlation was fitted on. The value is returned anyway.
    """
    if temperature <= 0:
        raise ValueError(f'Temperature must be >0 K for the saturation pressure correlation, {temperature} was provided')
    if check_range and not (CORRELATION_RANGE_K[0] <= temperature <= CORRELATION_RANGE_K[1]):
        warnings.warn(f'Saturation pressure correlation evaluated at {temperature:.2f} K, outside its fitted range '
                      f'{CORRELATION_RANGE_K[0]}-{CORRELATION_RANGE_K[1]} K', OutOfRangeCorrelationWarning, stacklevel=2)
    log_p = WEXLER_LOG_COEFFICIENT * math.log(temperature)
    for exponent, coefficient in enumerate(WEXLER_COEFFICIENTS, start=-2):
        log_p += coefficient * temperature ** exponent
    return math.exp(log_p)


def equilibrium_water_content(pressure: float, temperature: float, constants: Psychrometrics = PSYCHRO, check_range: bool = True) -> float:
    """
    Specific water content of the mixture at saturation, for a total pressure [Pa] and temperature [K].
    Raises SingularEquilibriumError when the total pressure does not exceed the saturation pressure.
    """
    p_sat = saturation_pressure(temperature, check_range=check_range)
    if pressure <= p_sat:
        raise SingularEquilibriumError(pressure, temperature, p_sat)
    return constants.molar_mass_ratio * p_sat / (pressure - p_sat)


def mixture_specific_enthalpy(temperature: float, specific_water_content: float, constants: Psychrometrics = PSYCHRO) -> float:
    """Specific enthalpy [kJ/kg] of the mixture at temperature [K] and specific water content [-]"""
    w = specific_water_content
    return (constants.cp_dry_mixture + w * constants.cp_vapor) * temperature + w * constants.latent_heat


@dataclass(frozen=True)
class ThermodynamicState:
    temperature_K: float
    pressure_Pa: float

    def __post_init__(self):
        if self.temperature_K <= 0.0:
            raise ValueError(f'Temperature must be positive, {self.temperature_K} K was provided')
        if self.pressure_Pa <= 0.0:
            raise ValueError(f'Pressure must be positive, {self.pressure_Pa} Pa was provided')

    @property
    def saturation_pressure(self) -> float:
        return saturation_pressure(self.temperature_K)

    def equilibrium_water_content(self, constants: Psychrometrics = PSYCHRO) -> float:
        return equilibrium_water_content(self.pressure_Pa, self.temperature_K, constants)


@dataclass(frozen=True)
class MixtureComposition:
    specific_water_content: float = 0.0  # 0 is dry air

    def __post_init__(self):
        if self.specific_water_content < 0.0:
            raise ValueError(f'Specific water content cannot be negative, {self.specific_water_content} was provided')

    def specific_enthalpy(self, temperature: float, constants: Psychrometrics = PSYCHRO) -> float:
        return mixture_specific_enthalpy(temperature, self.specific_water_content, constants)
