def C2K(T):
    return T + 273.15

def K2C(T):
    return T - 273.15

def Pa2hPa(p):
    return p * 1e-2

def hPa2Pa(p):
    return p * 1e2


class WaterInjectionError(Exception):
    pass


class SingularEquilibriumError(WaterInjectionError, ValueError):
    pressure: float
    temperature: float
    saturation_pressure: float
    def __init__(self, pressure: float, temperature: float, saturation_pressure: float):
        self.pressure = pressure
        self.temperature = temperature
        self.saturation_pressure = saturation_pressure
        super().__init__(f'Equilibrium water content is undefined at {pressure:.1f} Pa and {temperature:.2f} K: '
                         f'the saturation pressure ({saturation_pressure:.1f} Pa) is not below the total pressure')


class NonConvergenceError(WaterInjectionError):
    def __init__(self, result, message: str | None = None):
        self.result = result
        if message is None:
            message = (f'Wet-bulb solver did not converge after {result.iterations} iterations. '
                       f'Best estimate {result.temperature_K:.4f} K with residual {result.residual:.3e} kJ/kg')
        super().__init__(message)


class ConfigurationError(WaterInjectionError):
    pass


class OutOfRangeCorrelationWarning(UserWarning):
    pass
