import math
import numpy as np
import pytest
import water_injection as wi
from water_injection.helpers import C2K

T1 = C2K(170)
P2 = 2e5


def test_default_settings():
    settings = wi.SolverSettings()
    assert settings.T_init == 298.0
    assert settings.abs_tolerance == 1e-7
    assert settings.max_iterations == 1000


def test_residual_increases_with_temperature():
    params = wi.SolverParameters(target_enthalpy_kJkg=445.8, pressure_Pa=P2)
    r = [wi.wet_bulb_residual(T, params) for T in np.linspace(280, 380, 51)]
    assert (np.diff(r) > 0).all()


def test_wet_bulb_scenario():
    h1 = wi.mixture_specific_enthalpy(T1, 0.0)
    result = wi.solve_wet_bulb(h1, P2)
    assert result.converged
    assert 0 < result.iterations <= 1000
    assert abs(result.residual) < 1e-7
    # Evaporative cooling: between ambient and the dry mixture temperature
    assert 298.0 < result.temperature_K < T1
    assert 315.0 < result.temperature_K < 330.0
    assert wi.equilibrium_water_content(P2, result.temperature_K) > 0


def test_wet_bulb_enthalpy_round_trip():
    for T, p in [(T1, P2), (323.15, 1e5), (323.15, 5e4), (400.0, 3e5)]:
        h1 = wi.mixture_specific_enthalpy(T, 0.0)
        result = wi.solve_wet_bulb(h1, p)
        assert result.converged
        w_eq = wi.equilibrium_water_content(p, result.temperature_K)
        assert math.isclose(wi.mixture_specific_enthalpy(result.temperature_K, w_eq), h1, abs_tol=1e-6)


def test_wet_bulb_low_pressure():
    result = wi.solve_wet_bulb(wi.mixture_specific_enthalpy(323.15, 0.0), 5e4)
    assert result.converged
    assert 275.0 < result.temperature_K < 290.0


def test_wet_bulb_is_deterministic():
    h1 = wi.mixture_specific_enthalpy(T1, 0.0)
    assert wi.solve_wet_bulb(h1, P2) == wi.solve_wet_bulb(h1, P2)


def test_iteration_cap_reports_best_iterate():
    h1 = wi.mixture_specific_enthalpy(T1, 0.0)
    params = wi.SolverParameters(h1, P2)
    result = wi.solve_wet_bulb(h1, P2, settings=wi.SolverSettings(max_iterations=1))
    assert not result.converged
    assert result.iterations == 1
    # The reported residual is the one of the reported temperature, no worse than the starting point
    assert result.residual == wi.wet_bulb_residual(result.temperature_K, params)
    assert abs(result.residual) <= abs(wi.wet_bulb_residual(298.0, params))


def test_boiling_point():
    # 1 atm
    assert math.isclose(wi.boiling_point(101325.0), 373.15, abs_tol=0.1)
    assert math.isclose(wi.saturation_pressure(wi.boiling_point(P2)), P2, rel_tol=1e-9)
    # Beyond the search interval
    assert wi.boiling_point(1e-6) is None
    assert wi.boiling_point(1e9) == wi.SolverSettings().T_max


def test_start_above_boiling_point():
    # At 0.2 bar water boils near 333 K, so a start at 373 K is outside the domain of the residual
    h1 = wi.mixture_specific_enthalpy(323.15, 0.0)
    result = wi.solve_wet_bulb(h1, 2e4, settings=wi.SolverSettings(T_init=373.0))
    assert result.converged
    assert result.temperature_K < wi.boiling_point(2e4)
    assert math.isclose(result.temperature_K, wi.solve_wet_bulb(h1, 2e4).temperature_K, abs_tol=1e-6)


def test_pressure_too_low_for_liquid_water():
    result = wi.solve_wet_bulb(445.8, 1e-6)
    assert not result.converged
    assert result.iterations == 0
    assert result.residual == math.inf


def test_invalid_settings():
    with pytest.raises(ValueError):
        wi.SolverSettings(max_iterations=0)
    with pytest.raises(ValueError):
        wi.SolverSettings(T_min=400.0, T_max=300.0)


def test_root_close_to_boiling_point():
    # A huge target enthalpy pushes the root against the boiling point at p2, where the residual is very steep
    result = wi.solve_wet_bulb(1e6, P2)
    assert result.converged == (abs(result.residual) < 1e-7)
    assert math.isfinite(result.residual)
    assert wi.saturation_pressure(result.temperature_K) < P2
    assert result.iterations <= 1000


def test_solution_outside_correlation_range_warns():
    with pytest.warns(wi.OutOfRangeCorrelationWarning):
        result = wi.solve_wet_bulb(wi.mixture_specific_enthalpy(240.0, 0.0), 1e5)
    assert result.temperature_K < 250.0


def test_invalid_inputs():
    with pytest.raises(ValueError):
        wi.solve_wet_bulb(float("nan"), P2)
    with pytest.raises(ValueError):
        wi.solve_wet_bulb(445.8, 0.0)
