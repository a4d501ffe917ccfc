import dataclasses, math
import pytest
from water_injection.constants import AIR, WATER, PSYCHRO, Psychrometrics, override


def test_psychrometric_defaults():
    assert PSYCHRO.cp_dry_mixture == AIR.cp == 1.006
    assert PSYCHRO.cp_vapor == 1.805
    assert PSYCHRO.latent_heat == 2501.0
    assert math.isclose(PSYCHRO.molar_mass_ratio, 0.62198, abs_tol=1e-5)


def test_air_density_factor():
    # The density factor is the molar mass over the universal gas constant
    assert math.isclose(AIR.density_factor, AIR.molar_mass * 1e-3 / 8.314462618, rel_tol=1e-3)


def test_constants_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PSYCHRO.cp_vapor = 2.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        WATER.rho = 1000.0


def test_override():
    with override(PSYCHRO, latent_heat=2400.0) as P:
        assert isinstance(P, Psychrometrics)
        assert P.latent_heat == 2400.0
        assert P.cp_vapor == PSYCHRO.cp_vapor
    assert PSYCHRO.latent_heat == 2501.0


def test_override_rejects_unknown_names():
    with pytest.raises(TypeError, match="latent_heat_of_fusion"):
        with override(PSYCHRO, latent_heat_of_fusion=333.55):
            pass


def test_constants_must_be_positive():
    with pytest.raises(ValueError, match="cp_vapor"):
        Psychrometrics(cp_vapor=0.0)
    with pytest.raises(ValueError):
        with override(AIR, density_factor=float("nan")):
            pass
