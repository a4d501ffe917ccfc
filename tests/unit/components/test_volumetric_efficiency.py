import math
import numpy as np
import pytest
import water_injection as wi


def test_constant_volumetric_efficiency():
    ve = wi.ConstantVolumetricEfficiency()
    assert ve(1000e2, 4000) == 1.0
    assert wi.ConstantVolumetricEfficiency(0.85).get_efficiency(2000e2, 1000) == 0.85
    with pytest.raises(ValueError):
        wi.ConstantVolumetricEfficiency(1.5)
    with pytest.raises(ValueError):
        wi.ConstantVolumetricEfficiency(0.0)


def test_default_table():
    ve = wi.TabulatedVolumetricEfficiency.default()
    assert ve.table.shape == (11, 8)
    assert ve.pressure_breakpoints[0] == 500e2
    assert ve.pressure_breakpoints[-1] == 3000e2
    assert list(ve.speed_breakpoints) == [1000, 2000, 3000, 4000, 5000, 6000, 7000, 8000]
    assert ve.table.min() == 75 and ve.table.max() == 95


def test_table_interpolation():
    ve = wi.TabulatedVolumetricEfficiency.default()
    assert math.isclose(ve(1000e2, 4000), 0.90)
    assert math.isclose(ve(1000e2, 4500), 0.925)
    assert math.isclose(ve(1125e2, 6500), 0.94)


def test_table_clamps_outside_the_grid():
    ve = wi.TabulatedVolumetricEfficiency.default()
    assert math.isclose(ve(100e2, 500), 0.75)
    assert math.isclose(ve(5000e2, 9000), 0.90)


def test_custom_table():
    ve = wi.TabulatedVolumetricEfficiency([1e5, 2e5], [1000, 3000], [[50, 70], [60, 80]])
    assert math.isclose(ve(1.5e5, 2000), 0.65)
    with pytest.raises(ValueError):
        wi.TabulatedVolumetricEfficiency([1e5, 2e5], [1000, 3000], np.ones((3, 2)) * 80)
    with pytest.raises(ValueError):
        wi.TabulatedVolumetricEfficiency([1e5, 2e5], [1000, 3000], [[50, 170], [60, 80]])


def test_table_from_csv(tmp_path):
    path = tmp_path / "ve.csv"
    path.write_text("pressure_hPa;1000;2000\n1000;80;90\n2000;85;95\n", encoding="utf-8")
    ve = wi.TabulatedVolumetricEfficiency.from_csv(path)
    assert list(ve.pressure_breakpoints) == [1e5, 2e5]
    assert math.isclose(ve(2e5, 2000), 0.95)
