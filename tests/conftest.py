# tests/conftest.py
import pathlib
import pytest
import water_injection as wi

@pytest.fixture(scope="session")
def repo_dir() -> pathlib.Path:
    return pathlib.Path(__file__).parent.parent

@pytest.fixture
def flow_model():
    # Reference behaviour: constant volumetric efficiency of 1.0, 2 L engine
    return wi.FlowModel()

@pytest.fixture
def tabulated_flow_model():
    return wi.FlowModel(volumetric_efficiency=wi.TabulatedVolumetricEfficiency.default())

@pytest.fixture
def write_config(tmp_path):
    """Writes a YAML configuration file and returns its path"""
    def _write(text: str, name: str = "wi.yaml") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
