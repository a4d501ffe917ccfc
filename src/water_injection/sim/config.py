# water_injection/sim/config.py
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Tuple
import re
import yaml

from water_injection.constants import WATER
from water_injection.helpers import ConfigurationError, C2K


@dataclass(frozen=True)
class EngineConfig:
    displacement: float = 2000e-6                    # [m³]
    water_pressure: float = 689475.7                 # water pressure at which the injector capacity is rated [Pa], informational only
    max_water_volume_flow_rate: float = 340e-6 / 60  # injector capacity at water_pressure [m³/s]
    water_density: float = WATER.rho                 # [kg/m³]

    @property
    def max_water_mass_flow_rate(self) -> float:
        return self.water_density * self.max_water_volume_flow_rate


@dataclass(frozen=True)
class MapConfig:
    pressure_breakpoints: Tuple[float, ...] = tuple(p * 1e2 for p in range(500, 3001, 250))  # [Pa]
    speed_breakpoints: Tuple[float, ...] = tuple(range(1000, 8001, 1000))                     # [rpm]
    air_temperature: float = 323.15                                                           # [K]


# Conversion factors to SI, by quantity
_UNITS = {
    'volume': {'m3': 1.0, 'm^3': 1.0, 'l': 1e-3, 'cc': 1e-6, 'cm3': 1e-6, 'cm^3': 1e-6, 'ml': 1e-6},
    'pressure': {'pa': 1.0, 'hpa': 1e2, 'kpa': 1e3, 'mpa': 1e6, 'bar': 1e5, 'mbar': 1e2, 'psi': 6894.757},
    'volume_flow': {'m3/s': 1.0, 'm^3/s': 1.0, 'l/s': 1e-3, 'l/min': 1e-3 / 60, 'l/h': 1e-3 / 3600,
                    'cc/min': 1e-6 / 60, 'ml/min': 1e-6 / 60, 'cc/s': 1e-6},
    'density': {'kg/m3': 1.0, 'kg/m^3': 1.0, 'g/cm3': 1e3, 'kg/l': 1e3},
    'speed': {'rpm': 1.0, '1/min': 1.0},
}
_QUANTITY = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(.*?)\s*$')

_ENGINE_KEYS = {
    'engine displacement': ('displacement', 'volume'),
    'water pressure': ('water_pressure', 'pressure'),
    'max water volume flow rate': ('max_water_volume_flow_rate', 'volume_flow'),
    'water density': ('water_density', 'density'),
}
_MAP_KEYS = {'air temperature', 'pressure breakpoints', 'rpm breakpoints'}


def parse_quantity(value: Any, quantity: str) -> float:
    """
    Converts a configuration value to SI units. Numbers are taken as already in SI,
    strings are a number followed by an optional unit, e.g. "2 L", "100 psi" or "340 cc/min".
    Temperatures accept K, degC and °C.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f'Expected a {quantity}, got {value!r}')
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ConfigurationError(f'Expected a {quantity}, got {value!r}')
    parsed = _QUANTITY.match(value)
    if parsed is None:
        raise ConfigurationError(f'Cannot parse {quantity} from {value!r}')
    number, unit = float(parsed.group(1)), parsed.group(2).lower()
    if not unit:
        return number
    if quantity == 'temperature':
        match unit:
            case 'k':
                return number
            case 'degc' | '°c' | 'c':
                return C2K(number)
            case _:
                raise ConfigurationError(f'Unknown temperature unit {unit!r} in {value!r}')
    try:
        return number * _UNITS[quantity][unit]
    except KeyError:
        raise ConfigurationError(f'Unknown {quantity} unit {unit!r} in {value!r}') from None


def config_from_dict(data: Dict[str, Any]) -> Tuple[EngineConfig, MapConfig]:
    unknown = set(data) - set(_ENGINE_KEYS) - _MAP_KEYS
    if unknown:
        raise ConfigurationError(f'Unknown configuration keys: {sorted(unknown)}')
    engine_updates = {attr: parse_quantity(data[key], quantity) for key, (attr, quantity) in _ENGINE_KEYS.items() if key in data}
    engine = replace(EngineConfig(), **engine_updates)
    for f in fields(engine):
        if getattr(engine, f.name) <= 0.0:
            raise ConfigurationError(f'Engine parameter {f.name} must be positive, {getattr(engine, f.name)} was provided')

    map_updates = {}
    if 'air temperature' in data:
        map_updates['air_temperature'] = parse_quantity(data['air temperature'], 'temperature')
        if map_updates['air_temperature'] <= 0.0:
            raise ConfigurationError(f'Air temperature must be above 0 K, {map_updates["air_temperature"]} K was provided')
    if 'pressure breakpoints' in data:
        map_updates['pressure_breakpoints'] = _parse_breakpoints(data['pressure breakpoints'], 'pressure')
    if 'rpm breakpoints' in data:
        map_updates['speed_breakpoints'] = _parse_breakpoints(data['rpm breakpoints'], 'speed')
    return engine, replace(MapConfig(), **map_updates)


def _parse_breakpoints(values: Any, quantity: str) -> Tuple[float, ...]:
    if not isinstance(values, list) or not values:
        raise ConfigurationError(f'Breakpoints should be a non-empty list, got {values!r}')
    parsed = tuple(parse_quantity(v, quantity) for v in values)
    if any(b <= 0.0 for b in parsed):
        raise ConfigurationError(f'{quantity.capitalize()} breakpoints must be positive, got {list(parsed)}')
    if any(b <= a for a, b in zip(parsed, parsed[1:])):
        raise ConfigurationError(f'Breakpoints should be strictly increasing, got {list(parsed)}')
    return parsed


def load_config(path) -> Tuple[EngineConfig, MapConfig]:
    """Reads engine and operating-map parameters from a YAML file"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f'Cannot parse configuration file {path}: {exc}') from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f'Configuration file {path} should contain a mapping, got {type(data).__name__}')
    return config_from_dict(data)
