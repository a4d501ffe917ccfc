# water_injection/sim/operating_map.py
from concurrent.futures import Executor
from typing import Iterable, Tuple
import logging
import numpy as np

from water_injection.components.flow_model import FlowModel, FlowResult, OperatingPoint
from water_injection.helpers import WaterInjectionError
from water_injection.sim.config import MapConfig
from water_injection.sim.results import OperatingMapResults, CellError

logger = logging.getLogger(__name__)


def _evaluate_cell(model: FlowModel, point: OperatingPoint) -> Tuple[FlowResult | None, str | None]:
    try:
        return model.evaluate(point), None
    except WaterInjectionError as exc:
        return None, str(exc)


def evaluate_operating_map(model: FlowModel,
                           pressure_breakpoints: Iterable[float],
                           speed_breakpoints: Iterable[float],
                           air_temperature: float,
                           executor: Executor | None = None) -> OperatingMapResults:
    """
    Evaluates the flow model on every (pressure, engine speed) cell of the map.
    A failing cell is recorded and left empty, the other cells are still evaluated.
    Cells are independent: if an executor is given, each one is submitted to it as a separate task.
    With a ProcessPoolExecutor the model is pickled for every task, so its volumetric-efficiency lookup
    must be picklable: a module-level function or a VolumetricEfficiency instance, not a lambda.
    """
    pressures = np.asarray(list(pressure_breakpoints), dtype=float)
    speeds = np.asarray(list(speed_breakpoints), dtype=float)
    points = [OperatingPoint(float(p), air_temperature, float(s)) for p in pressures for s in speeds]
    if executor is None:
        outcomes = [_evaluate_cell(model, point) for point in points]
    else:
        futures = [executor.submit(_evaluate_cell, model, point) for point in points]
        outcomes = [future.result() for future in futures]

    shape = (len(pressures), len(speeds))
    results = OperatingMapResults(pressure_breakpoints=pressures,
                                  speed_breakpoints=speeds,
                                  air_temperature=air_temperature,
                                  duty_cycle=np.full(shape, np.nan),
                                  air_mass_rate=np.full(shape, np.nan),
                                  water_mass_rate=np.full(shape, np.nan),
                                  wet_bulb_temperature=np.full(shape, np.nan),
                                  converged=np.zeros(shape, dtype=bool))
    for idx, (point, (flow, error)) in enumerate(zip(points, outcomes)):
        i, j = divmod(idx, len(speeds))
        if flow is None:
            logger.warning('Operating point at %.0f Pa, %.0f rpm could not be evaluated: %s', point.pressure_Pa, point.engine_speed_rpm, error)
            results.errors.append(CellError(point.pressure_Pa, point.engine_speed_rpm, error))
            continue
        results.duty_cycle[i, j] = flow.duty_cycle_pct
        results.air_mass_rate[i, j] = flow.air_mass_rate_kgs
        results.water_mass_rate[i, j] = flow.water_mass_rate_kgs
        results.wet_bulb_temperature[i, j] = flow.wet_bulb_temperature_K
        results.converged[i, j] = True
    return results


def evaluate_map_config(model: FlowModel, cfg: MapConfig, executor: Executor | None = None) -> OperatingMapResults:
    return evaluate_operating_map(model, cfg.pressure_breakpoints, cfg.speed_breakpoints, cfg.air_temperature, executor)
