# water_injection/cli.py
from concurrent.futures import ProcessPoolExecutor
import argparse, logging, os, sys

from water_injection.components.flow_model import FlowModel
from water_injection.components.volumetric_efficiency import ConstantVolumetricEfficiency, TabulatedVolumetricEfficiency
from water_injection.helpers import ConfigurationError
from water_injection.sim.config import EngineConfig, MapConfig, load_config
from water_injection.sim.operating_map import evaluate_map_config
from water_injection.sim.report import evaluate_scenario, render_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='water-injection',
                                     description='Wet-bulb water injection duty cycle over an engine operating map')
    parser.add_argument('--config', default='wi.yaml', help='YAML file containing engine parameters (default: %(default)s)')
    parser.add_argument('--tabulated-ve', action='store_true', help='use the tabulated volumetric efficiency instead of a constant 1.0')
    parser.add_argument('--workers', type=int, default=0, help='evaluate map cells in this many processes (default: serial)')
    parser.add_argument('--csv', default=None, help='also write the duty cycle map to this CSV file')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        if os.path.exists(args.config):
            print('Reading config from', args.config)
            engine, map_cfg = load_config(args.config)
        else:
            print(f'Config file {args.config} not found, using defaults')
            engine, map_cfg = EngineConfig(), MapConfig()
    except (ConfigurationError, OSError) as exc:
        print('Error reading config:', exc)
        return 1
    print(engine)

    ve = TabulatedVolumetricEfficiency.default() if args.tabulated_ve else ConstantVolumetricEfficiency()
    model = FlowModel(engine=engine, volumetric_efficiency=ve)
    summary = evaluate_scenario()
    if args.workers > 1:
        with ProcessPoolExecutor(max_workers=args.workers) as executor:
            results = evaluate_map_config(model, map_cfg, executor)
    else:
        results = evaluate_map_config(model, map_cfg)
    print(render_report(summary, results))
    if args.csv:
        results.to_dataframe().to_csv(args.csv, sep=';')
    return 0


if __name__ == '__main__':
    sys.exit(main())
