import argparse
import os
import sys

from loguru import logger

from .report import START_MESSAGE
from .result import save_timeseries_csv, save_timeseries_json, plot_timeseries
from .simulation import Simulation
from .sinks import StreamSink
from .utils.validation import generate_validation_report
from .validate import validate_config, validate_scenario


def _load(fname):
    """Validated scenario from a JSON file, or the defaults when no file is given."""
    if fname is None:
        return validate_config({})

    if not os.path.exists(fname):
        logger.error(f"Scenario file '{fname}' not found.")
        raise SystemExit(1)

    try:
        return validate_scenario(fname)
    except Exception as e:
        logger.error(f"Failed to validate scenario file '{fname}': {e}")
        raise SystemExit(1)


def _cmd_run(args):
    """Run a tank filling simulation."""
    config = _load(args.scenario)

    overrides = {}
    if args.duration is not None:
        overrides["duration"] = args.duration
    if args.dt is not None:
        overrides["dt"] = args.dt
    if args.fast:
        overrides["realtime"] = False
    if overrides:
        config["simulation"].update(overrides)
        try:
            config = validate_config(config)
        except Exception as e:
            logger.error(f"Invalid simulation settings: {e}")
            raise SystemExit(1)

    sink = StreamSink(sys.stdout)
    sink(START_MESSAGE)
    sim = Simulation(config)
    results = sim.run(sink=sink)

    if args.output_dir:
        base_name = os.path.splitext(os.path.basename(args.scenario))[0] if args.scenario else "default"
        save_timeseries_csv(results, f"{base_name}_timeseries.csv", output_dir=args.output_dir)
        save_timeseries_json(results, f"{base_name}_timeseries.json", output_dir=args.output_dir)
        generate_validation_report(
            results,
            config["tank"]["height"],
            output_excel=os.path.join(args.output_dir, f"{base_name}_validation.xlsx"),
        )
        if args.plot:
            plot_timeseries(results, f"{base_name}_timeseries.png", output_dir=args.output_dir)
        logger.info(f"Saved {base_name} results to {args.output_dir}")


def _cmd_validate(args):
    """Validate a scenario JSON file."""
    fname = args.scenario
    _load(fname)
    logger.info(f"Scenario '{fname}' is valid.")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="tankfill - Real-time pump, pipe and tank filling simulation",
        prog="tankfill",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level for stderr output (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # tankfill run
    run_parser = subparsers.add_parser("run", help="Run a tank filling simulation")
    run_parser.add_argument("scenario", nargs="?", default=None, help="Path to a scenario JSON file (default: built-in scenario)")
    run_parser.add_argument("--fast", action="store_true", help="Do not pace the run against the wall clock")
    run_parser.add_argument("--duration", type=float, default=None, help="Simulated time in seconds")
    run_parser.add_argument("--dt", type=float, default=None, help="Time step in seconds")
    run_parser.add_argument("--output-dir", "-o", default=None, help="Directory for CSV, JSON and validation outputs")
    run_parser.add_argument("--plot", action="store_true", help="Also save a time-series plot (needs --output-dir)")

    # tankfill validate
    validate_parser = subparsers.add_parser("validate", help="Validate a scenario JSON file")
    validate_parser.add_argument("scenario", help="Path to the scenario JSON file")

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    if args.command is None:
        parser.print_help()
        raise SystemExit(1)

    commands = {
        "run": _cmd_run,
        "validate": _cmd_validate,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
