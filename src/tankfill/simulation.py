import time

from loguru import logger

from .config import merge_config
from .report import HEADER, RULE, COMPLETE_MESSAGE, format_observation
from .sinks import StreamSink, no_sleep
from .units.pump import Pump
from .units.pipes import Pipe
from .units.tank import Tank, step


def run_simulation(pump, pipe, tank, duration, dt, sink, sleeper):
    """
    Runs the fixed-step filling loop and paces it against the wall clock.
    Each tick integrates the tank, writes one observation line (after any notices
    of that tick), advances simulated time by ``dt`` and then calls ``sleeper(dt)``.
    The run ends once simulated time reaches ``duration``; overflow does not stop it.
    Args:
        pump (Pump), pipe (Pipe), tank (Tank): Records mutated in place during the run.
        duration (float): Simulated time span in seconds. Zero gives no observation rows.
        dt (float): Time step in seconds, must be positive.
        sink (callable): Receives every output line.
        sleeper (callable): Called with ``dt`` once per tick.
    Returns:
        dict: Per-tick timeseries keyed by 'time', 'water_level', 'flow_rate', 'power',
              'head_loss', 'velocity', 'flowing' and 'overflowed'.
    Raises:
        ValueError: If ``dt`` is not positive.
    """
    if dt <= 0:
        logger.error(f"Time step must be positive, got {dt}")
        raise ValueError(f"Time step must be positive, got {dt}")

    results = {
        "time": [],
        "water_level": [],
        "flow_rate": [],
        "power": [],
        "head_loss": [],
        "velocity": [],
        "flowing": [],
        "overflowed": [],
    }

    sink(HEADER)
    sink(RULE)

    current_time = 0.0
    while current_time < duration:
        outcome = step(tank, pump, pipe, dt, sink)
        sink(format_observation(current_time, tank.water_level, pump.flow_rate, pump.power))
        logger.debug(f"t={current_time:.2f} level={tank.water_level:.4f} h_f={outcome.head_loss:.4f}")

        results["time"].append(current_time)
        results["water_level"].append(tank.water_level)
        results["flow_rate"].append(pump.flow_rate)
        results["power"].append(pump.power)
        results["head_loss"].append(outcome.head_loss)
        results["velocity"].append(pipe.velocity)
        results["flowing"].append(outcome.flowing)
        results["overflowed"].append(outcome.overflowed)

        current_time += dt
        sleeper(dt)

    sink(COMPLETE_MESSAGE)
    return results


class Simulation:
    """
    Pump, pipe and tank built from a scenario configuration.
    Attributes:
        config (dict): Scenario with 'pump', 'pipe', 'tank' and 'simulation' sections,
                       merged over the defaults.
        units (dict): The Pump, Pipe and Tank records keyed by section name.
        results (dict): Timeseries of the last run, empty before ``run``.
    """

    def __init__(self, config=None):
        logger.info("Initializing Simulation")
        self.config = merge_config(config)
        self.units = {}
        self.results = {}

    def build_units(self):
        logger.info("Building units")
        self.units = {
            "pump": Pump("pump", **self.config["pump"]),
            "pipe": Pipe("pipe", **self.config["pipe"]),
            "tank": Tank("tank", **self.config["tank"]),
        }
        for unit_name, unit in self.units.items():
            logger.info(f"Built unit {unit_name}: {unit}")

    def run(self, sink=None, sleeper=None):
        """
        Builds fresh units and runs the scenario.
        Without an explicit sleeper, ``time.sleep`` is used when the scenario is
        real-time and ``no_sleep`` otherwise. Without a sink, lines go to stdout.
        Returns:
            dict: The timeseries from ``run_simulation``.
        """
        self.build_units()
        sim_config = self.config["simulation"]
        if sink is None:
            sink = StreamSink()
        if sleeper is None:
            sleeper = time.sleep if sim_config.get("realtime", True) else no_sleep

        logger.info(f"Starting simulation: duration={sim_config['duration']} s, dt={sim_config['dt']} s")
        self.results = run_simulation(
            self.units["pump"],
            self.units["pipe"],
            self.units["tank"],
            sim_config["duration"],
            sim_config["dt"],
            sink,
            sleeper,
        )
        logger.info(f"Simulation completed after {len(self.results['time'])} steps")
        return self.results
