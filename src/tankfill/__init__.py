"""
tankfill - A real-time pump, pipe and tank filling simulator.

Provides:
- Hydraulics kernel (Darcy-Weisbach head loss, friction factor, pump power)
- Pump, Pipe and Tank unit records with a fixed-step tank integrator
- A fixed-step driver paced against the wall clock through an injectable sleeper
- JSON-schema validated scenario files
- Results export to CSV, JSON, plots and an Excel validation report
"""

from .constants import GRAVITY, WATER_VISCOSITY
from .hydraulics import friction_factor, head_loss, pump_power
from .simulation import Simulation, run_simulation
from .validate import validate_config, validate_scenario
from .result import save_timeseries_csv, save_timeseries_json, plot_timeseries
from .sinks import StreamSink, ListSink, LoggerSink, RecordingSleeper, no_sleep
from .units.pump import Pump
from .units.pipes import Pipe
from .units.tank import Tank, StepOutcome, step

__version__ = "0.1.0"

__all__ = [
    "GRAVITY",
    "WATER_VISCOSITY",
    "friction_factor",
    "head_loss",
    "pump_power",
    "Simulation",
    "run_simulation",
    "validate_config",
    "validate_scenario",
    "save_timeseries_csv",
    "save_timeseries_json",
    "plot_timeseries",
    "StreamSink",
    "ListSink",
    "LoggerSink",
    "RecordingSleeper",
    "no_sleep",
    "Pump",
    "Pipe",
    "Tank",
    "StepOutcome",
    "step",
    "__version__",
]
