import csv
import json
import os

import matplotlib.pyplot as plt

COLUMNS = [
    ("time", "time [s]"),
    ("water_level", "water_level [m]"),
    ("flow_rate", "flow_rate [m3/s]"),
    ("power", "power [W]"),
    ("head_loss", "head_loss [m]"),
    ("velocity", "velocity [m/s]"),
    ("flowing", "flowing"),
    ("overflowed", "overflowed"),
]


def save_timeseries_csv(results, fname="results_timeseries.csv", output_dir="outputs"):
    """
    Save simulation results (time series) to a CSV file, one row per tick.
    results: dict {quantity: [values]}
    """
    times = results.get("time", [])

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([label for _, label in COLUMNS])
        for i in range(len(times)):
            writer.writerow([results.get(key, [""] * len(times))[i] for key, _ in COLUMNS])
    return path


def save_timeseries_json(results, fname="results_timeseries.json", output_dir="outputs"):
    """Save simulation results (time series) to a JSON file."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)
    return path


def plot_timeseries(results, fname="timeseries.png", output_dir="outputs"):
    """Plot water level and pump power against time."""
    times = results.get("time", [])
    if not times:
        return None

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, fname)

    fig, (ax_level, ax_power) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
    ax_level.plot(times, results["water_level"], color="tab:blue")
    ax_level.set_ylabel("Water Level [m]")
    ax_level.set_title("Tank Filling vs Time")

    ax_power.plot(times, results["power"], color="tab:red")
    ax_power.set_xlabel("Time [s]")
    ax_power.set_ylabel("Pump Power [W]")

    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
