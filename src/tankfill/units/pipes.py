from dataclasses import dataclass


@dataclass
class Pipe:
    """
    Straight pipe between the pump and the tank.
    Length, diameter and fluid density are fixed for a run. ``velocity`` is
    recomputed from the pump flow rate on every head loss evaluation.
    Roughness is carried for reporting only; the turbulent friction factor is fixed.
    """

    name: str = "pipe"
    length: float = 50.0  # m
    diameter: float = 0.1  # m
    roughness: float = 0.015
    density: float = 1000.0  # kg/m³
    velocity: float = 0.0  # m/s
