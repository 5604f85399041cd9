from dataclasses import dataclass


@dataclass
class Pump:
    """
    Fixed-duty pump.
    Delivers a constant volumetric flow rate against a fixed head.
    ``power`` is filled in by the tank integrator and stays at its last value
    on ticks where the pump cannot push any flow.
    """

    name: str = "pump"
    flow_rate: float = 0.01  # m³/s
    head: float = 10.0  # m
    power: float = 0.0  # W
