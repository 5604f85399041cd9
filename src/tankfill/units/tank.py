from dataclasses import dataclass

from loguru import logger

from ..hydraulics import head_loss, pump_power, tank_area
from ..report import NO_FLOW_NOTICE, OVERFLOW_NOTICE


@dataclass
class Tank:
    """Open cylindrical tank filled from the bottom. Level never exceeds ``height``."""

    name: str = "tank"
    height: float = 5.0  # m
    radius: float = 1.0  # m
    water_level: float = 0.0  # m


@dataclass
class StepOutcome:
    head_loss: float
    flowing: bool
    overflowed: bool = False


def step(tank, pump, pipe, dt, sink):
    """
    Advances the tank level by one fixed time step.
    The pipe head loss at the pump flow rate decides whether any flow occurs at all.
    If the pump head is below the loss, a notice is emitted and neither the level nor
    the pump power change. Otherwise the full pump flow enters the tank, the level is
    capped at the tank height (with an overflow notice) and the pump power is updated.
    Args:
        tank (Tank): Tank whose ``water_level`` is advanced in place.
        pump (Pump): Pump supplying the flow; its ``power`` is updated in place.
        pipe (Pipe): Pipe carrying the flow; its ``velocity`` is updated in place.
        dt (float): Time step in seconds.
        sink (callable): Receives notice lines.
    Returns:
        StepOutcome: Head loss of this tick and whether flow or overflow occurred.
    """
    h_f = head_loss(pipe, pump.flow_rate)

    if pump.head < h_f:
        logger.warning(f"Pump head {pump.head:.4f} m below head loss {h_f:.4f} m")
        sink(NO_FLOW_NOTICE)
        return StepOutcome(head_loss=h_f, flowing=False)

    # Head loss only gates the flow, the full pump rate reaches the tank
    effective_flow_rate = pump.flow_rate
    tank.water_level += (effective_flow_rate / tank_area(tank.radius)) * dt

    overflowed = False
    if tank.water_level > tank.height:
        tank.water_level = tank.height
        overflowed = True
        logger.warning(f"Tank '{tank.name}' full at {tank.height:.4f} m")
        sink(OVERFLOW_NOTICE)

    pump.power = pump_power(pump, pipe)
    return StepOutcome(head_loss=h_f, flowing=True, overflowed=overflowed)
