import math

from .constants import (
    GRAVITY,
    WATER_VISCOSITY,
    LAMINAR_LIMIT,
    LAMINAR_COEFFICIENT,
    TURBULENT_FRICTION_FACTOR,
)


def pipe_area(diameter):
    """Cross-sectional flow area of a round pipe [m²]."""
    return math.pi * (diameter / 2.0) ** 2


def tank_area(radius):
    """Cross-sectional area of a cylindrical tank [m²]."""
    return math.pi * radius**2


def reynolds_number(density, velocity, diameter, viscosity=WATER_VISCOSITY):
    return density * velocity * diameter / viscosity


def friction_factor(reynolds):
    """
    Darcy friction factor for a given Reynolds number.
    Laminar flow (Re < 2000) uses the Hagen-Poiseuille result f = 64/Re.
    Turbulent flow uses a fixed f = 0.02 instead of iterating Colebrook-White.
    Args:
        reynolds (float): Reynolds number, must be > 0 in the laminar range.
    Returns:
        float: Dimensionless friction factor.
    """
    if reynolds < LAMINAR_LIMIT:
        return LAMINAR_COEFFICIENT / reynolds
    return TURBULENT_FRICTION_FACTOR


def head_loss(pipe, flow_rate):
    """
    Computes the friction head loss along a pipe with the Darcy-Weisbach equation:
        h_f = f * (L / D) * v² / (2 g)
    The mean velocity v = Q / A is stored on ``pipe.velocity``; no other state is touched.
    Zero flow gives zero head loss without evaluating the friction factor.
    Args:
        pipe (Pipe): Pipe with length, diameter and density set.
        flow_rate (float): Volumetric flow rate in m³/s.
    Returns:
        float: Head loss in metres of fluid column.
    """
    pipe.velocity = flow_rate / pipe_area(pipe.diameter)
    if pipe.velocity == 0:
        return 0.0

    re = reynolds_number(pipe.density, pipe.velocity, pipe.diameter)
    f = friction_factor(re)
    return f * (pipe.length / pipe.diameter) * pipe.velocity**2 / (2 * GRAVITY)


def pump_power(pump, pipe):
    """Ideal hydraulic power rho * g * Q * H delivered at the configured head [W]."""
    return pipe.density * GRAVITY * pump.flow_rate * pump.head
