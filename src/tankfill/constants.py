"""Physical constants of the tank filling model."""

GRAVITY = 9.81  # m/s²
WATER_VISCOSITY = 1.0e-3  # Pa·s, dynamic viscosity

# Darcy friction factor regimes
LAMINAR_LIMIT = 2000.0
LAMINAR_COEFFICIENT = 64.0
TURBULENT_FRICTION_FACTOR = 0.02
