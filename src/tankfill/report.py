"""Text lines written to the simulation sink."""

HEADER = "Time(s)   Water Level(m)   Flow Rate(m³/s)   Pump Power(W)"
RULE = "---------------------------------------------------------"

START_MESSAGE = "Starting real-time tank filling simulation..."
COMPLETE_MESSAGE = "Simulation complete."

NO_FLOW_NOTICE = "Pump cannot overcome the head loss. No flow occurs."
OVERFLOW_NOTICE = "Tank is full! Overflow occurs."


def format_observation(time, water_level, flow_rate, power):
    """One whitespace-separated observation row: time, level, flow rate, power."""
    return f"{time:.2f}       {water_level:.4f}          {flow_rate:.4f}          {power:.2f}"
