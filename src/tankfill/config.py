"""Default scenario and helpers to merge user settings over it."""

from copy import deepcopy

DEFAULT_CONFIG = {
    "pump": {
        "flow_rate": 0.01,  # m³/s (10 L/s)
        "head": 10.0,  # m
    },
    "pipe": {
        "length": 50.0,  # m
        "diameter": 0.1,  # m
        "roughness": 0.015,  # steel
        "density": 1000.0,  # kg/m³, water
    },
    "tank": {
        "height": 5.0,  # m
        "radius": 1.0,  # m
        "water_level": 0.0,  # m
    },
    "simulation": {
        "duration": 60.0,  # s
        "dt": 1.0,  # s
        "realtime": True,
    },
}


def merge_config(overrides=None):
    """
    Returns a full scenario: the defaults with every section updated by ``overrides``.
    Sections and keys missing from ``overrides`` keep their default values.
    The defaults themselves are never modified.
    """
    config = deepcopy(DEFAULT_CONFIG)
    for section, values in (overrides or {}).items():
        config.setdefault(section, {}).update(values)
    return config
