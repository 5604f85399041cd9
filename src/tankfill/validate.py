import json
import jsonschema
from jsonschema import validate
from loguru import logger

from ._schema import load_scenario_schema
from .config import merge_config


def validate_config(config, schema=None):
    """
    Validates a scenario dict against the bundled schema and returns it merged over the defaults.
    Raises jsonschema.ValidationError on schema errors and ValueError when the
    initial water level lies above the tank height.
    """
    if schema is None:
        schema = load_scenario_schema()

    try:
        validate(instance=config, schema=schema)
    except jsonschema.exceptions.ValidationError as err:
        logger.error(f"Scenario validation error: {err.message}")
        raise

    merged = merge_config(config)
    tank = merged["tank"]
    if tank["water_level"] > tank["height"]:
        logger.error(f"Initial water level {tank['water_level']} m exceeds tank height {tank['height']} m")
        raise ValueError(
            f"Initial water level {tank['water_level']} m exceeds tank height {tank['height']} m"
        )
    return merged


def validate_scenario(config_path, schema=None):
    """Loads a scenario JSON file and validates it, see ``validate_config``."""
    with open(config_path, "r") as f:
        config = json.load(f)

    merged = validate_config(config, schema=schema)
    logger.info(f"Scenario '{config_path}' validated successfully.")
    return merged
