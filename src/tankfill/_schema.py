"""Internal helper to load the bundled JSON schema."""

import json
from importlib.resources import files


def load_scenario_schema() -> dict:
    """Load and return the scenario JSON schema bundled with the package."""
    schema_text = (
        files("tankfill.schemas")
        .joinpath("scenario_schema.json")
        .read_text(encoding="utf-8")
    )
    return json.loads(schema_text)
