import json

import jsonschema
import pytest

from tankfill._schema import load_scenario_schema
from tankfill.config import DEFAULT_CONFIG, merge_config
from tankfill.validate import validate_config, validate_scenario


def test_schema_is_bundled():
    schema = load_scenario_schema()
    assert set(schema["properties"]) == {"pump", "pipe", "tank", "simulation"}


def test_empty_config_gives_defaults():
    assert validate_config({}) == DEFAULT_CONFIG


def test_merge_keeps_unspecified_keys():
    merged = merge_config({"tank": {"radius": 0.05}})

    assert merged["tank"] == {"height": 5.0, "radius": 0.05, "water_level": 0.0}
    assert merged["pump"] == DEFAULT_CONFIG["pump"]
    assert DEFAULT_CONFIG["tank"]["radius"] == 1.0


@pytest.mark.parametrize(
    "config",
    [
        {"pipe": {"diameter": 0.0}},
        {"pipe": {"length": -1.0}},
        {"pipe": {"density": 0}},
        {"tank": {"radius": 0.0}},
        {"tank": {"height": -5.0}},
        {"simulation": {"dt": 0.0}},
        {"simulation": {"duration": -1.0}},
        {"pump": {"flow_rate": -0.01}},
        {"pump": {"head": "high"}},
        {"pump": {"efficiency": 0.8}},
        {"valve": {}},
    ],
)
def test_invalid_values_are_rejected(config):
    with pytest.raises(jsonschema.ValidationError):
        validate_config(config)


def test_initial_level_above_height_is_rejected():
    with pytest.raises(ValueError, match="exceeds tank height"):
        validate_config({"tank": {"height": 2.0, "water_level": 3.0}})


def test_validate_scenario_file(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps({"tank": {"radius": 0.05}, "simulation": {"realtime": False}}))

    config = validate_scenario(str(path))

    assert config["tank"]["radius"] == 0.05
    assert config["simulation"] == {"duration": 60.0, "dt": 1.0, "realtime": False}


def test_validate_scenario_file_with_bad_values(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps({"pipe": {"diameter": 0}}))

    with pytest.raises(jsonschema.ValidationError):
        validate_scenario(str(path))
