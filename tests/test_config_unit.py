import json
from pathlib import Path

import pytest

from solver import config


def test_defaults_without_environment() -> None:
    assert config.get_settings({}) == config.DEFAULT_SETTINGS
    assert config.get_settings({}) is not config.DEFAULT_SETTINGS


def test_environment_overrides() -> None:
    settings = config.get_settings({
        "POLYSOLVER_LOG_LEVEL": "debug",
        "POLYSOLVER_MAX_DECIMALS": "3",
        "POLYSOLVER_VERIFY_ROOTS": "false",
        "POLYSOLVER_GRAPH_POINTS": "50",
    })
    assert settings["log_level"] == "DEBUG"
    assert settings["max_decimals"] == 3
    assert settings["verify_roots"] is False
    assert settings["graph_points"] == 50


def test_invalid_environment_value_is_ignored() -> None:
    settings = config.get_settings({"POLYSOLVER_GRAPH_POINTS": "many"})
    assert settings["graph_points"] == config.DEFAULT_SETTINGS["graph_points"]


def test_max_decimals_can_be_reset_to_none() -> None:
    assert config.get_settings({"POLYSOLVER_MAX_DECIMALS": "none"})["max_decimals"] is None


def test_settings_file(tmp_path: Path) -> None:
    path = tmp_path / "polysolver.json"
    path.write_text(json.dumps({"max_decimals": 2, "unknown": 1}), encoding="utf-8")

    settings = config.get_settings({"POLYSOLVER_CONFIG": str(path)})
    assert settings["max_decimals"] == 2
    assert "unknown" not in settings


def test_environment_beats_settings_file(tmp_path: Path) -> None:
    path = tmp_path / "polysolver.json"
    path.write_text(json.dumps({"max_decimals": 2}), encoding="utf-8")

    settings = config.get_settings({
        "POLYSOLVER_CONFIG": str(path),
        "POLYSOLVER_MAX_DECIMALS": "5",
    })
    assert settings["max_decimals"] == 5


def test_invalid_settings_file_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "polysolver.json"
    path.write_text("{not-json", encoding="utf-8")
    assert config.get_settings({"POLYSOLVER_CONFIG": str(path)}) == config.DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert config.get_settings({"POLYSOLVER_CONFIG": str(path)}) == config.DEFAULT_SETTINGS

    missing = tmp_path / "missing.json"
    assert config.get_settings({"POLYSOLVER_CONFIG": str(missing)}) == config.DEFAULT_SETTINGS


def test_settings_file_strings_are_parsed(tmp_path: Path) -> None:
    path = tmp_path / "polysolver.json"
    path.write_text(json.dumps({
        "max_decimals": "3",
        "verify_roots": "false",
        "graph_points": "50",
        "log_level": "info",
    }), encoding="utf-8")

    settings = config.get_settings({"POLYSOLVER_CONFIG": str(path)})
    assert settings["max_decimals"] == 3
    assert settings["verify_roots"] is False
    assert settings["graph_points"] == 50
    assert settings["log_level"] == "INFO"


@pytest.mark.parametrize(
    "key,value",
    [
        ("log_level", 10),
        ("max_decimals", "three"),
        ("max_decimals", 2.5),
        ("max_decimals", True),
        ("verify_roots", 1),
        ("graph_points", [400]),
        ("graph_points", 1),
    ],
)
def test_settings_file_wrong_types_fall_back(tmp_path: Path, key, value) -> None:
    path = tmp_path / "polysolver.json"
    path.write_text(json.dumps({key: value}), encoding="utf-8")

    settings = config.get_settings({"POLYSOLVER_CONFIG": str(path)})
    assert settings[key] == config.DEFAULT_SETTINGS[key]


def test_graph_points_below_two_from_environment_is_ignored() -> None:
    settings = config.get_settings({"POLYSOLVER_GRAPH_POINTS": "0"})
    assert settings["graph_points"] == config.DEFAULT_SETTINGS["graph_points"]
