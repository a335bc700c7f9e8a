"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest
import yaml

from output_paths.errors import ConfigurationError
from output_paths.load_config import DEFAULT_CONFIG, apply_overrides, load_config


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {"output": "dist", "source_map": True}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["output"] == "dist"
    assert loaded["source_map"] is True
    assert loaded["source_map_mode"] == "separate"  # Default


def test_load_config_missing_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a missing config file falls back to defaults with a warning."""
    with caplog.at_level(logging.WARNING):
        loaded = load_config(str(tmp_path / "missing.yml"))
    assert loaded == DEFAULT_CONFIG
    assert "not found" in caplog.text


def test_load_config_unknown_keys(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that unknown keys are dropped and reported."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"outptu": "dist", "output": "build"}))

    with caplog.at_level(logging.WARNING):
        loaded = load_config(str(config_file))
    assert "outptu" not in loaded
    assert loaded["output"] == "build"
    assert "outptu" in caplog.text


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file must hold a mapping."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- output\n- dist\n")
    with pytest.raises(ConfigurationError):
        load_config(str(config_file))


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty config file yields the defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_apply_overrides_skips_none() -> None:
    """Verify that only overrides with a value replace config entries."""
    config = {"output": "dist", "source_map_file_name": "app"}
    result = apply_overrides(config, output=None, source_map_file_name="bundle")
    assert result == {"output": "dist", "source_map_file_name": "bundle"}
    assert config["source_map_file_name"] == "app"


def test_load_config_rejects_unknown_source_map_mode(tmp_path: Path) -> None:
    """Verify that a bad source map mode is reported when the config loads."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"source_map_mode": "embedded"}))
    with pytest.raises(ConfigurationError):
        load_config(str(config_file))


def test_apply_overrides_rejects_unknown_source_map_mode() -> None:
    """Verify that overrides are checked like file values."""
    with pytest.raises(ConfigurationError):
        apply_overrides(DEFAULT_CONFIG, source_map_mode="embedded")
