"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest

from officehours.config import AppConfig


def test_defaults():
    config = AppConfig()
    
    assert config.timezone == "Africa/Lagos"
    assert config.data_file == Path("lecturers.yaml")
    assert config.log_level == "WARNING"


def test_load_from_yaml_resolves_data_file(tmp_path):
    """A relative data file is resolved next to the config file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "timezone: Europe/Berlin\n"
        "data_file: store/lecturers.yaml\n"
        "log_level: debug\n",
        encoding="utf-8"
    )
    
    config = AppConfig.load_from_yaml(config_path)
    
    assert config.timezone == "Europe/Berlin"
    assert config.data_file == tmp_path / "store" / "lecturers.yaml"
    assert config.log_level == "DEBUG"


def test_empty_file_uses_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")
    
    config = AppConfig.load_from_yaml(config_path)
    
    assert config.timezone == "Africa/Lagos"
    assert config.data_file == tmp_path / "lecturers.yaml"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        AppConfig.load_from_yaml(tmp_path / "config.yaml")


def test_non_mapping_root_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")
    
    with pytest.raises(ValueError, match="mapping"):
        AppConfig.load_from_yaml(config_path)


def test_unknown_timezone_rejected():
    with pytest.raises(ValueError, match="Unknown timezone"):
        AppConfig(timezone="Mars/Olympus_Mons")


def test_unknown_log_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        AppConfig(log_level="LOUD")
