"""Tests for the config loader (JSON and YAML)."""

import json
from pathlib import Path

from pydantic import ValidationError
import pytest
import yaml

import doubleseq.core.config.loader as config_loader
from doubleseq.core.config import AppConfig


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "logging": {"level": "DEBUG", "format": "%(message)s", "structured": True},
        "display": {"debug_markers": True},
        "unknown_section": {"ignored": True},
    }


def test_detect_format_json():
    """Test format detection for JSON files."""
    assert config_loader.detect_format("config.json") == "json"
    assert config_loader.detect_format(Path("config.JSON")) == "json"


def test_detect_format_yaml():
    """Test format detection for YAML files."""
    assert config_loader.detect_format("config.yaml") == "yaml"
    assert config_loader.detect_format(Path("config.yml")) == "yaml"


def test_detect_format_invalid():
    """Test format detection for invalid extensions."""
    with pytest.raises(ValueError) as exc_info:
        config_loader.detect_format("config.txt")

    assert "Unsupported config format" in str(exc_info.value)


def test_load_config_json(tmp_path, sample_config_data):
    """Test loading JSON config."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["logging"]["level"] == "DEBUG"
    assert config["display"]["debug_markers"] is True


def test_load_config_yaml(tmp_path, sample_config_data):
    """Test loading YAML config."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["logging"]["format"] == "%(message)s"


def test_load_config_empty_yaml(tmp_path):
    """Test an empty YAML file loads as an empty dict."""
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")

    assert config_loader.load_config(config_file) == {}


def test_load_config_missing_file(tmp_path):
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        config_loader.load_config(tmp_path / "missing.yaml")


def test_load_config_invalid_json(tmp_path):
    """Test malformed JSON raises ValueError."""
    config_file = tmp_path / "bad.json"
    config_file.write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        config_loader.load_config(config_file)


def test_load_config_invalid_yaml(tmp_path):
    """Test malformed YAML raises ValueError."""
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("key: [unclosed")

    with pytest.raises(ValueError, match="Invalid YAML"):
        config_loader.load_config(config_file)


def test_load_config_rejects_non_mapping(tmp_path):
    """Test a top-level list is rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 1\n- 2\n")

    with pytest.raises(ValueError, match="Expected a mapping"):
        config_loader.load_config(config_file)


def test_load_app_config(tmp_path, sample_config_data):
    """Test app config validation and ignored extra sections."""
    config_file = tmp_path / "doubleseq.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = config_loader.load_app_config(config_file)

    assert config.logging.level == "DEBUG"
    assert config.logging.structured is True
    assert config.display.debug_markers is True


def test_load_app_config_defaults_when_default_missing(tmp_path, monkeypatch):
    """Test defaults are used when no default config file exists."""
    monkeypatch.chdir(tmp_path)

    config = config_loader.load_app_config()

    assert config == AppConfig()
    assert config.logging.level == "INFO"
    assert config.display.debug_markers is False


def test_load_app_config_reads_default_path(tmp_path, monkeypatch):
    """Test doubleseq.yaml in the working directory is picked up."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "doubleseq.yaml").write_text("logging:\n  level: WARNING\n")

    assert config_loader.load_app_config().logging.level == "WARNING"


def test_load_app_config_invalid_level(tmp_path):
    """Test an unknown log level fails validation."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"logging": {"level": "LOUD"}}))

    with pytest.raises(ValidationError):
        config_loader.load_app_config(config_file)


def test_load_script(tmp_path):
    """Test loading a YAML operation script."""
    script_file = tmp_path / "ops.yaml"
    script_file.write_text("initial: [1.0]\nsteps:\n  - op: reset_to_front\n  - op: insert_after\n    value: 2.5\n")

    script = config_loader.load_script(script_file)

    assert script.initial == [1.0]
    assert [s.op.value for s in script.steps] == ["reset_to_front", "insert_after"]
    assert script.steps[1].value == 2.5
