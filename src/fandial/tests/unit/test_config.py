"""
Unit tests for the ConfigManager class in the FanDial application.
"""
import json
from pathlib import Path
from unittest.mock import patch, mock_open

import pytest

from fandial import constants
from fandial.utils.config import ConfigError, ConfigManager


@pytest.fixture
def config_manager(tmp_path):
    return ConfigManager(tmp_path / "fandial_test.json")


def test_load_creates_default_config_if_missing(config_manager):
    config = config_manager.load()
    assert config == constants.config.defaults.DEFAULT_CONFIG
    assert config_manager.config_path.exists()


def test_defaults_leave_colors_unset(config_manager):
    config = config_manager.load()
    for key in ("fanColor1", "fanColor2", "fanColor3"):
        assert config[key] == constants.color.UNSET


def test_load_valid_config_merges_with_defaults(config_manager):
    config_manager.config_path.write_text(json.dumps({"fanColor1": "#00FF00", "language": "de_DE"}), encoding="utf-8")
    config = config_manager.load()
    assert config["fanColor1"] == "#00FF00"
    assert config["language"] == "de_DE"
    assert config["fanColor2"] == constants.config.defaults.DEFAULT_FAN_COLOR
    assert config["label_font_size"] == constants.config.defaults.DEFAULT_LABEL_FONT_SIZE


def test_validate_config_corrects_invalid_values(config_manager):
    invalid_config = {
        "fanColor1": "green",
        "fanColor2": 0xFFFF00,
        "fanColor3": "#80FF0000",
        "label_font_size": 500,
        "language": "xx_XX",
        "shape": "square",
    }
    with patch.object(config_manager.logger, 'warning') as mock_warning:
        validated = config_manager._validate_config(invalid_config)

    assert validated["fanColor1"] == constants.config.defaults.DEFAULT_FAN_COLOR
    assert validated["fanColor2"] == constants.config.defaults.DEFAULT_FAN_COLOR
    assert validated["fanColor3"] == "#80FF0000"
    assert validated["label_font_size"] == constants.config.defaults.DEFAULT_LABEL_FONT_SIZE
    assert validated["language"] is None
    assert "shape" not in validated
    assert mock_warning.call_count == 5


@pytest.mark.parametrize("raw_value", ["Infinity", "-Infinity", "NaN", "12.5", "true"])
def test_non_integral_font_size_falls_back_to_default(config_manager, raw_value):
    config_manager.config_path.write_text(f'{{"label_font_size": {raw_value}}}', encoding="utf-8")
    with patch.object(config_manager.logger, 'warning') as mock_warning:
        config = config_manager.load()
    assert config["label_font_size"] == constants.config.defaults.DEFAULT_LABEL_FONT_SIZE
    mock_warning.assert_called_once()


def test_whole_float_font_size_is_accepted(config_manager):
    config_manager.config_path.write_text('{"label_font_size": 24.0}', encoding="utf-8")
    config = config_manager.load()
    assert config["label_font_size"] == 24
    assert isinstance(config["label_font_size"], int)


def test_corrupt_file_is_backed_up(config_manager):
    config_manager.config_path.write_text("{not json", encoding="utf-8")
    config = config_manager.load()
    assert config == constants.config.defaults.DEFAULT_CONFIG
    assert config_manager.config_path.with_name("fandial_test.json.corrupt").exists()


def test_save_skips_null_values(config_manager):
    config_manager.save(dict(constants.config.defaults.DEFAULT_CONFIG, fanColor3="#FF0000"))
    written = json.loads(config_manager.config_path.read_text(encoding="utf-8"))
    assert written["fanColor3"] == "#FF0000"
    assert "language" not in written


def test_save_skips_unchanged_config(config_manager):
    config = config_manager.load()
    with patch("tempfile.NamedTemporaryFile") as mock_tmp:
        config_manager.save(config)
        mock_tmp.assert_not_called()


def test_read_error_raises_config_error(config_manager):
    config_manager.config_path.write_text("{}", encoding="utf-8")
    with patch.object(Path, "open", side_effect=PermissionError("denied")):
        with pytest.raises(ConfigError):
            config_manager.load()
