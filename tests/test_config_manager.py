"""Tests for config_manager module."""

import json

import pytest

from rename_core import (
    ConfigLoadError,
    NumberingOptions,
    NumberingPosition,
    RenameConfiguration,
)
from rename_core import config_manager
from rename_core.config_manager import (
    configuration_from_dict,
    configuration_to_dict,
    load_configuration,
    save_configuration,
)


class TestSerialization:
    """Tests for dict conversion."""

    def test_position_stored_as_value(self):
        """Test the numbering position is serialized as a string."""
        config = RenameConfiguration(
            numbering=NumberingOptions(position=NumberingPosition.INDEX)
        )
        data = configuration_to_dict(config)
        assert data["numbering"]["position"] == "index"
        json.dumps(data)

    def test_missing_keys_use_defaults(self):
        """Test an empty dict gives the default configuration."""
        assert configuration_from_dict({}) == RenameConfiguration()

    def test_negative_padding_clamped(self):
        """Test negative padding and index are clamped to zero."""
        config = configuration_from_dict({"numbering": {"padding": -3, "insert_index": -1}})
        assert config.numbering.padding == 0
        assert config.numbering.insert_index == 0

    def test_unknown_position(self):
        """Test an unknown position raises ValueError."""
        with pytest.raises(ValueError, match="Unknown numbering position"):
            configuration_from_dict({"numbering": {"position": "middle"}})

    @pytest.mark.parametrize("data", [
        {"numbering": "x"},
        {"numbering": ["enabled"]},
        {"case_sensitive": "false"},
        {"numbering": {"enabled": "false"}},
        {"numbering": {"padding": True}},
        {"numbering": {"start_at": "3"}},
        {"find_text": 5},
    ])
    def test_wrong_types_rejected(self, data):
        """Test values of the wrong JSON type raise instead of being coerced."""
        with pytest.raises(ValueError):
            configuration_from_dict(data)

    def test_null_numbering_uses_defaults(self):
        """Test a null numbering object gives default numbering."""
        assert configuration_from_dict({"numbering": None}).numbering == NumberingOptions()


class TestLoadSave:
    """Tests for preset files."""

    def test_save_and_load(self, temp_dir):
        """Test a configuration round-trips through a preset file."""
        config = RenameConfiguration(
            find_text=r"(\d+)",
            replace_text="n$1",
            regex_mode=True,
            include_extension=False,
            numbering=NumberingOptions(enabled=True, padding=3, position=NumberingPosition.START, separator="_"),
        )
        path = save_configuration(config, temp_dir / "nested" / "preset.json")
        assert path.exists()
        assert load_configuration(path) == config

    def test_missing_default_uses_defaults(self, temp_dir, monkeypatch):
        """Test a missing default preset yields the default configuration."""
        monkeypatch.setattr(config_manager, "CONFIG_PATH", temp_dir / "absent.json")
        assert load_configuration() == RenameConfiguration()

    def test_missing_explicit_path(self, temp_dir):
        """Test a missing explicit preset is an error."""
        with pytest.raises(ConfigLoadError) as exc_info:
            load_configuration(temp_dir / "absent.json")
        assert exc_info.value.path == temp_dir / "absent.json"

    def test_invalid_json(self, temp_dir):
        """Test malformed JSON raises ConfigLoadError."""
        path = temp_dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Failed to parse"):
            load_configuration(path)

    def test_not_an_object(self, temp_dir):
        """Test a JSON list is rejected."""
        path = temp_dir / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="JSON object"):
            load_configuration(path)

    def test_invalid_value(self, temp_dir):
        """Test a bad value raises ConfigLoadError."""
        path = temp_dir / "value.json"
        path.write_text(json.dumps({"numbering": {"padding": "wide"}}), encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid config value"):
            load_configuration(path)

    @pytest.mark.parametrize("data", [
        {"numbering": "x"},
        {"case_sensitive": "false"},
    ])
    def test_wrong_type_raises_config_error(self, temp_dir, data):
        """Test a preset with a wrongly typed value raises ConfigLoadError."""
        path = temp_dir / "typed.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid config value"):
            load_configuration(path)
