"""
Tests for FieldConfig loading.
"""

import json
import tempfile
from pathlib import Path

import pytest

from termfields.config import ENV_STRICT_MOVE, FieldConfig, parse_flag


class TestParseFlag:
    """Boolean settings from JSON values and environment strings."""

    @pytest.mark.parametrize("value, expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("On", True),
        (" 1 ", True),
        ("false", False),
        ("no", False),
        ("0", False),
        ("", False),
    ])
    def test_accepted_values(self, value, expected):
        """Bools pass through and strings are read as yes/no words."""
        assert parse_flag(value) is expected

    @pytest.mark.parametrize("value", [1, 0, None, [], {}])
    def test_rejects_non_bool_non_str(self, value):
        """Numbers, null and containers are not booleans."""
        with pytest.raises(ValueError):
            parse_flag(value)


class TestFieldConfig:
    """FieldConfig from dicts, JSON files and the environment."""

    @pytest.fixture
    def temp_dir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    def test_defaults(self):
        """Moves are permissive unless configured otherwise."""
        assert FieldConfig().strict_move is False

    def test_dict_round_trip(self):
        """to_dict() output loads back into an equal config."""
        config = FieldConfig.from_dict({"strict_move": True})
        assert config.strict_move is True
        assert config.to_dict() == {"strict_move": True}

    @pytest.mark.parametrize("value, expected", [
        ("false", False),
        ("False", False),
        ("0", False),
        ("true", True),
        ("yes", True),
    ])
    def test_from_dict_string_values(self, value, expected):
        """String flags in a dict follow the same words as the environment."""
        assert FieldConfig.from_dict({"strict_move": value}).strict_move is expected

    def test_from_dict_rejects_number(self):
        """A numeric flag is an error rather than a truthiness guess."""
        with pytest.raises(ValueError):
            FieldConfig.from_dict({"strict_move": 1})

    def test_missing_file_gives_defaults(self, temp_dir):
        """No config file means default settings."""
        assert FieldConfig.load(temp_dir / "nope.json") == FieldConfig()

    def test_load_saved_file(self, temp_dir):
        """save() writes JSON that load() reads back."""
        path = temp_dir / "fields.json"
        FieldConfig(strict_move=True).save(path)

        assert json.loads(path.read_text()) == {"strict_move": True}
        assert FieldConfig.load(path).strict_move is True

    def test_load_string_false(self, temp_dir):
        """A file saying "false" keeps strict mode off."""
        path = temp_dir / "fields.json"
        path.write_text('{"strict_move": "false"}')
        assert FieldConfig.load(path).strict_move is False

    def test_malformed_file_warns(self, temp_dir, caplog):
        """Broken JSON logs a warning and falls back to defaults."""
        path = temp_dir / "fields.json"
        path.write_text("{not json")

        with caplog.at_level("WARNING", logger="termfields.config"):
            config = FieldConfig.load(path)

        assert config == FieldConfig()
        assert "Could not load" in caplog.text

    def test_bad_flag_value_warns(self, temp_dir, caplog):
        """A non-boolean flag in the file logs a warning and uses defaults."""
        path = temp_dir / "fields.json"
        path.write_text('{"strict_move": 1}')

        with caplog.at_level("WARNING", logger="termfields.config"):
            config = FieldConfig.load(path)

        assert config == FieldConfig()
        assert "Ignoring" in caplog.text

    def test_non_object_ignored(self, temp_dir):
        """A JSON array is not a settings object."""
        path = temp_dir / "fields.json"
        path.write_text("[1, 2]")
        assert FieldConfig.load(path) == FieldConfig()

    @pytest.mark.parametrize("value, expected", [
        ("1", True),
        ("true", True),
        ("YES", True),
        ("0", False),
        ("", False),
    ])
    def test_from_env(self, value, expected):
        """TERMFIELDS_STRICT_MOVE switches strict moves on."""
        config = FieldConfig.from_env({ENV_STRICT_MOVE: value})
        assert config.strict_move is expected

    def test_from_env_unset(self):
        """An unset variable leaves moves permissive."""
        assert FieldConfig.from_env({}).strict_move is False
