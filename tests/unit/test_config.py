"""Unit tests for emoji-linter configuration.

Tests cover defaults, camelCase and snake_case keys, strict validation,
discovery, loading errors and save/load round trips.
"""

import json

import pytest
from pydantic import ValidationError

from emoji_linter.config import (
    CONFIG_FILENAMES,
    DetectionConfig,
    LinterConfig,
    find_config_file,
    load_config,
    parse_config,
    save_config,
)
from emoji_linter.errors import ConfigurationError, ErrorCode


class TestDetectionConfig:
    """Tests for DetectionConfig model."""

    def test_default_values(self):
        """Test default detection values."""
        config = DetectionConfig()
        assert config.include_shortcodes is True
        assert config.max_text_length == 1_000_000
        assert config.max_shortcode_length == 50
        assert config.case_sensitive is True

    def test_camel_case_keys(self):
        """Persisted camelCase keys are accepted."""
        config = DetectionConfig.model_validate(
            {"includeShortcodes": False, "maxTextLength": 10, "caseSensitive": False}
        )
        assert config.include_shortcodes is False
        assert config.max_text_length == 10
        assert config.case_sensitive is False

    def test_shortcodes_alias(self):
        """The short 'shortcodes' key is accepted too."""
        assert DetectionConfig.model_validate({"shortcodes": False}).include_shortcodes is False

    def test_strict_types(self):
        """Strings are not coerced to numbers or booleans."""
        with pytest.raises(ValidationError):
            DetectionConfig.model_validate({"maxTextLength": "10"})
        with pytest.raises(ValidationError):
            DetectionConfig.model_validate({"includeShortcodes": "yes"})

    @pytest.mark.parametrize("key", ["maxTextLength", "maxShortcodeLength"])
    def test_lengths_must_be_positive(self, key):
        """Length limits must be greater than zero."""
        with pytest.raises(ValidationError):
            DetectionConfig.model_validate({key: 0})

    def test_frozen(self):
        """Config sections are immutable."""
        config = DetectionConfig()
        with pytest.raises(ValidationError):
            config.max_text_length = 5


class TestParseConfig:
    """Tests for parse_config."""

    def test_empty_document_uses_defaults(self):
        """An empty object gives the defaults."""
        assert parse_config({}) == LinterConfig()

    def test_sections(self):
        """All sections are read."""
        config = parse_config(
            {
                "ignore": {"files": ["dist/**"], "emojis": ["✅"], "patterns": ["^#"]},
                "output": {"format": "json", "showContext": False},
                "cleanup": {"createBackup": True},
            }
        )
        assert config.ignore.files == ["dist/**"]
        assert config.ignore.emojis == ["✅"]
        assert config.output.format == "json"
        assert config.output.show_context is False
        assert config.cleanup.create_backup is True

    def test_unknown_keys_ignored(self):
        """Unknown keys do not fail validation."""
        config = parse_config({"detection": {"skinTones": True}, "extra": 1})
        assert config.detection == DetectionConfig()

    def test_invalid_value_names_key(self):
        """Validation errors name the offending key."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config({"output": {"format": "xml"}}, source="cfg.json")
        error = exc_info.value
        assert error.code == ErrorCode.CFG_INVALID
        assert error.details["config_key"].startswith("output.")
        assert error.details["config_path"] == "cfg.json"

    def test_non_object_rejected(self):
        """The document must be a JSON object."""
        with pytest.raises(ConfigurationError):
            parse_config(["not", "an", "object"])

    def test_ignore_lists_must_hold_strings(self):
        """Ignore lists only accept strings."""
        with pytest.raises(ConfigurationError):
            parse_config({"ignore": {"files": [1, 2]}})


class TestLoadConfig:
    """Tests for loading from disk."""

    def test_no_file_gives_defaults(self, project):
        """Without a config file defaults are used."""
        assert find_config_file() is None
        assert load_config() == LinterConfig()

    def test_discovers_file(self, project):
        """Known file names in the cwd are discovered."""
        (project / ".emoji-linter.json").write_text(
            json.dumps({"detection": {"maxTextLength": 99}}), encoding="utf-8"
        )
        assert find_config_file() == project / ".emoji-linter.json"
        assert load_config().detection.max_text_length == 99

    def test_discovery_order(self, project):
        """The first name in CONFIG_FILENAMES wins."""
        for name in CONFIG_FILENAMES:
            (project / name).write_text("{}", encoding="utf-8")
        assert find_config_file() == project / CONFIG_FILENAMES[0]

    def test_explicit_missing_file(self, project):
        """An explicit path that does not exist is an error."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(project / "missing.json")
        assert exc_info.value.code == ErrorCode.CFG_MISSING

    def test_explicit_directory(self, project):
        """An explicit path must be a file."""
        with pytest.raises(ConfigurationError):
            load_config(project)

    def test_invalid_json(self, project):
        """Malformed JSON is a configuration error."""
        path = project / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert "Invalid JSON" in exc_info.value.message
        assert exc_info.value.details["config_path"] == str(path)


class TestSaveConfig:
    """Tests for save_config."""

    def test_round_trip(self, tmp_path):
        """Saved configs load back unchanged."""
        config = parse_config({"detection": {"maxShortcodeLength": 12}, "ignore": {"emojis": ["✅"]}})
        path = tmp_path / "nested" / "cfg.json"
        assert save_config(config, path) is True
        assert load_config(path) == config

    def test_camel_case_on_disk(self, tmp_path):
        """Keys are written in camelCase."""
        path = tmp_path / "cfg.json"
        save_config(LinterConfig(), path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert "includeShortcodes" in data["detection"]
        assert "maxTextLength" in data["detection"]
        assert "createBackup" in data["cleanup"]

    def test_unwritable_path(self, tmp_path):
        """Write failures return False."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        assert save_config(LinterConfig(), blocker / "cfg.json") is False
