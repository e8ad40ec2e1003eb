"""
Unit tests for the user configuration file.
"""
import json

import pytest

from sandsync.config import user_config


class TestLoadSave:
    """Test reading and writing the config file."""

    def test_defaults_when_missing(self, isolated_config):
        assert not isolated_config.exists()
        assert user_config.load_config() == user_config.get_default_config()

    def test_config_path_from_environment(self, isolated_config):
        assert user_config.get_config_path() == isolated_config

    def test_save_creates_parent_directory(self, isolated_config):
        user_config.save_config({"strict": True})
        assert json.loads(isolated_config.read_text()) == {"strict": True}

    def test_missing_keys_filled_from_defaults(self):
        user_config.save_config({"strict": True})
        config = user_config.load_config()
        assert config["strict"] is True
        assert config["classifier"] == "filesystem"

    def test_malformed_file_falls_back_to_defaults(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json")
        assert user_config.load_config() == user_config.get_default_config()


class TestSettings:
    """Test individual getters and setters."""

    def test_strict_round_trip(self):
        assert user_config.get_strict() is False
        user_config.set_strict(True)
        assert user_config.get_strict() is True

    def test_classifier(self):
        user_config.set_classifier_name("static")
        assert user_config.get_classifier_name() == "static"

    def test_invalid_classifier(self):
        with pytest.raises(ValueError, match="Invalid classifier"):
            user_config.set_classifier_name("inotify")

    def test_log_level_case_insensitive(self):
        user_config.set_log_level("debug")
        assert user_config.get_log_level() == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            user_config.set_log_level("chatty")

    def test_unknown_stored_log_level_ignored(self):
        user_config.save_config({"log_level": "chatty"})
        assert user_config.get_log_level() == "WARNING"

    def test_unknown_stored_classifier_ignored(self):
        user_config.save_config({"classifier": "inotify"})
        assert user_config.get_classifier_name() == "filesystem"
