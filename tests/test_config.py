"""Settings resolution tests"""

import pytest

from nvimfinder import config
from nvimfinder.config import FinderSettings, load_settings
from nvimfinder.errors import ConfigError


def reader(values):
    return lambda name: values.get(name)


class TestLoadSettings:
    """Host variable resolution"""

    def test_defaults_when_unset(self, monkeypatch):
        """Unset variables fall back to the documented defaults"""
        monkeypatch.delenv(config.TREE_MODEL_ENV, raising=False)
        settings = load_settings(reader({}))

        assert settings.buffer_name == "finder"
        assert settings.file_type == "finder"
        assert settings.width == 30
        assert settings.tree_model is None

    def test_values_from_host(self):
        settings = load_settings(reader({
            "finder_buffer_name": "tree",
            "finder_file_type": "filetree",
            "finder_width": 42,
            "finder_tree_model": "mytree:Tree",
        }))

        assert settings.buffer_name == "tree"
        assert settings.file_type == "filetree"
        assert settings.width == 42
        assert settings.tree_model == "mytree:Tree"

    def test_empty_and_zero_mean_default(self):
        """Empty strings and width 0 behave like unset variables"""
        settings = load_settings(reader({
            "finder_buffer_name": "",
            "finder_file_type": "",
            "finder_width": 0,
        }))

        assert settings.buffer_name == config.DEFAULT_BUFFER_NAME
        assert settings.file_type == config.DEFAULT_FILE_TYPE
        assert settings.width == config.DEFAULT_WIDTH

    def test_tree_model_from_environment(self, monkeypatch):
        monkeypatch.setenv(config.TREE_MODEL_ENV, "envtree:make")
        settings = load_settings(reader({}))
        assert settings.tree_model == "envtree:make"

    def test_host_variable_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv(config.TREE_MODEL_ENV, "envtree:make")
        settings = load_settings(reader({"finder_tree_model": "vartree:make"}))
        assert settings.tree_model == "vartree:make"

    def test_negative_width_rejected(self):
        with pytest.raises(ConfigError, match="width"):
            load_settings(reader({"finder_width": -5}))

    def test_non_numeric_width_rejected(self):
        with pytest.raises(ConfigError):
            load_settings(reader({"finder_width": "wide"}))


def test_settings_model_defaults():
    assert FinderSettings() == FinderSettings(buffer_name="finder", file_type="finder", width=30)
