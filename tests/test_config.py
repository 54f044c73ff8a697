"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from taggy.config import Config, WriteOptions, get_config_dir, get_config_path


class TestConfigPaths:
    def test_default_location(self, isolated_home):
        assert get_config_dir() == isolated_home / ".taggy"
        assert get_config_path() == isolated_home / ".taggy" / ".taggy_config.toml"


class TestConfig:
    """Test the TOML backed Config."""

    def test_defaults(self, tmp_path):
        config = Config(tmp_path / "config.toml")
        assert config.get_id3v2_version() == 4
        assert config.get_json_output() is False
        assert not config.is_dirty()

    def test_missing_file_does_not_load(self, tmp_path):
        config = Config(tmp_path / "config.toml")
        assert config.load() is False

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"
        config = Config(path)
        config.set_id3v2_version(3)
        config.set_json_output(True)
        assert config.is_dirty()
        assert config.save()
        assert not config.is_dirty()
        assert path.exists()

        reloaded = Config(path)
        assert reloaded.get_id3v2_version() == 3
        assert reloaded.get_json_output() is True

    def test_save_skips_clean_config(self, tmp_path):
        path = tmp_path / "config.toml"
        config = Config(path)
        assert config.save()
        assert not path.exists()
        assert config.save(force=True)
        assert path.exists()

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[output]\njson = true\n")
        config = Config(path)
        assert config.get_json_output() is True
        assert config.get_id3v2_version() == 4

    def test_invalid_toml_is_ignored(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("this is = = not toml")
        config = Config(path)
        assert config.get_id3v2_version() == 4

    def test_invalid_id3v2_version(self, tmp_path):
        config = Config(tmp_path / "config.toml")
        with pytest.raises(ValueError):
            config.set_id3v2_version(2)
        assert not config.is_dirty()

    def test_write_options(self, tmp_path):
        config = Config(tmp_path / "config.toml")
        assert config.get_write_options() == WriteOptions()
        config.set_id3v2_version(3)
        assert config.get_write_options().id3v2_version == 3


class TestWriteOptions:
    def test_default_version(self):
        assert WriteOptions().id3v2_version == 4

    def test_rejects_other_versions(self):
        with pytest.raises(ValidationError):
            WriteOptions(id3v2_version=2)
