"""Tests for configuration loading and saving."""

import os

import pytest

from dresscode.color_engine import ButtonTextColor, ThemeMode
from dresscode.config import Config, ConfigModel, get_config, load_config, save_config
from dresscode.services import ExportFormat


class TestConfigModel:
    """Tests for the configuration dataclass."""

    def test_defaults(self):
        config = ConfigModel()

        assert config.data_dir == os.path.expanduser("~/.dresscode")
        assert config.button_text_color == ButtonTextColor.AUTO
        assert config.border_radius == 8
        assert config.mode == ThemeMode.LIGHT
        assert config.default_export_format == ExportFormat.CSS
        assert config.suggestion_target_ratio == 4.5
        assert config.log_level == "WARNING"

    def test_strings_are_coerced(self):
        config = ConfigModel(button_text_color="dark", mode="dark",
                             default_export_format="json", log_level="debug")

        assert config.button_text_color == ButtonTextColor.DARK
        assert config.mode == ThemeMode.DARK
        assert config.default_export_format == ExportFormat.JSON
        assert config.log_level == "DEBUG"

    def test_invalid_enum_falls_back(self):
        config = ConfigModel(mode="sepia", default_export_format="pdf")

        assert config.mode == ThemeMode.LIGHT
        assert config.default_export_format == ExportFormat.CSS

    def test_yaml_round_trip(self, tmp_path):
        config = ConfigModel(data_dir=str(tmp_path), border_radius=4,
                             mode=ThemeMode.DARK, suggestion_target_ratio=7.0)

        restored = ConfigModel.from_yaml(config.to_yaml())

        assert restored == config

    def test_unknown_keys_ignored(self):
        config = ConfigModel.from_yaml("border_radius: 2\ntheme_name: ocean\n")
        assert config.border_radius == 2

    def test_empty_yaml_gives_defaults(self):
        assert ConfigModel.from_yaml("") == ConfigModel()

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError):
            ConfigModel.from_yaml("- a\n- b\n")

    def test_paths(self, tmp_path):
        config = ConfigModel(data_dir=str(tmp_path))

        assert config.get_config_path() == tmp_path / "config.yaml"
        assert config.get_session_path() == tmp_path / "session.json"

    def test_design_settings(self):
        settings = ConfigModel(border_radius=3, button_text_color="light").design_settings()

        assert settings.border_radius == 3
        assert settings.button_text_color == ButtonTextColor.LIGHT
        assert settings.mode == ThemeMode.LIGHT


class TestConfigManager:
    """Tests for loading and caching configuration."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == ConfigModel()

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mode: dark\nborder_radius: 16\n", encoding="utf-8")

        config = load_config(path)

        assert config.mode == ThemeMode.DARK
        assert config.border_radius == 16

    def test_corrupt_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mode: [unclosed\n", encoding="utf-8")

        assert load_config(path) == ConfigModel()

    def test_load_is_cached(self, tmp_path):
        first = load_config(tmp_path / "missing.yaml")
        assert get_config() is first
        assert Config.get() is first

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        save_config(ConfigModel(data_dir=str(tmp_path), border_radius=20), path)

        assert path.exists()
        assert Config.reload(path).border_radius == 20
