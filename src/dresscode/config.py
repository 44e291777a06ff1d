"""Configuration management for DressCode."""

import logging
import os
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .color_engine import ButtonTextColor, ThemeMode, WCAG_AA_RATIO
from .services.export import DesignSettings, ExportFormat

logger = logging.getLogger(__name__)


@dataclass
class ConfigModel:
    """Global configuration model for DressCode."""

    # File paths
    data_dir: str = "~/.dresscode"

    # Design system settings
    button_text_color: ButtonTextColor = ButtonTextColor.AUTO
    border_radius: int = 8
    mode: ThemeMode = ThemeMode.LIGHT

    # Behavior settings
    default_export_format: ExportFormat = ExportFormat.CSS
    suggestion_target_ratio: float = WCAG_AA_RATIO
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)
        self.button_text_color = _coerce_enum(ButtonTextColor, self.button_text_color,
                                              ButtonTextColor.AUTO, "button_text_color")
        self.mode = _coerce_enum(ThemeMode, self.mode, ThemeMode.LIGHT, "mode")
        self.default_export_format = _coerce_enum(ExportFormat, self.default_export_format,
                                                  ExportFormat.CSS, "default_export_format")
        self.log_level = str(self.log_level).upper()

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "button_text_color": self.button_text_color.value,
            "border_radius": self.border_radius,
            "mode": self.mode.value,
            "default_export_format": self.default_export_format.value,
            "suggestion_target_ratio": self.suggestion_target_ratio,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def design_settings(self) -> DesignSettings:
        """Settings exported with the theme."""
        return DesignSettings(
            border_radius=self.border_radius,
            button_text_color=self.button_text_color,
            mode=self.mode,
        )

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def get_session_path(self) -> Path:
        """Get the session history file path."""
        return Path(self.data_dir) / "session.json"


def _coerce_enum(enum_cls, value, default, field_name):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Invalid {field_name} '{value}' in config, using '{default.value}'")
        return default


class Config:
    """Configuration manager for DressCode."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or use defaults."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. "
                               "Using default configuration.")
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
