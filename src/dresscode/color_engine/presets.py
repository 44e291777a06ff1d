"""Preset registry for quick-pick brand colors.

Built-in presets ship as YAML files in the package's ``color_presets``
directory, one file per category. Users can add or override presets with
files of the same shape in ``<data_dir>/presets``.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .convert import normalize_hex

logger = logging.getLogger(__name__)


class ColorPreset(BaseModel):
    """A named primary color"""

    id: str = Field(..., description="Stable preset identifier")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Grouping shown in listings")
    primary: str = Field(..., description="Primary color as hex")
    description: str = ""

    @field_validator('primary', mode='before')
    @classmethod
    def validate_primary(cls, v):
        normalized = normalize_hex(v)
        if normalized is None:
            raise ValueError(f"Invalid preset color: {v!r}")
        return normalized


class PresetRegistry:
    """Registry of built-in and user color presets."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the preset registry.

        Args:
            config_dir: Optional data directory holding a ``presets`` folder
        """
        self.builtin_presets_dir = Path(__file__).parent.parent / "color_presets"
        self.user_presets_dir = Path(config_dir) / "presets" if config_dir else None

        self._presets: Dict[str, ColorPreset] = {}
        self._load_directory(self.builtin_presets_dir)
        if self.user_presets_dir is not None:
            self._load_directory(self.user_presets_dir)

    def _load_directory(self, directory: Path) -> None:
        if not directory.exists():
            logger.debug(f"Preset directory not found: {directory}")
            return

        for preset_file in sorted(directory.glob("*.yaml")):
            try:
                self._load_file(preset_file)
            except (OSError, yaml.YAMLError, ValidationError, ValueError, TypeError) as e:
                logger.warning(f"Skipping preset file {preset_file}: {e}")

    def _load_file(self, preset_file: Path) -> None:
        with open(preset_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError("expected a mapping with 'category' and 'presets'")

        category = data.get('category', preset_file.stem.replace('_', ' ').title())
        for item in data.get('presets', []):
            preset = ColorPreset(category=category, **item)
            if preset.id in self._presets:
                logger.debug(f"Preset '{preset.id}' overridden by {preset_file}")
            self._presets[preset.id] = preset

        logger.debug(f"Loaded presets from {preset_file}")

    def list_presets(self) -> List[ColorPreset]:
        return list(self._presets.values())

    def get_presets_by_category(self) -> Dict[str, List[ColorPreset]]:
        """Group presets by category, keeping load order."""
        grouped: Dict[str, List[ColorPreset]] = {}
        for preset in self._presets.values():
            grouped.setdefault(preset.category, []).append(preset)
        return grouped

    def get_preset_by_id(self, preset_id: str) -> Optional[ColorPreset]:
        return self._presets.get(preset_id)
