"""
Theme Export for DressCode

This module serializes a color theme into design-token formats: CSS custom
properties, SCSS variables, a Tailwind config fragment, and a JSON design
tokens document. Ramp stops are labelled 10 through 90.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..color_engine import ButtonTextColor, ColorTheme, HSL, ThemeMode
from ..color_engine.schema import format_number

logger = logging.getLogger(__name__)

SYSTEM_NAME = "DressCode Design System"


class ExportFormat(Enum):
    """Supported export formats"""
    CSS = "css"
    SCSS = "scss"
    TAILWIND = "tailwind"
    JSON = "json"


class DesignSettings(BaseModel):
    """Design-system settings exported alongside the colors"""
    border_radius: int = Field(8, ge=0)
    button_text_color: ButtonTextColor = ButtonTextColor.AUTO
    mode: ThemeMode = ThemeMode.LIGHT


def _step_label(index: int) -> int:
    return (index + 1) * 10


def _labelled(colors: List[str]) -> Dict[str, str]:
    return {str(_step_label(i)): color for i, color in enumerate(colors)}


def _timestamp(generated_at: Optional[datetime]) -> str:
    return (generated_at or datetime.now(timezone.utc)).isoformat()


class BaseExporter(ABC):
    """Abstract base class for theme exporters"""

    @abstractmethod
    def export_theme(self, theme: ColorTheme, settings: DesignSettings,
                     generated_at: Optional[datetime] = None) -> str:
        """Export theme to string format"""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get recommended file extension"""
        pass


class CSSExporter(BaseExporter):
    """Export to CSS custom properties"""

    def _color_block(self, prefix: str, name: str, title: str, color: HSL) -> List[str]:
        return [
            f"  /* {title} */",
            f"  --{prefix}-h: {format_number(color.h)};",
            f"  --{prefix}-s: {format_number(color.s)}%;",
            f"  --{prefix}-l: {format_number(color.l)}%;",
            f"  --color-{name}: hsl(var(--{prefix}-h), var(--{prefix}-s), var(--{prefix}-l));",
            f"  --color-{name}-hex: {color.to_hex()};",
        ]

    def _ramp_block(self, title: str, prefix: str, colors: List[str]) -> List[str]:
        lines = [f"  /* {title} */"]
        lines.extend(f"  --{prefix}-{_step_label(i)}: {color};" for i, color in enumerate(colors))
        return lines

    def export_theme(self, theme: ColorTheme, settings: DesignSettings,
                     generated_at: Optional[datetime] = None) -> str:
        lines = [
            f"/* {SYSTEM_NAME} Export */",
            f"/* Generated at {_timestamp(generated_at)} */",
            "",
            ":root {",
        ]
        lines += self._color_block("primary", "primary", "Primary Color", theme.primary)
        lines.append("")
        lines += self._color_block("comp", "complementary", "Complementary Color", theme.complementary)
        lines += [
            "",
            "  /* Design System Settings */",
            f"  --border-radius: {settings.border_radius}px;",
            f"  --button-text-color: {settings.button_text_color.value};",
            "",
        ]
        lines += self._ramp_block("Lighter Tones (Tints)", "tint", theme.tints)
        lines.append("")
        lines += self._ramp_block("Darker Tones (Shades)", "shade", theme.shades)
        lines.append("")
        lines += self._ramp_block("Neutral Lighter", "neutral-light", theme.neutral_lighter)
        lines.append("")
        lines += self._ramp_block("Neutral Darker", "neutral-dark", theme.neutral_darker)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def get_file_extension(self) -> str:
        return "css"


class SCSSExporter(BaseExporter):
    """Export to SCSS variables"""

    def _color_block(self, prefix: str, name: str, title: str, color: HSL) -> List[str]:
        return [
            f"// {title}",
            f"${prefix}-h: {format_number(color.h)};",
            f"${prefix}-s: {format_number(color.s)}%;",
            f"${prefix}-l: {format_number(color.l)}%;",
            f"$color-{name}: hsl(${prefix}-h, ${prefix}-s, ${prefix}-l);",
            f"$color-{name}-hex: {color.to_hex()};",
        ]

    def _ramp_block(self, title: str, prefix: str, colors: List[str]) -> List[str]:
        lines = [f"// {title}"]
        lines.extend(f"${prefix}-{_step_label(i)}: {color};" for i, color in enumerate(colors))
        return lines

    def export_theme(self, theme: ColorTheme, settings: DesignSettings,
                     generated_at: Optional[datetime] = None) -> str:
        lines = [
            f"// {SYSTEM_NAME} Export (SCSS)",
            f"// Generated at {_timestamp(generated_at)}",
            "",
        ]
        lines += self._color_block("primary", "primary", "Primary Color", theme.primary)
        lines.append("")
        lines += self._color_block("comp", "complementary", "Complementary Color", theme.complementary)
        lines += [
            "",
            "// Design System Settings",
            f"$border-radius: {settings.border_radius}px;",
            f"$button-text-color: {settings.button_text_color.value};",
            "",
        ]
        lines += self._ramp_block("Lighter Tones (Tints)", "tint", theme.tints)
        lines.append("")
        lines += self._ramp_block("Darker Tones (Shades)", "shade", theme.shades)
        lines.append("")
        lines += self._ramp_block("Neutral Lighter", "neutral-light", theme.neutral_lighter)
        lines.append("")
        lines += self._ramp_block("Neutral Darker", "neutral-dark", theme.neutral_darker)
        return "\n".join(lines) + "\n"

    def get_file_extension(self) -> str:
        return "scss"


class TailwindExporter(BaseExporter):
    """Export to a tailwind.config.js fragment"""

    def _ramp_entries(self, colors: List[str], indent: str) -> List[str]:
        return [f"{indent}{_step_label(i)}: '{color}'," for i, color in enumerate(colors)]

    @staticmethod
    def _pick(colors: List[str], index: int, fallback: str) -> str:
        return colors[index] if index < len(colors) else fallback

    def export_theme(self, theme: ColorTheme, settings: DesignSettings,
                     generated_at: Optional[datetime] = None) -> str:
        primary_hex = theme.primary_hex
        comp_hex = theme.complementary_hex

        lines = [
            f"// {SYSTEM_NAME} - Tailwind Config",
            f"// Generated at {_timestamp(generated_at)}",
            "",
            "/** @type {import('tailwindcss').Config} */",
            "module.exports = {",
            "  theme: {",
            "    extend: {",
            "      colors: {",
            "        primary: {",
            f"          DEFAULT: '{primary_hex}',",
            f"          light: '{self._pick(theme.tints, 2, primary_hex)}',",
            f"          dark: '{self._pick(theme.shades, 2, primary_hex)}',",
            "        },",
            "        complementary: {",
            f"          DEFAULT: '{comp_hex}',",
            f"          light: '{self._pick(theme.tints, 5, comp_hex)}',",
            f"          dark: '{self._pick(theme.shades, 5, comp_hex)}',",
            "        },",
            "        tint: {",
        ]
        lines += self._ramp_entries(theme.tints, "          ")
        lines += ["        },", "        shade: {"]
        lines += self._ramp_entries(theme.shades, "          ")
        lines += ["        },", "        neutral: {", "          light: {"]
        lines += self._ramp_entries(theme.neutral_lighter, "            ")
        lines += ["          },", "          dark: {"]
        lines += self._ramp_entries(theme.neutral_darker, "            ")
        lines += [
            "          },",
            "        },",
            "      },",
            "      borderRadius: {",
            f"        DEFAULT: '{settings.border_radius}px',",
            "      },",
            "    },",
            "  },",
            "}",
        ]
        return "\n".join(lines) + "\n"

    def get_file_extension(self) -> str:
        return "js"


class JSONExporter(BaseExporter):
    """Export to a JSON design tokens document"""

    @staticmethod
    def _color_token(color: HSL) -> Dict[str, object]:
        return {
            'hsl': {
                'h': round(color.h, 2),
                's': round(color.s, 2),
                'l': round(color.l, 2),
            },
            'hex': color.to_hex(),
        }

    def export_theme(self, theme: ColorTheme, settings: DesignSettings,
                     generated_at: Optional[datetime] = None) -> str:
        tokens = {
            '$schema': "https://design-tokens.github.io/community-group/format/",
            'name': SYSTEM_NAME,
            'generatedAt': _timestamp(generated_at),
            'color': {
                'primary': self._color_token(theme.primary),
                'complementary': self._color_token(theme.complementary),
                'tints': _labelled(theme.tints),
                'shades': _labelled(theme.shades),
                'neutralLighter': _labelled(theme.neutral_lighter),
                'neutralDarker': _labelled(theme.neutral_darker),
            },
            'spacing': {
                'borderRadius': settings.border_radius,
            },
            'settings': {
                'buttonTextColor': settings.button_text_color.value,
                'mode': settings.mode.value,
            },
        }
        return json.dumps(tokens, indent=2, ensure_ascii=False)

    def get_file_extension(self) -> str:
        return "json"


class ExportManager:
    """Manages export formats and writing exports to disk"""

    def __init__(self):
        self.exporters: Dict[ExportFormat, BaseExporter] = {
            ExportFormat.CSS: CSSExporter(),
            ExportFormat.SCSS: SCSSExporter(),
            ExportFormat.TAILWIND: TailwindExporter(),
            ExportFormat.JSON: JSONExporter(),
        }

    def export_theme(
        self,
        theme: ColorTheme,
        format: ExportFormat,
        settings: Optional[DesignSettings] = None,
        output_path: Optional[str] = None,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Export a theme in the specified format, optionally writing it to a file"""
        content = self.get_exporter(format).export_theme(
            theme, settings or DesignSettings(), generated_at
        )

        if output_path:
            self._write_to_file(content, output_path)
            logger.info(f"Exported {format.value} theme to {output_path}")

        return content

    def get_exporter(self, format: ExportFormat) -> BaseExporter:
        """Get the exporter for a format"""
        if format not in self.exporters:
            raise ValueError(f"Export format {format} not supported")
        return self.exporters[format]

    def get_supported_formats(self) -> List[str]:
        """Get list of supported format names"""
        return [fmt.value for fmt in self.exporters.keys()]

    def get_file_extension(self, format: ExportFormat) -> str:
        """Get recommended file extension for format"""
        if format not in self.exporters:
            return "txt"
        return self.exporters[format].get_file_extension()

    def default_filename(self, format: ExportFormat) -> str:
        return f"dresscode-theme.{self.get_file_extension(format)}"

    def _write_to_file(self, content: str, file_path: str):
        """Write content to file"""
        dir_path = os.path.dirname(file_path)
        if dir_path:  # Only create directory if there is one
            os.makedirs(dir_path, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)


def export_theme(theme: ColorTheme, format: ExportFormat,
                 settings: Optional[DesignSettings] = None) -> str:
    """Export a theme without writing to disk"""
    return ExportManager().export_theme(theme, format, settings)
