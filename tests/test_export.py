"""Tests for theme export."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from dresscode.color_engine import ButtonTextColor, ThemeMode
from dresscode.services import DesignSettings, ExportFormat, ExportManager, export_theme

GENERATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def manager():
    return ExportManager()


class TestCSSExport:
    """Tests for CSS custom properties."""

    def test_contains_colors_and_settings(self, manager, default_theme):
        css = manager.export_theme(default_theme, ExportFormat.CSS, generated_at=GENERATED_AT)

        assert css.startswith("/* DressCode Design System Export */")
        assert "/* Generated at 2024-01-01T00:00:00+00:00 */" in css
        assert ":root {" in css
        assert "--primary-h: 114;" in css
        assert "--primary-s: 100%;" in css
        assert "--comp-h: 294;" in css
        assert f"--color-primary-hex: {default_theme.primary_hex};" in css
        assert "--border-radius: 8px;" in css
        assert "--button-text-color: auto;" in css

    def test_ramps_labelled_10_to_90(self, manager, default_theme):
        css = manager.export_theme(default_theme, ExportFormat.CSS)

        assert f"--tint-10: {default_theme.tints[0]};" in css
        assert f"--shade-50: {default_theme.shades[4]};" in css
        assert f"--neutral-light-90: {default_theme.neutral_lighter[8]};" in css
        assert f"--neutral-dark-90: {default_theme.neutral_darker[8]};" in css
        assert "--tint-100" not in css


class TestSCSSExport:
    """Tests for SCSS variables."""

    def test_variables(self, manager, default_theme):
        scss = manager.export_theme(default_theme, ExportFormat.SCSS)

        assert "$primary-h: 114;" in scss
        assert "$comp-h: 294;" in scss
        assert f"$color-complementary-hex: {default_theme.complementary_hex};" in scss
        assert f"$tint-20: {default_theme.tints[1]};" in scss
        assert "$border-radius: 8px;" in scss


class TestTailwindExport:
    """Tests for the Tailwind config fragment."""

    def test_light_and_dark_variants(self, manager, default_theme):
        config = manager.export_theme(default_theme, ExportFormat.TAILWIND)

        assert "module.exports = {" in config
        assert f"DEFAULT: '{default_theme.primary_hex}'," in config
        assert f"light: '{default_theme.tints[2]}'," in config
        assert f"dark: '{default_theme.shades[2]}'," in config
        assert f"light: '{default_theme.tints[5]}'," in config
        assert f"dark: '{default_theme.shades[5]}'," in config
        assert "DEFAULT: '8px'," in config


class TestJSONExport:
    """Tests for JSON design tokens."""

    def test_document_structure(self, manager, default_theme):
        data = json.loads(manager.export_theme(
            default_theme, ExportFormat.JSON, generated_at=GENERATED_AT
        ))

        assert data["name"] == "DressCode Design System"
        assert data["generatedAt"] == "2024-01-01T00:00:00+00:00"
        assert data["color"]["primary"]["hex"] == default_theme.primary_hex
        assert data["color"]["primary"]["hsl"] == {"h": 114, "s": 100, "l": 58}
        assert data["color"]["complementary"]["hsl"]["h"] == 294
        assert list(data["color"]["tints"]) == [str(n) for n in range(10, 100, 10)]
        assert data["color"]["neutralDarker"]["90"] == default_theme.neutral_darker[8]
        assert data["spacing"]["borderRadius"] == 8
        assert data["settings"] == {"buttonTextColor": "auto", "mode": "light"}

    def test_custom_settings(self, default_theme):
        settings = DesignSettings(
            border_radius=12,
            button_text_color=ButtonTextColor.LIGHT,
            mode=ThemeMode.DARK,
        )
        data = json.loads(export_theme(default_theme, ExportFormat.JSON, settings))

        assert data["spacing"]["borderRadius"] == 12
        assert data["settings"] == {"buttonTextColor": "light", "mode": "dark"}

    def test_negative_radius_rejected(self):
        with pytest.raises(ValidationError):
            DesignSettings(border_radius=-1)


class TestExportManager:
    """Tests for format bookkeeping and file output."""

    def test_supported_formats(self, manager):
        assert manager.get_supported_formats() == ["css", "scss", "tailwind", "json"]

    def test_get_exporter(self, manager):
        assert manager.get_exporter(ExportFormat.TAILWIND).get_file_extension() == "js"
        with pytest.raises(ValueError):
            manager.get_exporter("pdf")

    @pytest.mark.parametrize("fmt,filename", [
        (ExportFormat.CSS, "dresscode-theme.css"),
        (ExportFormat.SCSS, "dresscode-theme.scss"),
        (ExportFormat.TAILWIND, "dresscode-theme.js"),
        (ExportFormat.JSON, "dresscode-theme.json"),
    ])
    def test_default_filename(self, manager, fmt, filename):
        assert manager.default_filename(fmt) == filename

    def test_write_to_file(self, manager, default_theme, tmp_path):
        output = tmp_path / "out" / "theme.css"

        content = manager.export_theme(default_theme, ExportFormat.CSS, output_path=str(output))

        assert output.read_text(encoding="utf-8") == content

    def test_export_is_deterministic_with_timestamp(self, manager, default_theme):
        first = manager.export_theme(default_theme, ExportFormat.SCSS, generated_at=GENERATED_AT)
        second = manager.export_theme(default_theme, ExportFormat.SCSS, generated_at=GENERATED_AT)
        assert first == second
