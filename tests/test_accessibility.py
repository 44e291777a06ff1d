"""Tests for WCAG contrast evaluation and suggestions."""

import pytest

from dresscode.color_engine import (
    ButtonTextColor,
    CheckType,
    ContrastCheck,
    TextTone,
    ThemeMode,
    check_contrast,
    compliance_score,
    evaluate_theme,
    get_accessible_text_color,
    get_contrast_ratio,
    get_relative_luminance,
    meets_wcag_aa,
    meets_wcag_aaa,
    resolve_text_color,
    suggest_accessible_color,
    suggest_for_failures,
    text_tone_to_hex,
)
from dresscode.color_engine import accessibility


class TestContrastRatio:
    """Tests for luminance and contrast ratio."""

    def test_luminance_extremes(self):
        assert get_relative_luminance("#FFFFFF") == pytest.approx(1.0)
        assert get_relative_luminance("#000000") == pytest.approx(0.0)

    def test_black_on_white(self):
        assert get_contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)

    @pytest.mark.parametrize("a,b", [
        ("#3B82F6", "#FFFFFF"),
        ("#111827", "#F59E0B"),
        ("#777777", "#000000"),
    ])
    def test_symmetric(self, a, b):
        assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)

    @pytest.mark.parametrize("color", ["#000000", "#3B82F6", "#FFFFFF"])
    def test_same_color_is_one(self, color):
        assert get_contrast_ratio(color, color) == pytest.approx(1.0)

    def test_invalid_color_raises(self):
        with pytest.raises(ValueError):
            get_contrast_ratio("#FFFFFF", "white")

    def test_wcag_thresholds(self):
        assert meets_wcag_aa("#767676", "#FFFFFF")
        assert not meets_wcag_aa("#777777", "#FFFFFF")
        assert meets_wcag_aaa("#000000", "#FFFFFF")
        assert not meets_wcag_aaa("#767676", "#FFFFFF")


class TestAccessibleTextColor:
    """Tests for dark/light text selection."""

    def test_extremes(self):
        assert get_accessible_text_color("#FFFFFF") == TextTone.DARK
        assert get_accessible_text_color("#000000") == TextTone.LIGHT

    def test_brand_blue_takes_dark_text(self):
        assert get_accessible_text_color("#3B82F6") == TextTone.DARK

    def test_tie_goes_to_dark(self, monkeypatch):
        # No real color pair gives exactly equal ratios, so force one.
        # Dark text is measured first and wins the tie.
        monkeypatch.setattr(accessibility, "get_contrast_ratio", lambda a, b: 3.0)
        assert get_accessible_text_color("#808080") == TextTone.DARK

    def test_tone_hex(self):
        assert text_tone_to_hex(TextTone.DARK) == "#111827"
        assert text_tone_to_hex(TextTone.LIGHT) == "#FFFFFF"

    def test_resolve_text_color(self):
        assert resolve_text_color("#000000") == "#FFFFFF"
        assert resolve_text_color("#000000", ButtonTextColor.DARK) == "#111827"
        assert resolve_text_color("#FFFFFF", "light") == "#FFFFFF"


class TestSuggestAccessibleColor:
    """Tests for background suggestions."""

    def test_passing_pair_has_no_suggestion(self):
        assert suggest_accessible_color("#000000", "#FFFFFF") is None

    def test_custom_target(self):
        assert suggest_accessible_color("#777777", "#FFFFFF", 3.0) is None

    def test_darkens_background_for_white_text(self):
        suggestion = suggest_accessible_color("#777777", "#FFFFFF")

        assert suggestion is not None
        assert suggestion.original == "#777777"
        assert suggestion.suggested == "#444444"
        assert suggestion.reason == "Darken background by 20%"
        assert suggestion.improvement > 0
        assert get_contrast_ratio("#FFFFFF", suggestion.suggested) >= 4.5

    def test_lightens_background_for_dark_text(self):
        suggestion = suggest_accessible_color("#3B82F6", "#111827", 7.0)

        assert suggestion is not None
        assert suggestion.reason == "Lighten background by 20%"
        assert get_contrast_ratio("#111827", suggestion.suggested) >= 7.0

    def test_unreachable_target(self):
        assert suggest_accessible_color("#808080", "#808080", 21.0) is None

    def test_original_is_normalized(self):
        suggestion = suggest_accessible_color("777", "#fff")
        assert suggestion.original == "#777777"


class TestCheckContrast:
    """Tests for single contrast checks."""

    def test_check_fields(self):
        check = check_contrast("#fff", "#000", "Sample", CheckType.TEXT)

        assert check.foreground == "#FFFFFF"
        assert check.background == "#000000"
        assert check.contrast == pytest.approx(21.0)
        assert check.meets_aa
        assert check.meets_aaa
        assert check.status == "AAA"
        assert check.label == "Sample"

    def test_status_levels(self):
        assert check_contrast("#767676", "#FFFFFF").status == "AA"
        assert check_contrast("#777777", "#FFFFFF").status == "Fail"


class TestEvaluateTheme:
    """Tests for the theme report."""

    LABELS = [
        "Primary Button",
        "Complementary Button",
        "Primary Text on Light",
        "Complementary Text on Light",
        "Primary Text on Dark",
        "Complementary Text on Dark",
        "Primary Link",
    ]

    def test_seven_labelled_checks(self, default_theme):
        checks = evaluate_theme(default_theme)
        assert [c.label for c in checks] == self.LABELS
        assert [c.check_type for c in checks] == [
            CheckType.BUTTON, CheckType.BUTTON,
            CheckType.TEXT, CheckType.TEXT, CheckType.TEXT, CheckType.TEXT,
            CheckType.LINK,
        ]

    def test_light_mode_backgrounds(self, default_theme):
        checks = {c.label: c for c in evaluate_theme(default_theme, ThemeMode.LIGHT)}

        assert checks["Primary Text on Light"].background == "#FFFFFF"
        assert checks["Primary Text on Dark"].background == default_theme.neutral_darker[-1]
        assert checks["Primary Button"].background == default_theme.primary_hex
        assert checks["Primary Link"].contrast == checks["Primary Text on Light"].contrast

    def test_dark_mode_backgrounds(self, default_theme):
        checks = {c.label: c for c in evaluate_theme(default_theme, "dark")}

        assert checks["Primary Text on Light"].background == default_theme.neutral_darker[-1]
        assert checks["Complementary Text on Dark"].background == "#000000"

    def test_forced_button_text(self, default_theme):
        checks = evaluate_theme(default_theme, ThemeMode.LIGHT, ButtonTextColor.LIGHT)
        assert checks[0].foreground == "#FFFFFF"
        assert checks[1].foreground == "#FFFFFF"


def _check(contrast):
    return ContrastCheck(
        foreground="#000000",
        background="#FFFFFF",
        contrast=contrast,
        meets_aa=contrast >= 4.5,
        meets_aaa=contrast >= 7.0,
    )


class TestComplianceScore:
    """Tests for the compliance summary."""

    def test_counts_and_percentages(self):
        score = compliance_score([_check(8.0), _check(5.0), _check(2.0)])

        assert score.total == 3
        assert score.passing_aa == 2
        assert score.passing_aaa == 1
        assert score.percentage_aa == 67
        assert score.percentage_aaa == 33

    def test_empty(self):
        score = compliance_score([])
        assert score.total == 0
        assert score.percentage_aa == 0
        assert score.percentage_aaa == 0

    def test_suggest_for_failures_skips_passing(self):
        failing = check_contrast("#FFFFFF", "#777777", "Button")
        passing = check_contrast("#FFFFFF", "#000000", "Text")

        results = suggest_for_failures([passing, failing])

        assert len(results) == 1
        check, suggestion = results[0]
        assert check.label == "Button"
        assert suggestion.suggested == "#444444"
