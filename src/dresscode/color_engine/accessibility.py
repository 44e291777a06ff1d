"""WCAG contrast evaluation and accessible color suggestions.

Uses the WCAG 2.x relative luminance and contrast ratio definitions:
AA requires 4.5:1 for body text, AAA requires 7:1.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .convert import hex_to_hsl, hex_to_rgb, hsl_to_hex, normalize_hex
from .schema import (
    DARK_TEXT_COLOR,
    LIGHT_TEXT_COLOR,
    WCAG_AA_RATIO,
    WCAG_AAA_RATIO,
    ButtonTextColor,
    CheckType,
    ColorSuggestion,
    ColorTheme,
    ComplianceScore,
    ContrastCheck,
    TextTone,
    ThemeMode,
)

logger = logging.getLogger(__name__)

# Background lightness deltas tried by suggest_accessible_color, in order
LIGHTEN_FIRST = [20, 15, 10, 5, -5, -10, -15, -20]
DARKEN_FIRST = [-20, -15, -10, -5, 5, 10, 15, 20]


def get_relative_luminance(hex_color: str) -> float:
    """Calculate relative luminance of a color.

    Args:
        hex_color: Hex color string

    Returns:
        Relative luminance 0.0-1.0

    Raises:
        ValueError: If hex_color is not a valid hex color
    """
    def gamma_decode(value: int) -> float:
        normalized = value / 255.0
        if normalized <= 0.03928:
            return normalized / 12.92
        return ((normalized + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * gamma_decode(r) + 0.7152 * gamma_decode(g) + 0.0722 * gamma_decode(b)


def get_contrast_ratio(color1: str, color2: str) -> float:
    """Calculate WCAG contrast ratio between two colors.

    The result does not depend on argument order.

    Returns:
        Contrast ratio 1.0-21.0 (higher is more contrast)
    """
    lum1 = get_relative_luminance(color1)
    lum2 = get_relative_luminance(color2)

    # Ensure lighter color is in numerator
    if lum1 < lum2:
        lum1, lum2 = lum2, lum1

    return (lum1 + 0.05) / (lum2 + 0.05)


def meets_wcag_aa(fg_color: str, bg_color: str) -> bool:
    return get_contrast_ratio(fg_color, bg_color) >= WCAG_AA_RATIO


def meets_wcag_aaa(fg_color: str, bg_color: str) -> bool:
    return get_contrast_ratio(fg_color, bg_color) >= WCAG_AAA_RATIO


def get_accessible_text_color(bg_color: str) -> TextTone:
    """Pick dark or light text for a background.

    Compares ``#111827`` and ``#FFFFFF`` against the background. Dark text is
    measured first and wins an exact tie.
    """
    dark_contrast = get_contrast_ratio(DARK_TEXT_COLOR, bg_color)
    light_contrast = get_contrast_ratio(LIGHT_TEXT_COLOR, bg_color)
    return TextTone.DARK if dark_contrast >= light_contrast else TextTone.LIGHT


def text_tone_to_hex(tone: TextTone) -> str:
    return DARK_TEXT_COLOR if tone == TextTone.DARK else LIGHT_TEXT_COLOR


def suggest_accessible_color(bg_color: str, text_color: str,
                             target_ratio: float = WCAG_AA_RATIO) -> Optional[ColorSuggestion]:
    """Suggest a background that gives ``text_color`` enough contrast.

    Adjusts the background's HSL lightness by a fixed set of deltas. If dark
    reference text reads better on the background, lightening is tried first;
    otherwise darkening is. The first delta reaching ``target_ratio`` wins,
    so this is a bounded greedy search rather than the closest possible color.

    Args:
        bg_color: Background hex color to adjust
        text_color: Foreground hex color that stays fixed
        target_ratio: Contrast ratio to reach

    Returns:
        ColorSuggestion, or None if the pair already passes or no delta works
    """
    current_ratio = get_contrast_ratio(text_color, bg_color)
    if current_ratio >= target_ratio:
        return None

    hsl = hex_to_hsl(bg_color)
    text_is_dark = (
        get_contrast_ratio(DARK_TEXT_COLOR, bg_color)
        > get_contrast_ratio(LIGHT_TEXT_COLOR, bg_color)
    )
    adjustments = LIGHTEN_FIRST if text_is_dark else DARKEN_FIRST

    for adjustment in adjustments:
        new_lightness = max(0.0, min(100.0, hsl.l + adjustment))
        new_color = hsl_to_hex(hsl.h, hsl.s, new_lightness)
        new_ratio = get_contrast_ratio(text_color, new_color)

        if new_ratio >= target_ratio:
            verb = "Lighten" if adjustment > 0 else "Darken"
            return ColorSuggestion(
                original=normalize_hex(bg_color),
                suggested=new_color,
                reason=f"{verb} background by {abs(adjustment)}%",
                improvement=new_ratio - current_ratio,
            )

    logger.debug(f"No lightness adjustment of {bg_color} reaches {target_ratio}:1 "
                 f"against {text_color}")
    return None


def check_contrast(foreground: str, background: str,
                   label: Optional[str] = None,
                   check_type: Optional[CheckType] = None) -> ContrastCheck:
    """Evaluate one foreground/background pair."""
    contrast = get_contrast_ratio(foreground, background)
    return ContrastCheck(
        foreground=normalize_hex(foreground),
        background=normalize_hex(background),
        contrast=contrast,
        meets_aa=contrast >= WCAG_AA_RATIO,
        meets_aaa=contrast >= WCAG_AAA_RATIO,
        label=label,
        check_type=check_type,
    )


def resolve_text_color(bg_color: str,
                       button_text_color: Union[ButtonTextColor, str] = ButtonTextColor.AUTO) -> str:
    """Return the hex text color used on a button with ``bg_color``."""
    preference = ButtonTextColor(button_text_color)
    if preference == ButtonTextColor.AUTO:
        return text_tone_to_hex(get_accessible_text_color(bg_color))
    if preference == ButtonTextColor.DARK:
        return DARK_TEXT_COLOR
    return LIGHT_TEXT_COLOR


def evaluate_theme(theme: ColorTheme,
                   mode: Union[ThemeMode, str] = ThemeMode.LIGHT,
                   button_text_color: Union[ButtonTextColor, str] = ButtonTextColor.AUTO
                   ) -> List[ContrastCheck]:
    """Run the standard set of contrast checks for a theme.

    Light surfaces are white in light mode and the darkest neutral in dark
    mode; dark surfaces are the darkest neutral in light mode and black in
    dark mode.
    """
    is_dark = ThemeMode(mode) == ThemeMode.DARK
    primary_hex = theme.primary_hex
    comp_hex = theme.complementary_hex
    darkest_neutral = theme.neutral_darker[-1]

    bg_light = darkest_neutral if is_dark else "#FFFFFF"
    bg_dark = "#000000" if is_dark else darkest_neutral

    primary_text = resolve_text_color(primary_hex, button_text_color)
    comp_text = resolve_text_color(comp_hex, button_text_color)

    checks = [
        check_contrast(primary_text, primary_hex, "Primary Button", CheckType.BUTTON),
        check_contrast(comp_text, comp_hex, "Complementary Button", CheckType.BUTTON),
        check_contrast(primary_hex, bg_light, "Primary Text on Light", CheckType.TEXT),
        check_contrast(comp_hex, bg_light, "Complementary Text on Light", CheckType.TEXT),
        check_contrast(primary_hex, bg_dark, "Primary Text on Dark", CheckType.TEXT),
        check_contrast(comp_hex, bg_dark, "Complementary Text on Dark", CheckType.TEXT),
        check_contrast(primary_hex, bg_light, "Primary Link", CheckType.LINK),
    ]
    logger.debug(f"Evaluated {len(checks)} contrast checks in {ThemeMode(mode).value} mode")
    return checks


def compliance_score(checks: Sequence[ContrastCheck]) -> ComplianceScore:
    """Count how many checks pass AA and AAA."""
    total = len(checks)
    passing_aa = sum(1 for check in checks if check.meets_aa)
    passing_aaa = sum(1 for check in checks if check.meets_aaa)

    def percentage(count: int) -> int:
        if total == 0:
            return 0
        return int(count / total * 100 + 0.5)

    return ComplianceScore(
        total=total,
        passing_aa=passing_aa,
        passing_aaa=passing_aaa,
        percentage_aa=percentage(passing_aa),
        percentage_aaa=percentage(passing_aaa),
    )


def suggest_for_failures(checks: Sequence[ContrastCheck],
                         target_ratio: float = WCAG_AA_RATIO
                         ) -> List[Tuple[ContrastCheck, ColorSuggestion]]:
    """Pair each check failing AA with a background suggestion, if one exists."""
    results = []
    for check in checks:
        if check.meets_aa:
            continue
        suggestion = suggest_accessible_color(check.background, check.foreground, target_ratio)
        if suggestion:
            results.append((check, suggestion))
    return results
