"""DressCode Color Engine Package.

This package provides the color core of the design-system tool: hex/HSL
conversion, tint, shade and neutral ramp generation, complementary hues,
WCAG contrast evaluation with accessible color suggestions, brand color
presets, and an undo/redo history for the working colors.
"""

from .schema import (
    # Core models
    HSL,
    HistoryEntry,
    ColorTheme,
    ContrastCheck,
    ColorSuggestion,
    ComplianceScore,

    # Enums
    TextTone,
    ButtonTextColor,
    ThemeMode,
    CheckType,

    # Constants
    PERCENTAGES,
    MAX_HISTORY_SIZE,
    DEFAULT_PRIMARY,
    DEFAULT_COMPLEMENTARY,
    DARK_TEXT_COLOR,
    LIGHT_TEXT_COLOR,
    WCAG_AA_RATIO,
    WCAG_AAA_RATIO,
)
from .convert import (
    normalize_hex,
    hex_to_rgb,
    rgb_to_hex,
    hex_to_hsl,
    hsl_to_rgb,
    hsl_to_hex,
    format_hsl,
)
from .palette import (
    get_complementary_color,
    generate_tints,
    generate_shades,
    generate_neutrals,
    build_color_theme,
)
from .accessibility import (
    get_relative_luminance,
    get_contrast_ratio,
    meets_wcag_aa,
    meets_wcag_aaa,
    get_accessible_text_color,
    text_tone_to_hex,
    suggest_accessible_color,
    check_contrast,
    resolve_text_color,
    evaluate_theme,
    compliance_score,
    suggest_for_failures,
)
from .history import ThemeHistory
from .presets import ColorPreset, PresetRegistry

__all__ = [
    # Models
    "HSL",
    "HistoryEntry",
    "ColorTheme",
    "ContrastCheck",
    "ColorSuggestion",
    "ComplianceScore",
    "ColorPreset",

    # Enums
    "TextTone",
    "ButtonTextColor",
    "ThemeMode",
    "CheckType",

    # Constants
    "PERCENTAGES",
    "MAX_HISTORY_SIZE",
    "DEFAULT_PRIMARY",
    "DEFAULT_COMPLEMENTARY",
    "DARK_TEXT_COLOR",
    "LIGHT_TEXT_COLOR",
    "WCAG_AA_RATIO",
    "WCAG_AAA_RATIO",

    # Conversion
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "format_hsl",

    # Palettes
    "get_complementary_color",
    "generate_tints",
    "generate_shades",
    "generate_neutrals",
    "build_color_theme",

    # Accessibility
    "get_relative_luminance",
    "get_contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "get_accessible_text_color",
    "text_tone_to_hex",
    "suggest_accessible_color",
    "check_contrast",
    "resolve_text_color",
    "evaluate_theme",
    "compliance_score",
    "suggest_for_failures",

    # State
    "ThemeHistory",
    "PresetRegistry",
]
