"""DressCode - design-system color engine.

Pick a primary brand color, derive its complementary color and tonal
palettes, check WCAG contrast, and export design tokens.
"""

from .color_engine import (
    HSL,
    ColorTheme,
    ThemeHistory,
    build_color_theme,
    get_contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hex,
)

__version__ = "1.0.0"

__all__ = [
    "HSL",
    "ColorTheme",
    "ThemeHistory",
    "build_color_theme",
    "get_contrast_ratio",
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_hex",
    "__version__",
]
