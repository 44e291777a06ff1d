"""Palette generation from a base color.

Tints and shades blend each RGB channel toward white or black. Neutral ramps
keep the base hue but shed saturation as they approach the anchor, so the
far end of the ramp reads as gray rather than as a pale or dark tone of the
brand color.
"""

import logging
from typing import List, Sequence

from .convert import hex_to_hsl, hex_to_rgb, hsl_to_hex, normalize_hex, rgb_to_hex
from .schema import HSL, PERCENTAGES, ColorTheme

logger = logging.getLogger(__name__)

WHITE = "#FFFFFF"
BLACK = "#000000"

_ANCHOR_LIGHTNESS = {WHITE: 100.0, BLACK: 0.0}


def get_complementary_color(hue: float) -> float:
    """Return the hue opposite ``hue`` on the color wheel."""
    return (hue + 180) % 360


def _require_hex(base_hex: str) -> str:
    normalized = normalize_hex(base_hex)
    if normalized is None:
        raise ValueError(f"Invalid base color: {base_hex!r}")
    return normalized


def _fraction(percentage: float) -> float:
    return max(0.0, min(100.0, float(percentage))) / 100.0


def _blend_rgb(base_hex: str, percentages: Sequence[float], anchor: int) -> List[str]:
    """Move every channel toward ``anchor`` (0 or 255) by each percentage."""
    r, g, b = hex_to_rgb(base_hex)
    colors = []
    for percentage in percentages:
        t = _fraction(percentage)
        colors.append(rgb_to_hex(
            r + (anchor - r) * t,
            g + (anchor - g) * t,
            b + (anchor - b) * t,
        ))
    return colors


def generate_tints(base_hex: str, percentages: Sequence[float]) -> List[str]:
    """Generate tints by mixing the base color toward white.

    Args:
        base_hex: Base color as hex
        percentages: Mix amounts 0-100, output keeps this order

    Returns:
        List of hex colors, one per percentage

    Raises:
        ValueError: If base_hex is not a valid hex color
    """
    return _blend_rgb(_require_hex(base_hex), percentages, 255)


def generate_shades(base_hex: str, percentages: Sequence[float]) -> List[str]:
    """Generate shades by mixing the base color toward black.

    Raises:
        ValueError: If base_hex is not a valid hex color
    """
    return _blend_rgb(_require_hex(base_hex), percentages, 0)


def generate_neutrals(base_hex: str, percentages: Sequence[float],
                      target: str = WHITE) -> List[str]:
    """Generate a neutral ramp from the base hue toward white or black.

    Lightness moves toward the anchor's lightness and saturation drops in
    the same proportion, so 0% is the base color and 100% is the anchor.

    Args:
        base_hex: Base color as hex
        percentages: Ramp positions 0-100
        target: Anchor color, ``#FFFFFF`` or ``#000000``

    Raises:
        ValueError: If base_hex is invalid or target is not white or black
    """
    base = _require_hex(base_hex)
    anchor = normalize_hex(target)
    if anchor not in _ANCHOR_LIGHTNESS:
        raise ValueError(f"Neutral target must be {WHITE} or {BLACK}, got {target!r}")

    anchor_lightness = _ANCHOR_LIGHTNESS[anchor]
    base_hsl = hex_to_hsl(base)

    colors = []
    for percentage in percentages:
        t = _fraction(percentage)
        if t == 0:
            colors.append(base)
        elif t == 1:
            colors.append(anchor)
        else:
            lightness = base_hsl.l + (anchor_lightness - base_hsl.l) * t
            saturation = base_hsl.s * (1 - t)
            colors.append(hsl_to_hex(base_hsl.h, saturation, lightness))
    return colors


def build_color_theme(primary: HSL, complementary: HSL,
                      percentages: Sequence[float] = PERCENTAGES) -> ColorTheme:
    """Derive the full color theme from the primary/complementary pair.

    All four ramps come from the primary color.
    """
    primary_hex = primary.to_hex()
    theme = ColorTheme(
        primary=primary,
        complementary=complementary,
        tints=generate_tints(primary_hex, percentages),
        shades=generate_shades(primary_hex, percentages),
        neutral_lighter=generate_neutrals(primary_hex, percentages, WHITE),
        neutral_darker=generate_neutrals(primary_hex, percentages, BLACK),
    )
    logger.debug(f"Built color theme for primary {primary_hex}")
    return theme
