"""Color space conversion between hex strings, RGB triples and HSL.

Hex input from users is untrusted: ``normalize_hex`` and ``hex_to_hsl``
return ``None`` for malformed strings instead of raising. Hex output is
always six uppercase digits with a leading ``#``.
"""

import colorsys
import logging
import re
from typing import Any, Optional, Tuple

from .schema import HSL, format_number

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})')


def _round_channel(value: float) -> int:
    """Round half up and clamp into the 0-255 channel range."""
    return max(0, min(255, int(value + 0.5)))


def normalize_hex(value: Any) -> Optional[str]:
    """Normalize user hex input to ``#RRGGBB``.

    Trims whitespace, adds a missing ``#`` and expands the 3-digit short
    form. Returns None for anything that is not 3 or 6 hex digits.

    Args:
        value: Raw input, typically free text or pasted content

    Returns:
        Normalized uppercase hex string, or None if invalid
    """
    if not isinstance(value, str):
        return None

    match = _HEX_RE.fullmatch(value.strip())
    if not match:
        logger.debug(f"Rejected hex input: {value!r}")
        return None

    digits = match.group(1).upper()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000', 'f00')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        ValueError: If hex_color is not a valid hex color
    """
    normalized = normalize_hex(hex_color)
    if normalized is None:
        raise ValueError(f"Invalid hex color: {hex_color}")

    return (
        int(normalized[1:3], 16),
        int(normalized[3:5], 16),
        int(normalized[5:7], 16),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB values to an uppercase hex color string.

    Fractional channels are rounded half up; values are clamped to 0-255.
    """
    return f"#{_round_channel(r):02X}{_round_channel(g):02X}{_round_channel(b):02X}"


def hex_to_hsl(hex_color: Any) -> Optional[HSL]:
    """Convert a hex color to HSL.

    Accepts 3- or 6-digit hex with an optional leading ``#``. Components keep
    full float precision so converting back reproduces the same channels.

    Returns:
        HSL color, or None if the input is not a valid hex color
    """
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return None

    r, g, b = hex_to_rgb(normalized)
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return HSL(h=h * 360.0, s=s * 100.0, l=l * 100.0)


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL components to an RGB tuple.

    Hue wraps modulo 360 (negative values wrap positive); saturation and
    lightness are clamped to [0, 100].
    """
    color = HSL(h=h, s=s, l=l)
    r, g, b = colorsys.hls_to_rgb(color.h / 360.0, color.l / 100.0, color.s / 100.0)
    return (_round_channel(r * 255), _round_channel(g * 255), _round_channel(b * 255))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL components to an uppercase ``#RRGGBB`` string."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def format_hsl(color: HSL) -> str:
    """Format an HSL color as plain ``h, s%, l%`` text for copying."""
    return f"{format_number(color.h)}, {format_number(color.s)}%, {format_number(color.l)}%"
