"""Data models for the DressCode color engine.

This module defines the Pydantic models that carry color state through the
engine: HSL colors, history snapshots, the derived color theme, and the
results produced by the accessibility evaluator.
"""

import math
from typing import List, Optional, Tuple
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Ramp stops shared by tints, shades and both neutral ramps
PERCENTAGES: List[int] = [5, 20, 30, 40, 50, 60, 70, 80, 90]

MAX_HISTORY_SIZE = 50

DARK_TEXT_COLOR = "#111827"
LIGHT_TEXT_COLOR = "#FFFFFF"

WCAG_AA_RATIO = 4.5
WCAG_AAA_RATIO = 7.0


class TextTone(str, Enum):
    """Text tone chosen for a background"""
    DARK = "dark"
    LIGHT = "light"


class ButtonTextColor(str, Enum):
    """Button text color preference"""
    DARK = "dark"
    LIGHT = "light"
    AUTO = "auto"


class ThemeMode(str, Enum):
    """Surrounding UI mode used when evaluating contrast"""
    LIGHT = "light"
    DARK = "dark"


class CheckType(str, Enum):
    """Kind of element a contrast check describes"""
    TEXT = "text"
    BUTTON = "button"
    LINK = "link"


def _finite(value) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"must be a finite number, got {value!r}")
    return number


def format_number(value: float) -> str:
    """Format a channel value without trailing zeros."""
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


class HSL(BaseModel):
    """Hue/saturation/lightness color.

    Hue wraps into [0, 360); saturation and lightness are clamped to
    [0, 100]. Out-of-range input is normalized rather than rejected;
    NaN and infinity raise a ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(..., description="Hue in degrees")
    s: float = Field(..., description="Saturation percentage")
    l: float = Field(..., description="Lightness percentage")

    @field_validator('h', mode='before')
    @classmethod
    def wrap_hue(cls, v):
        hue = _finite(v) % 360
        # -1e-20 % 360 rounds up to 360.0
        return 0.0 if hue >= 360 else hue

    @field_validator('s', 'l', mode='before')
    @classmethod
    def clamp_percentage(cls, v):
        return max(0.0, min(100.0, _finite(v)))

    @classmethod
    def of(cls, h: float, s: float, l: float) -> 'HSL':
        """Build an HSL color from positional components."""
        return cls(h=h, s=s, l=l)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.h, self.s, self.l)

    def to_hex(self) -> str:
        from .convert import hsl_to_hex
        return hsl_to_hex(self.h, self.s, self.l)

    def to_css(self) -> str:
        """Render as a CSS ``hsl()`` function."""
        return (
            f"hsl({format_number(self.h)}, "
            f"{format_number(self.s)}%, {format_number(self.l)}%)"
        )


DEFAULT_PRIMARY = HSL(h=114, s=100, l=58)
DEFAULT_COMPLEMENTARY = HSL(h=294, s=100, l=58)


class HistoryEntry(BaseModel):
    """Immutable snapshot of the primary/complementary pair"""

    model_config = ConfigDict(frozen=True)

    primary: HSL
    complementary: HSL


class ColorTheme(BaseModel):
    """Palette projection derived from the primary and complementary colors.

    Every ramp is index-aligned with ``PERCENTAGES``.
    """

    model_config = ConfigDict(frozen=True)

    primary: HSL
    complementary: HSL
    tints: List[str] = Field(default_factory=list)
    shades: List[str] = Field(default_factory=list)
    neutral_lighter: List[str] = Field(default_factory=list)
    neutral_darker: List[str] = Field(default_factory=list)

    @property
    def primary_hex(self) -> str:
        return self.primary.to_hex()

    @property
    def complementary_hex(self) -> str:
        return self.complementary.to_hex()

    def ramps(self) -> List[Tuple[str, List[str]]]:
        """Return the four ramps with their display names."""
        return [
            ("tints", self.tints),
            ("shades", self.shades),
            ("neutral_lighter", self.neutral_lighter),
            ("neutral_darker", self.neutral_darker),
        ]


class ContrastCheck(BaseModel):
    """Result of comparing a foreground color against a background"""

    foreground: str
    background: str
    contrast: float
    meets_aa: bool
    meets_aaa: bool
    label: Optional[str] = None
    check_type: Optional[CheckType] = None

    @property
    def status(self) -> str:
        if self.meets_aaa:
            return "AAA"
        if self.meets_aa:
            return "AA"
        return "Fail"


class ColorSuggestion(BaseModel):
    """Background adjustment that reaches a target contrast ratio"""

    original: str
    suggested: str
    reason: str
    improvement: float


class ComplianceScore(BaseModel):
    """Summary of a set of contrast checks"""

    total: int
    passing_aa: int
    passing_aaa: int
    percentage_aa: int
    percentage_aaa: int
