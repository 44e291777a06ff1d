"""Input validation for user-supplied colors.

The color engine signals malformed hex with ``None``. These helpers turn
that into an exception carrying a user-facing message and suggestions, for
front ends that report errors rather than silently keeping the old state.
"""

from typing import Any, List, Optional

from ..color_engine import normalize_hex


class ColorValidationError(Exception):
    """Exception raised when a color input cannot be used."""

    def __init__(self, message: str, field_name: str, value: Any,
                 suggestions: Optional[List[str]] = None):
        self.field_name = field_name
        self.value = value
        self.suggestions = suggestions or []
        super().__init__(message)


def require_hex(value: Any, field_name: str = "color") -> str:
    """Normalize a hex color or raise.

    Args:
        value: Raw user input
        field_name: Name used in the error message

    Returns:
        Normalized ``#RRGGBB`` string

    Raises:
        ColorValidationError: If value is not a 3- or 6-digit hex color
    """
    normalized = normalize_hex(value)
    if normalized is None:
        raise ColorValidationError(
            f"Invalid {field_name}: {value!r} is not a hex color",
            field_name,
            value,
            [
                "Use 6 hex digits, e.g. #3B82F6",
                "Use the 3-digit short form, e.g. #38F",
                "Digits must be 0-9 and A-F",
            ],
        )
    return normalized

