"""Undo/redo history for the primary and complementary colors.

``ThemeHistory`` owns the only mutable color state in the engine. The
current colors are always the entry under the cursor; every edit truncates
the redo tail, appends a snapshot and moves the cursor to the end. The log
holds at most ``MAX_HISTORY_SIZE`` entries, dropping the oldest first.

A history instance has a single owner and no locking. Wrap it in a lock if
it is ever shared between threads.
"""

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .convert import hex_to_hsl
from .palette import build_color_theme, get_complementary_color
from .schema import (
    DEFAULT_COMPLEMENTARY,
    DEFAULT_PRIMARY,
    HSL,
    MAX_HISTORY_SIZE,
    ColorTheme,
    HistoryEntry,
)

logger = logging.getLogger(__name__)


class ThemeHistory:
    """Color state machine with bounded linear history."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        """Initialize with the default colors as the only entry.

        Args:
            max_size: Maximum number of snapshots retained
        """
        if max_size < 1:
            raise ValueError("History size must be at least 1")

        self.max_size = max_size
        self._entries: Deque[HistoryEntry] = deque(maxlen=max_size)
        self._index = 0
        self._theme: Optional[ColorTheme] = None
        self._entries.append(self._default_entry())

    @staticmethod
    def _default_entry() -> HistoryEntry:
        return HistoryEntry(primary=DEFAULT_PRIMARY, complementary=DEFAULT_COMPLEMENTARY)

    # State access

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def primary(self) -> HSL:
        return self.current.primary

    @property
    def complementary(self) -> HSL:
        return self.current.complementary

    @property
    def history_index(self) -> int:
        return self._index

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def theme(self) -> ColorTheme:
        """Palette projection of the current colors."""
        if self._theme is None:
            self._theme = build_color_theme(self.primary, self.complementary)
        return self._theme

    def __len__(self) -> int:
        return len(self._entries)

    # Mutations

    def _push(self, primary: HSL, complementary: HSL) -> None:
        # Discard the redo tail
        while len(self._entries) > self._index + 1:
            self._entries.pop()

        # deque(maxlen) drops the oldest entry once full
        self._entries.append(HistoryEntry(primary=primary, complementary=complementary))
        self._index = len(self._entries) - 1
        self._theme = None

        logger.debug(f"History push: index={self._index} size={len(self._entries)}")

    def update_primary_color(self, hue: float, saturation: float = 100,
                             lightness: float = 50) -> None:
        """Set the primary color and move the complementary color with it.

        The complementary color takes the opposite hue and the same
        saturation and lightness.
        """
        primary = HSL(h=hue, s=saturation, l=lightness)
        complementary = HSL(
            h=get_complementary_color(primary.h),
            s=primary.s,
            l=primary.l,
        )
        self._push(primary, complementary)

    def update_primary_from_hex(self, hex_color: str) -> bool:
        """Set the primary color from hex.

        Returns:
            False, with no state change, if hex_color is invalid
        """
        hsl = hex_to_hsl(hex_color)
        if hsl is None:
            logger.warning(f"Ignoring invalid primary color: {hex_color!r}")
            return False

        self.update_primary_color(hsl.h, hsl.s, hsl.l)
        return True

    def update_complementary_from_hex(self, hex_color: str) -> bool:
        """Set the complementary color independently of the primary.

        The link to the primary hue stays broken until the next primary
        update.

        Returns:
            False, with no state change, if hex_color is invalid
        """
        hsl = hex_to_hsl(hex_color)
        if hsl is None:
            logger.warning(f"Ignoring invalid complementary color: {hex_color!r}")
            return False

        self._push(self.primary, hsl)
        return True

    def apply_preset(self, hex_color: str) -> bool:
        return self.update_primary_from_hex(hex_color)

    def reset_colors(self) -> None:
        """Clear history down to the default colors."""
        self._entries.clear()
        self._entries.append(self._default_entry())
        self._index = 0
        self._theme = None
        logger.debug("History reset to defaults")

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._index -= 1
        self._theme = None
        logger.debug(f"Undo to index {self._index}")
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._index += 1
        self._theme = None
        logger.debug(f"Redo to index {self._index}")
        return True

    # Serialization

    def snapshot(self) -> Dict[str, Any]:
        """Return a JSON-serializable copy of the history."""
        return {
            "history_index": self._index,
            "entries": [entry.model_dump() for entry in self._entries],
        }

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any],
                      max_size: int = MAX_HISTORY_SIZE) -> 'ThemeHistory':
        """Rebuild a history from ``snapshot()`` output.

        Keeps at most ``max_size`` of the newest entries and clamps the
        cursor into range.

        Raises:
            ValueError: If ``entries`` is not a list or the index is not an integer
            pydantic.ValidationError: If an entry is malformed
        """
        raw_entries = data.get("entries", [])
        if not isinstance(raw_entries, list):
            raise ValueError(f"entries must be a list, got {type(raw_entries).__name__}")

        history = cls(max_size)
        entries = [HistoryEntry.model_validate(item) for item in raw_entries]
        if not entries:
            return history

        raw_index = data.get("history_index", len(entries) - 1)
        if isinstance(raw_index, bool) or not isinstance(raw_index, int):
            raise ValueError(f"history_index must be an integer, got {raw_index!r}")

        dropped = max(0, len(entries) - max_size)
        entries = entries[dropped:]
        index = raw_index - dropped

        history._entries.clear()
        history._entries.extend(entries)
        history._index = max(0, min(index, len(entries) - 1))
        return history
