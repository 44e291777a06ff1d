"""Session storage for the color history.

The working colors and their undo/redo log are kept in a JSON file so that
a series of CLI invocations behaves like one editing session.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .color_engine import ThemeHistory
from .config import ConfigModel

logger = logging.getLogger(__name__)

SESSION_VERSION = 1


class SessionStore:
    """Loads and saves a ThemeHistory as JSON."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @classmethod
    def from_config(cls, config: ConfigModel) -> "SessionStore":
        return cls(config.get_session_path())

    def load(self) -> ThemeHistory:
        """Load the saved history, or start fresh.

        A missing file gives the default colors. An unreadable or malformed
        file is logged and also gives the default colors.
        """
        if not self.path.exists():
            logger.debug(f"No session at {self.path}, starting from defaults")
            return ThemeHistory()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("session file must contain an object")
            history = ThemeHistory.from_snapshot(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Could not read session {self.path}: {e}. Starting from defaults.")
            return ThemeHistory()

        logger.debug(f"Loaded session with {len(history)} entries from {self.path}")
        return history

    def save(self, history: ThemeHistory) -> None:
        """Write the history atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        data = {"version": SESSION_VERSION}
        data.update(history.snapshot())

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".session-", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug(f"Saved session with {len(history)} entries to {self.path}")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.debug(f"Removed session {self.path}")
