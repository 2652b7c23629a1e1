"""Clipboard output for Tranclator."""

import logging
import time

import pyperclip

logger = logging.getLogger(__name__)

# Some clipboard backends drop their content when the owning process exits
HOLD_SECONDS = 0.1


class Clipboard:
    """Mirrors translations to the system clipboard."""

    def __init__(self, hold_seconds: float = HOLD_SECONDS):
        self.hold_seconds = hold_seconds

    def set_text(self, text: str) -> None:
        """Replace the clipboard content with text.

        Raises:
            pyperclip.PyperclipException: no usable clipboard backend
        """
        pyperclip.copy(text)
        logger.debug("Copied %d chars to clipboard", len(text))

    def hold(self) -> None:
        """Block briefly so the clipboard registers the content before exit."""
        if self.hold_seconds > 0:
            time.sleep(self.hold_seconds)
