"""Clipboard access for previewed names

Uses pyperclip for cross-platform clipboard support.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardHandler:
    """Puts sanitized names on the system clipboard"""

    @staticmethod
    def copy_names(names: list[str]) -> bool:
        """Copy ``names`` to the clipboard, one per line

        Returns:
            False when no clipboard mechanism is available
        """
        try:
            pyperclip.copy("\n".join(names))
        except pyperclip.PyperclipException as e:
            logger.warning(f"clipboard unavailable: {e}")
            return False
        return True
