"""
Clipboard support for generated passwords.

Copies one password or a whole batch and clears the clipboard again after a
delay, unless something else has been copied in the meantime.
"""

import logging
import threading
import time
from typing import Optional, Sequence

import pyperclip

from .exceptions import ClipboardError, NothingToCopyError

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_AFTER = 60


def _clear_later(text: str, delay: float) -> threading.Thread:
    """Start a daemon thread that clears the clipboard if it still holds text."""

    def clear_clipboard() -> None:
        time.sleep(delay)
        try:
            if pyperclip.paste() == text:
                pyperclip.copy("")
                logger.debug("Clipboard cleared")
        except pyperclip.PyperclipException as e:
            # Don't print anything as user might be doing other things
            logger.debug(f"Could not clear clipboard: {e}")

    clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
    clear_thread.start()
    return clear_thread


def copy_to_clipboard(text: str, clear_after: Optional[float] = DEFAULT_CLEAR_AFTER) -> Optional[threading.Thread]:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy
        clear_after: Seconds before the clipboard is cleared, None or 0 to keep it

    Returns:
        The auto-clear thread, or None when auto-clear is disabled

    Raises:
        ClipboardError: If the clipboard is not available
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard copy failed: {e}")
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e

    if not clear_after:
        return None

    return _clear_later(text, clear_after)


def copy_all(passwords: Sequence[str], clear_after: Optional[float] = DEFAULT_CLEAR_AFTER) -> Optional[threading.Thread]:
    """
    Copy a batch of passwords, one per line.

    Args:
        passwords: Passwords to copy
        clear_after: Seconds before the clipboard is cleared, None or 0 to keep it

    Returns:
        The auto-clear thread, or None when auto-clear is disabled

    Raises:
        NothingToCopyError: If the batch is empty
        ClipboardError: If the clipboard is not available
    """
    if not passwords:
        raise NothingToCopyError()

    return copy_to_clipboard("\n".join(passwords), clear_after)
