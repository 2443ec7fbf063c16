"""Clipboard access for copying the rendered output."""

import pyperclip


class ClipboardError(Exception):
    """Raised when text cannot be written to the system clipboard."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Copy failed, please copy the output manually ({reason})")


def copy_text(text: str) -> bool:
    """Copy text to the clipboard.

    Returns:
        False if there was nothing to copy, True otherwise

    Raises:
        ClipboardError: If the clipboard is unavailable
    """
    if not text:
        return False
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(str(e) or type(e).__name__) from e
    return True
