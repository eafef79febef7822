"""System clipboard access via pyperclip."""

from __future__ import annotations

import pyperclip


class ClipboardError(Exception):
    """No usable clipboard mechanism on this system."""


def paste() -> str:
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Clipboard read failed: {exc}") from exc


def copy(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Clipboard write failed: {exc}") from exc
