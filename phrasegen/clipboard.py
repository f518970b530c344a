"""
Clipboard output

Uses pyperclip for cross-platform clipboard access. Failures surface as
OutputError; copy_then_clear logs them and keeps going.
"""

import time
from typing import Callable

import pyperclip

from phrasegen.errors import OutputError
from phrasegen.logging_config import (
    log_clipboard_cleared,
    log_clipboard_copied,
    log_clipboard_failure,
)


def copy_to_clipboard(text: str) -> None:
    """
    Copy text to the system clipboard.

    Raises:
        OutputError: If clipboard access fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise OutputError(f"could not set clipboard contents: {e}") from e


def clear_clipboard() -> None:
    """Replace the clipboard contents with an empty string"""
    try:
        pyperclip.copy("")
    except pyperclip.PyperclipException as e:
        raise OutputError(f"could not clear clipboard contents: {e}") from e


def copy_then_clear(
    text: str,
    wait: int,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Copy text, then clear the clipboard after wait seconds (0 = never)"""
    try:
        copy_to_clipboard(text)
        log_clipboard_copied(wait)
    except OutputError as e:
        log_clipboard_failure("set", e)

    if wait > 0:
        sleep(wait)
        try:
            clear_clipboard()
            log_clipboard_cleared()
        except OutputError as e:
            log_clipboard_failure("clear", e)
