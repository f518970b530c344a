"""
Logging configuration
Generated passphrases are never logged
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts records that look like they carry a secret"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "secret",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and ("=" in msg or ":" in msg):
                    # Likely contains sensitive value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def level_for_verbosity(verbosity: int) -> int:
    """Map the number of --debug flags to a log level"""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0):
    """Configure application logging on stderr"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger()
    root.setLevel(level_for_verbosity(verbosity))

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # pyperclip is chatty about backend probing
    logging.getLogger("pyperclip").setLevel(logging.WARNING)


event_logger = logging.getLogger("phrasegen.events")


def log_wordlist_loaded(source: str, count: int):
    """Log where the word list came from (never its contents)"""
    event_logger.info(f"Loaded {count} words from {source}")


def log_clipboard_copied(wait: int):
    if wait > 0:
        event_logger.info(f"Copied to clipboard, clearing in {wait} seconds")
    else:
        event_logger.info("Copied to clipboard, not clearing")


def log_clipboard_cleared():
    event_logger.info("Clipboard cleared")


def log_clipboard_failure(action: str, error: Exception):
    """Log a clipboard failure without stopping the program"""
    event_logger.warning(f"Could not {action} clipboard contents: {error}")
