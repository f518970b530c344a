"""
Word list loading
Reads one candidate word per line, falling back to the BIP39 English list
from the official mnemonic package
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from mnemonic import Mnemonic

from phrasegen.errors import InitializationError
from phrasegen.generator import ASCII_TO_LOWER
from phrasegen.logging_config import log_wordlist_loaded

logger = logging.getLogger("phrasegen.wordlist")

DEFAULT_LIST = "eff_large_wordlist.txt"


def clean_word(line: str) -> str:
    """Strip non-alphabetic edges and ASCII-lowercase"""
    start, end = 0, len(line)
    while start < end and not line[start].isalpha():
        start += 1
    while end > start and not line[end - 1].isalpha():
        end -= 1
    return line[start:end].translate(ASCII_TO_LOWER)


def clean_words(lines: Iterable[str]) -> Tuple[str, ...]:
    """Clean raw lines, dropping anything shorter than two characters"""
    return tuple(word for word in map(clean_word, lines) if len(word) > 1)


@lru_cache()
def builtin_wordlist() -> Tuple[str, ...]:
    """BIP39 English wordlist (2048 words)"""
    return clean_words(Mnemonic("english").wordlist)


def read_wordlist(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    Read and clean the word list at path.

    Raises:
      InitializationError if the file cannot be read or has no usable words.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InitializationError(f"could not read word list {path}: {e}") from e

    words = clean_words(raw.splitlines())
    if not words:
        raise InitializationError(f"no usable words in word list {path}")
    log_wordlist_loaded(str(path), len(words))
    return words


def load_wordlist(path: Optional[Union[str, Path]] = None) -> Tuple[str, ...]:
    """
    Load the word list to draw from.

    Without a path, eff_large_wordlist.txt in the working directory is used
    when present, otherwise the built-in BIP39 list.
    """
    if path is not None:
        return read_wordlist(path)

    if Path(DEFAULT_LIST).is_file():
        return read_wordlist(DEFAULT_LIST)

    logger.debug("No %s in the working directory, using the built-in list", DEFAULT_LIST)
    words = builtin_wordlist()
    log_wordlist_loaded("builtin:bip39-english", len(words))
    return words
