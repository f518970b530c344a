"""
Passphrase construction
Uses the system CSPRNG unless a random source is handed in
"""

import logging
import secrets
import string
from typing import Sequence

from phrasegen.errors import GenerationError
from phrasegen.schemas import PassphraseConfig, WordCase

logger = logging.getLogger("phrasegen.generator")

ASCII_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
ASCII_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def apply_case(word: str, case: WordCase) -> str:
    """Apply an ASCII-only case transform to a single word"""
    if case is WordCase.LOWERCASE:
        return word.translate(ASCII_TO_LOWER)
    if case is WordCase.UPPERCASE:
        return word.translate(ASCII_TO_UPPER)
    if case is WordCase.CAPITALIZED:
        return word[:1].translate(ASCII_TO_UPPER) + word[1:]
    return word


class PassphraseBuilder:
    """Builds passphrases from a word list"""

    def __init__(self, rng=None):
        # Anything with randrange() and choice() works, e.g. random.Random(seed)
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def build(self, word_list: Sequence[str], config: PassphraseConfig) -> str:
        """
        Draw config.length words and inject the salt after one of them.

        Raises:
          GenerationError when the word list or configuration cannot
          produce a passphrase.
        """
        self._validate(word_list, config)

        salt_pos = self.rng.randrange(config.length)
        parts = []
        for i in range(config.length):
            if i > 0:
                parts.append(config.separator)
            parts.append(apply_case(self.rng.choice(word_list), config.case))
            if i == salt_pos:
                parts.append(self._generate_salt(config))

        logger.debug("Built passphrase of %d words", config.length)
        return "".join(parts)

    def _validate(self, word_list: Sequence[str], config: PassphraseConfig) -> None:
        if not word_list:
            raise GenerationError("word list is empty")
        if any(not word for word in word_list):
            raise GenerationError("word list contains an empty word")
        if config.length < 1:
            raise GenerationError("passphrase length must be at least 1")
        if config.salt_length < 0:
            raise GenerationError("salt length must not be negative")
        if config.salt_length > 0 and not config.salt_chars:
            raise GenerationError("salt characters are required when salt length is non-zero")

    def _generate_salt(self, config: PassphraseConfig) -> str:
        """Draw salt characters independently, with replacement"""
        return "".join(self.rng.choice(config.salt_chars) for _ in range(config.salt_length))


def build(word_list: Sequence[str], config: PassphraseConfig, rng=None) -> str:
    """Build one passphrase with a fresh builder"""
    return PassphraseBuilder(rng).build(word_list, config)
