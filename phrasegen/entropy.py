"""
Entropy estimate for a passphrase configuration
"""

import math

from phrasegen.errors import GenerationError
from phrasegen.schemas import EntropyResult

# A random printable-ASCII character carries roughly 7 bits.
BITS_PER_ASCII_CHAR = 7.0


def combination_count(
    word_list_size: int,
    phrase_length: int,
    salt_length: int,
    salt_chars_count: int,
) -> int:
    """
    Number of passphrases a configuration can produce.

    The salt factor multiplies the position choice by the salt character
    combinations. It is an approximation, not a tight bound.
    """
    count = word_list_size ** phrase_length
    if salt_length > 0:
        count *= phrase_length * salt_chars_count ** salt_length
    return count


def estimate(
    word_list_size: int,
    phrase_length: int,
    salt_length: int,
    salt_chars_count: int,
) -> EntropyResult:
    """Return bits of entropy and the equivalent random ASCII password length"""
    if word_list_size < 1:
        raise GenerationError("word list size must be at least 1")
    if phrase_length < 1:
        raise GenerationError("passphrase length must be at least 1")
    if salt_length < 0:
        raise GenerationError("salt length must not be negative")
    if salt_length > 0 and salt_chars_count < 1:
        raise GenerationError("salt characters are required when salt length is non-zero")

    # Exact integer arithmetic; math.log2 accepts arbitrarily large ints
    bits = math.log2(
        combination_count(word_list_size, phrase_length, salt_length, salt_chars_count)
    )
    return EntropyResult(bits=bits, equivalent_ascii_chars=bits / BITS_PER_ASCII_CHAR)
