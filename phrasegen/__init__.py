"""
phrasegen - random word-list passphrases with an entropy estimate
"""

from phrasegen.entropy import estimate
from phrasegen.errors import GenerationError, InitializationError, OutputError, PassphraseError
from phrasegen.generator import build
from phrasegen.schemas import EntropyResult, PassphraseConfig, WordCase

__version__ = "0.1.0"

__all__ = [
    "build",
    "estimate",
    "EntropyResult",
    "GenerationError",
    "InitializationError",
    "OutputError",
    "PassphraseConfig",
    "PassphraseError",
    "WordCase",
]
