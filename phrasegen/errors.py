"""
Error types raised by passphrase generation and its I/O layer
"""


class PassphraseError(Exception):
    """Base class for every phrasegen failure"""


class InitializationError(PassphraseError):
    """Word list or settings could not be prepared"""

    def __str__(self):
        return f"Initialization error: {super().__str__()}"


class GenerationError(PassphraseError):
    """Invalid configuration handed to the generator"""

    def __str__(self):
        return f"Generation error: {super().__str__()}"


class OutputError(PassphraseError):
    """Clipboard unavailable or its contents could not be changed"""

    def __str__(self):
        return f"Output error: {super().__str__()}"
