"""
Passphrase configuration and result types
"""

from enum import Enum
from typing import NamedTuple, Union

from pydantic import BaseModel, ConfigDict, field_validator


class WordCase(str, Enum):
    """How each drawn word is cased"""
    LOWERCASE = "lowercase"
    CAPITALIZED = "capitalized"
    UPPERCASE = "uppercase"
    UNCHANGED = "unchanged"

    @classmethod
    def parse(cls, value: Union["WordCase", str, int]) -> "WordCase":
        """
        Resolve a case mode from its name or its numeric code.

        Numeric codes follow the command line: 0 lowercase, 1 capitalized,
        2 uppercase, 3 unchanged. Anything else raises ValueError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unrecognized word case: {value!r}")
        if isinstance(value, int):
            value = str(value)
        text = str(value).strip().lower()
        if text in _CASE_CODES:
            return _CASE_CODES[text]
        try:
            return cls(text)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unrecognized word case: {value!r} (expected one of: {allowed}, or 0-3)"
            ) from None


_CASE_CODES = {
    "0": WordCase.LOWERCASE,
    "1": WordCase.CAPITALIZED,
    "2": WordCase.UPPERCASE,
    "3": WordCase.UNCHANGED,
}


class PassphraseConfig(BaseModel):
    """
    Shape of a generated passphrase.

    Range checks live in the generator so that bad values surface as
    GenerationError rather than a schema failure.
    """
    model_config = ConfigDict(frozen=True)

    length: int = 7
    separator: str = " "
    salt_length: int = 1
    salt_chars: str = "0123456789"
    case: WordCase = WordCase.CAPITALIZED

    @field_validator("case", mode="before")
    @classmethod
    def parse_case(cls, value):
        return WordCase.parse(value)


class EntropyResult(NamedTuple):
    """Entropy estimate for a passphrase configuration"""
    bits: float
    equivalent_ascii_chars: float
