"""
Configuration loaded from environment variables
Every value can be set as PHRASEGEN_<NAME> or in a .env file, and is
overridden by command-line options
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from phrasegen.schemas import PassphraseConfig, WordCase


class Settings(BaseSettings):
    """Default generation settings"""

    # Passphrase shape
    LENGTH: int = 7
    SEPARATOR: str = " "
    SALT_LENGTH: int = 1
    SALT_CHARS: str = "0123456789"
    CASE: str = "capitalized"   # lowercase, capitalized, uppercase, unchanged or 0-3

    # Output
    WAIT: int = 5               # seconds before the clipboard is cleared, 0 = never

    # Word list file; None means eff_large_wordlist.txt or the built-in list
    WORDLIST_PATH: Optional[str] = None

    def to_passphrase_config(self) -> PassphraseConfig:
        return PassphraseConfig(
            length=self.LENGTH,
            separator=self.SEPARATOR,
            salt_length=self.SALT_LENGTH,
            salt_chars=self.SALT_CHARS,
            case=WordCase.parse(self.CASE),
        )

    class Config:
        env_prefix = "PHRASEGEN_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def validate_settings(active_settings: Settings) -> None:
    """Validate generation settings, reporting every problem at once."""
    errors = []

    if active_settings.LENGTH < 1:
        errors.append("LENGTH must be >= 1")

    if active_settings.SALT_LENGTH < 0:
        errors.append("SALT_LENGTH must be >= 0")

    if active_settings.SALT_LENGTH > 0 and not active_settings.SALT_CHARS:
        errors.append("SALT_CHARS must be non-empty when SALT_LENGTH > 0")

    if active_settings.WAIT < 0:
        errors.append("WAIT must be >= 0")

    try:
        WordCase.parse(active_settings.CASE)
    except ValueError as e:
        errors.append(f"CASE is invalid: {e}")

    if errors:
        raise ValueError("Invalid passphrase configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
