"""
Pytest fixtures for phrasegen tests
"""

import logging
import os
import random

import pytest

from phrasegen.config import get_settings
from phrasegen.schemas import PassphraseConfig, WordCase


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test away from any real .env, word list or PHRASEGEN_ variables."""
    for name in list(os.environ):
        if name.startswith("PHRASEGEN_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def word_list():
    """Small cleaned word list (for testing only)."""
    return ("alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel")


@pytest.fixture
def rng():
    """Seeded random source so generation is repeatable."""
    return random.Random(1234)


@pytest.fixture
def config():
    """Hyphen-separated configuration with a two-digit salt."""
    return PassphraseConfig(
        length=5,
        separator="-",
        salt_length=2,
        salt_chars="0123456789",
        case=WordCase.LOWERCASE,
    )


@pytest.fixture
def wordlist_file(tmp_path):
    """EFF-style dice word list on disk."""
    path = tmp_path / "words.txt"
    path.write_text(
        "11111\tabacus\n11112\tabdomen\n11113\tabdominal\n11114\tabide\n11115\ta\n",
        encoding="utf-8",
    )
    return path
