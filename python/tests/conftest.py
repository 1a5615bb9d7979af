"""Pytest configuration and fixtures."""

import logging
import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from morphdict import config


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop cached configuration around every test."""
    config.reset()
    yield
    config.reset()


@pytest.fixture(autouse=True)
def fresh_logging():
    """Remove CLI log handlers between tests."""
    yield
    logger = logging.getLogger("morphdict")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_file(tmp_path):
    """Factory writing lines to a file in a given encoding."""

    def _make(name: str, lines: list[str], encoding: str = "utf-8", newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes("".join(line + newline for line in lines).encode(encoding))
        return path

    return _make


@pytest.fixture
def animal_words():
    """Sample Russian dictionary content."""
    return ["кот", "пёс", "ёж", "лиса", "барсук"]


@pytest.fixture
def fruit_words():
    """Unsorted fruit names."""
    return ["банан", "яблоко", "груша"]
