"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

from lnxconfig.config.parser import ConfigParser


EXAMPLE_CONFIG = Path(__file__).parent.parent / "config.example.lnx"


@pytest.fixture
def parser() -> ConfigParser:
    """Parser with an empty configuration."""
    return ConfigParser()


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example router config shipped with the repo."""
    return EXAMPLE_CONFIG


@pytest.fixture
def write_config(tmp_path: Path):
    """Write config text to a temporary .lnx file and return its path."""

    def _write(text: str, name: str = "node.lnx") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
