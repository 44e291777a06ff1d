"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dresscode.color_engine import (  # noqa: E402
    DEFAULT_COMPLEMENTARY,
    DEFAULT_PRIMARY,
    build_color_theme,
)
from dresscode.config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached configuration around every test."""
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def default_theme():
    return build_color_theme(DEFAULT_PRIMARY, DEFAULT_COMPLEMENTARY)


@pytest.fixture
def config_file(tmp_path):
    """Config file pointing the data directory into tmp_path."""
    path = tmp_path / "config.yaml"
    path.write_text(f"data_dir: {tmp_path / 'data'}\n", encoding="utf-8")
    return path
