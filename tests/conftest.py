# colorskit test configuration and shared fixtures
from __future__ import annotations

import pytest

from colorskit.colorlib import Color


# ─────────────────────────────────────────────────────────────────────────────
# Color fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def red_color():
    """Pure red color."""
    return Color.NewFromRgb(1.0, 0.0, 0.0)


@pytest.fixture
def green_color():
    """Pure green color."""
    return Color.NewFromRgb(0.0, 1.0, 0.0)


@pytest.fixture
def blue_color():
    """Pure blue color."""
    return Color.NewFromRgb(0.0, 0.0, 1.0)


@pytest.fixture
def white_color():
    """Pure white color."""
    return Color.NewFromRgb(1.0, 1.0, 1.0)


@pytest.fixture
def black_color():
    """Pure black color."""
    return Color.NewFromRgb(0.0, 0.0, 0.0)


@pytest.fixture
def gray_color():
    """Neutral mid gray, saturation 0."""
    return Color.NewFromRgb(0.5, 0.5, 0.5)


@pytest.fixture
def translucent_red():
    """Red at half opacity."""
    return Color.NewFromRgb(1.0, 0.0, 0.0, 0.5)


@pytest.fixture
def transparent_red():
    """Red with alpha 0."""
    return Color.NewFromRgb(1.0, 0.0, 0.0, 0.0)


# ─────────────────────────────────────────────────────────────────────────────
# Pytest configuration
# ─────────────────────────────────────────────────────────────────────────────


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
