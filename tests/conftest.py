"""Pytest configuration - headless Qt and shared triangle fixtures."""
from __future__ import annotations

import os

import pytest

from chaosgame.model.geometry import Point, triangle_corners

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Fixtures used by multiple test files

@pytest.fixture
def corners():
    """Triangle of the default 500x500 canvas: top, bottom-left, bottom-right."""
    return triangle_corners(500, 500)


@pytest.fixture
def top(corners):
    return corners[0]


@pytest.fixture
def bottom_left(corners):
    return corners[1]


@pytest.fixture
def bottom_right(corners):
    return corners[2]


@pytest.fixture
def centroid():
    return Point(250.0, 1000.0 / 3)
