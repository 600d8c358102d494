"""pytest configuration and fixtures for the surface_distort test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from surface_distort.distort import Distort

IDENTITY_STYLE = "matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)"


@pytest.fixture
def square() -> Distort:
    """A 100x100 surface with the default centred origin."""
    return Distort(width=100, height=100)


@pytest.fixture
def poster() -> Distort:
    """A 400x300 surface pulled into a convex, non-rectangular quad."""
    distort = Distort(width=400, height=300)
    distort.move_corner("top_left", 20, 10)
    distort.move_corner("top_right", 380, 40)
    distort.move_corner("bottom_left", 0, 300)
    distort.move_corner("bottom_right", 400, 270)
    return distort


@pytest.fixture
def example_config_path() -> Path:
    return Path(__file__).resolve().parents[1] / "config" / "surfaces.example.yaml"
