"""Tests for projecting points through solved matrices."""

from __future__ import annotations

import numpy as np

from surface_distort.distort import Distort
from surface_distort.projection.mapper import project_corners, project_points


def test_projected_corners_land_on_destination(poster: Distort) -> None:
    poster.update()
    np.testing.assert_allclose(project_corners(poster), poster.corners.as_array(), atol=1e-3)


def test_projection_with_offset_origin() -> None:
    distort = Distort(width=200, height=100, offset={"x": "0px", "y": "100%"})
    distort.force_perspective("right", 20).translate(7, -3)
    distort.update()
    assert distort.is_valid
    np.testing.assert_allclose(project_corners(distort), distort.corners.as_array(), atol=1e-3)


def test_identity_projection_keeps_points(square: Distort) -> None:
    points = [(10, 10), (50, 75), (99, 1)]
    np.testing.assert_allclose(project_points(square.matrix, points, square.origin), points)


def test_project_points_accepts_empty_input(square: Distort) -> None:
    assert project_points(square.matrix, [], square.origin).shape == (0, 2)
