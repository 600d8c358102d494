"""Tests for the homography linear system."""

from __future__ import annotations

import cv2
import numpy as np

from surface_distort.geometry.corners import CornerSet
from surface_distort.geometry.origin import resolve_origin
from surface_distort.solver.linear_system import build_linear_system
from surface_distort.solver.lu import solve


def test_identity_system_layout() -> None:
    corners = CornerSet(100, 100)
    origin = resolve_origin(None, 100, 100)
    system = build_linear_system(corners, origin, 100, 100)

    assert system.A.shape == (8, 8)
    np.testing.assert_array_equal(system.b, [-50, 50, -50, 50, -50, -50, 50, 50])
    np.testing.assert_array_equal(system.A[0], [-50, -50, 1, 0, 0, 0, -2500, -2500])
    np.testing.assert_array_equal(system.A[7], [0, 0, 0, 50, 50, 1, -2500, -2500])


def test_x_and_y_rows_use_disjoint_columns() -> None:
    corners = CornerSet(200, 100)
    corners.force_perspective("top", 12)
    system = build_linear_system(corners, resolve_origin({"x": "10%"}, 200, 100), 200, 100)

    np.testing.assert_array_equal(system.A[:4, 3:6], 0)
    np.testing.assert_array_equal(system.A[4:, 0:3], 0)
    np.testing.assert_array_equal(system.A[:4, 2], 1)
    np.testing.assert_array_equal(system.A[4:, 5], 1)


def test_identity_system_solves_to_identity() -> None:
    corners = CornerSet(300, 150)
    origin = resolve_origin({"x": "10px", "y": "30px"}, 300, 150)
    system = build_linear_system(corners, origin, 300, 150)
    np.testing.assert_allclose(solve(system.A, system.b), [1, 0, 0, 0, 1, 0, 0, 0], atol=1e-12)


def test_solution_matches_opencv_perspective_transform() -> None:
    width, height = 400, 300
    corners = CornerSet(width, height)
    for name, (x, y) in {
        "top_left": (20, 10),
        "top_right": (380, 40),
        "bottom_left": (0, 300),
        "bottom_right": (400, 270),
    }.items():
        corners.move_corner(name, x, y)
    origin = resolve_origin(None, width, height)
    system = build_linear_system(corners, origin, width, height)

    shift = np.array([origin.x, origin.y])
    src = np.array([[0, 0], [width, 0], [0, height], [width, height]], dtype=np.float64) + shift
    dst = corners.as_array() + shift
    expected = cv2.getPerspectiveTransform(src.astype(np.float32), dst.astype(np.float32))

    np.testing.assert_allclose(solve(system.A, system.b), expected.flatten()[:8], rtol=1e-6, atol=1e-9)
