"""Apply a solved ``matrix3d`` to points in the source rectangle."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

import cv2
import numpy as np

from surface_distort.geometry.point import Point
from surface_distort.solver.assembler import to_homography

if TYPE_CHECKING:
    from surface_distort.distort import Distort


def project_points(matrix: Sequence[float], points: Iterable[Iterable[float]], origin: Point) -> np.ndarray:
    """Map rectangle-space points through ``matrix``.

    The matrix acts about the transform origin, so points are shifted by
    ``origin`` before the perspective divide and shifted back afterwards.

    Returns:
        Array of shape (N, 2) in the same coordinate space as the input.
    """
    pts = np.array([list(point) for point in points], dtype=np.float64).reshape(-1, 2)
    if pts.size == 0:
        return pts
    shift = np.array([origin.x, origin.y], dtype=np.float64)
    relative = (pts + shift).reshape(-1, 1, 2)
    warped = cv2.perspectiveTransform(relative, to_homography(matrix))
    return warped.reshape(-1, 2) - shift


def project_corners(distort: "Distort") -> np.ndarray:
    """Project the source rectangle corners through the distort's current matrix."""
    width, height = distort.width, distort.height
    source = [(0, 0), (width, 0), (0, height), (width, height)]
    return project_points(distort.matrix, source, distort.origin)
