"""Build the 8x8 system whose solution is the rectangle-to-quad homography."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from surface_distort.geometry.corners import CornerSet
from surface_distort.geometry.point import Point


@dataclass(slots=True)
class LinearSystem:
    A: np.ndarray  # shape (8, 8)
    b: np.ndarray  # shape (8,)


def build_linear_system(corners: CornerSet, origin: Point, width: float, height: float) -> LinearSystem:
    """Encode the four corner correspondences of a planar projective map.

    With unknowns ``h = [h0..h7]`` and ``H = [[h0, h1, h2], [h3, h4, h5], [h6, h7, 1]]``,
    source corner ``(X, Y)`` maps to ``(u, v)`` when

        h0*X + h1*Y + h2 - h6*X*u - h7*Y*u = u
        h3*X + h4*Y + h5 - h6*X*v - h7*Y*v = v

    Rows 0-3 hold the x equations and rows 4-7 the y equations, one per corner
    in top-left, top-right, bottom-left, bottom-right order. All coordinates
    are shifted by ``origin`` so the map is expressed about the transform origin.
    """
    A = np.zeros((8, 8), dtype=np.float64)
    b = np.zeros(8, dtype=np.float64)

    for i, dst in enumerate(corners):
        src_x = (width if i & 1 else 0) + origin.x
        src_y = (height if i > 1 else 0) + origin.y
        u = dst.x + origin.x
        v = dst.y + origin.y

        A[i, 0] = A[i + 4, 3] = src_x
        A[i, 1] = A[i + 4, 4] = src_y
        A[i, 2] = A[i + 4, 5] = 1.0
        A[i, 6] = -src_x * u
        A[i, 7] = -src_y * u
        A[i + 4, 6] = -src_x * v
        A[i + 4, 7] = -src_y * v
        b[i] = u
        b[i + 4] = v

    return LinearSystem(A=A, b=b)
