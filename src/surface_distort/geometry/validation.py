"""Degeneracy checks applied to a solved quadrilateral."""

from __future__ import annotations

import enum
import math
from typing import Iterable

from surface_distort.geometry.corners import CornerSet
from surface_distort.geometry.point import Point

MIN_CORNER_DISTANCE = 1.0


class GeometryError(enum.IntEnum):
    """Why a solved matrix was discarded. ``NONE`` is falsy."""

    NONE = 0
    DEGENERATE_DISTANCE = 1
    CONCAVE_POLYGON = 2
    NON_FINITE_MATRIX = 3


def determinant(p0: Point, p1: Point, p2: Point) -> float:
    """Twice the signed area of the triangle ``p0, p1, p2``."""
    return (
        p0.x * p1.y + p1.x * p2.y + p2.x * p0.y
        - p0.y * p1.x - p1.y * p2.x - p2.y * p0.x
    )


def has_distance_error(corners: CornerSet) -> bool:
    """True when any two of the four corners are within ``MIN_CORNER_DISTANCE``."""
    pairs = (
        (corners.top_left, corners.top_right),
        (corners.bottom_left, corners.bottom_right),
        (corners.top_left, corners.bottom_left),
        (corners.top_right, corners.bottom_right),
        (corners.top_left, corners.bottom_right),
        (corners.top_right, corners.bottom_left),
    )
    return any(a.distance_to(b) <= MIN_CORNER_DISTANCE for a, b in pairs)


def has_polygon_error(corners: CornerSet) -> bool:
    """True for concave, self-intersecting or inconsistently wound quadrilaterals."""
    tl, tr, bl, br = corners.top_left, corners.top_right, corners.bottom_left, corners.bottom_right
    if determinant(tl, tr, br) <= 0 or determinant(br, bl, tl) <= 0:
        return True
    if determinant(tr, br, bl) <= 0 or determinant(bl, tl, tr) <= 0:
        return True
    return False


def check_geometry(corners: CornerSet) -> GeometryError:
    if has_distance_error(corners):
        return GeometryError.DEGENERATE_DISTANCE
    if has_polygon_error(corners):
        return GeometryError.CONCAVE_POLYGON
    return GeometryError.NONE


def check_matrix(matrix: Iterable[float]) -> GeometryError:
    if all(math.isfinite(value) for value in matrix):
        return GeometryError.NONE
    return GeometryError.NON_FINITE_MATRIX
