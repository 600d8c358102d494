"""The four destination corners of the quadrilateral being solved for."""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from surface_distort.geometry.point import Point

CORNER_NAMES: Tuple[str, ...] = ("top_left", "top_right", "bottom_left", "bottom_right")


class InvalidArgumentError(ValueError):
    """Raised for arguments outside the accepted set of values."""


class CornerSet:
    """Destination corners, initialised to the ``[0, width] x [0, height]`` rectangle.

    Geometric validity (minimum edge length, convexity) is checked later by
    :mod:`surface_distort.geometry.validation`, never enforced here.
    """

    __slots__ = ("width", "height", "top_left", "top_right", "bottom_left", "bottom_right")

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.top_left = Point(0, 0)
        self.top_right = Point(width, 0)
        self.bottom_left = Point(0, height)
        self.bottom_right = Point(width, height)

    def __iter__(self) -> Iterator[Point]:
        yield self.top_left
        yield self.top_right
        yield self.bottom_left
        yield self.bottom_right

    def __getitem__(self, index: int) -> Point:
        return getattr(self, CORNER_NAMES[index])

    def __repr__(self) -> str:
        corners = ", ".join(f"{name}={point.as_tuple()}" for name, point in zip(CORNER_NAMES, self))
        return f"CornerSet({corners})"

    def translate(self, dx: float, dy: float) -> None:
        for point in self:
            point.x += dx
            point.y += dy

    def scale(self, factor: float) -> None:
        """Scale all corners about the centre of the source rectangle."""
        self.translate(-self.width / 2, -self.height / 2)
        for point in self:
            point.x *= factor
            point.y *= factor
        self.translate(self.width / 2, self.height / 2)

    def force_perspective(self, direction: str, value: float) -> None:
        """Push one pair of adjacent corners apart to fake a perspective tilt."""
        if direction == "top":
            self.top_left.x -= value
            self.top_right.x += value
        elif direction == "left":
            self.top_left.y -= value
            self.bottom_left.y += value
        elif direction == "bottom":
            self.bottom_left.x -= value
            self.bottom_right.x += value
        elif direction == "right":
            self.top_right.y -= value
            self.bottom_right.y += value
        else:
            raise InvalidArgumentError(f"Invalid perspective direction: {direction!r}")

    def move_corner(self, name: str, x: float, y: float) -> None:
        if name not in CORNER_NAMES:
            raise InvalidArgumentError(f"Unknown corner: {name!r}")
        point = getattr(self, name)
        point.x = x
        point.y = y

    def copy(self) -> "CornerSet":
        clone = CornerSet(self.width, self.height)
        for name in CORNER_NAMES:
            setattr(clone, name, getattr(self, name).copy())
        return clone

    def as_array(self) -> np.ndarray:
        """Corners as a (4, 2) float64 array in top-left, top-right, bottom-left, bottom-right order."""
        return np.array([point.as_tuple() for point in self], dtype=np.float64)
