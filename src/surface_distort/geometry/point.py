"""Mutable 2D point used for quadrilateral corners and the transform origin."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
