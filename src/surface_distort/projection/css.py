"""Serialise matrices into CSS transform strings."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def format_number(value: float) -> str:
    """Format a float the way a browser prints a number (``1``, ``0.5``, ``1e-7``)."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude < 1e-6 or magnitude >= 1e21:
        return np.format_float_scientific(value, trim="-", exp_digits=1)
    return np.format_float_positional(value, trim="-")


def matrix3d_string(matrix: Iterable[float]) -> str:
    return "matrix3d(" + ", ".join(format_number(value) for value in matrix) + ")"


def dpr_fix_suffix(dpr: float) -> str:
    """Compensating transform for blurry 3D layers on high-density displays."""
    ratio = format_number(dpr)
    depth = format_number((1 - dpr) * 1000)
    return f" scale({ratio}, {ratio}) perspective(1000px) translateZ({depth}px)"
