"""Map solved homography unknowns onto the 16-value ``matrix3d`` layout."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Sequence, Tuple

import numpy as np

Matrix = Tuple[float, ...]

# matrix3d(a1, b1, c1, d1, a2, b2, c2, d2, a3, b3, c3, d3, a4, b4, c4, d4), column-major.
BASE_MATRIX: Matrix = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

DECIMALS = 9
_QUANTUM = Decimal(1).scaleb(-DECIMALS)
# wide enough for any finite double at DECIMALS places
_ROUNDING = Context(prec=400, rounding=ROUND_HALF_UP)

# matrix3d index -> index in the solved 8-vector.
_SOLUTION_SLOTS = {0: 0, 1: 3, 3: 6, 4: 1, 5: 4, 7: 7, 12: 2, 13: 5}


def canonicalize(value: float) -> float:
    """Round to ``DECIMALS`` places, ties away from zero, to drop floating noise."""
    if not math.isfinite(value):
        return value
    rounded = float(Decimal(value).quantize(_QUANTUM, context=_ROUNDING))
    # -0.0 -> 0.0 so equal matrices always print identically
    return rounded + 0.0


def assemble_matrix(solution: Sequence[float]) -> Matrix:
    """Place the eight unknowns into a planar (z = 0) ``matrix3d``."""
    if len(solution) != 8:
        raise ValueError(f"Expected 8 solved values, got {len(solution)}")
    values = list(BASE_MATRIX)
    for slot, index in _SOLUTION_SLOTS.items():
        values[slot] = canonicalize(float(solution[index]))
    return tuple(values)


def to_homography(matrix: Sequence[float]) -> np.ndarray:
    """Extract the 3x3 homography ``[[h0, h1, h2], [h3, h4, h5], [h6, h7, 1]]``."""
    if len(matrix) != 16:
        raise ValueError(f"Expected 16 matrix3d values, got {len(matrix)}")
    m = matrix
    return np.array(
        [
            [m[0], m[4], m[12]],
            [m[1], m[5], m[13]],
            [m[3], m[7], m[15]],
        ],
        dtype=np.float64,
    )


def from_homography(homography: np.ndarray) -> Matrix:
    """Inverse of :func:`to_homography`, normalising so that ``H[2, 2] == 1``."""
    H = np.asarray(homography, dtype=np.float64)
    if H.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 homography, got shape {H.shape}")
    if H[2, 2] != 0:
        H = H / H[2, 2]
    solution = (H[0, 0], H[0, 1], H[0, 2], H[1, 0], H[1, 1], H[1, 2], H[2, 0], H[2, 1])
    return assemble_matrix(solution)

