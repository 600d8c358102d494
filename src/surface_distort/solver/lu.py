"""Dense LU solver with partial pivoting.

The decomposition is Crout-style and column oriented: for every column the
already eliminated rows are folded in, the largest remaining entry is pivoted
onto the diagonal, and the entries below it are scaled by the pivot. Singular
systems are not detected; a zero pivot is left in place and the substitution
steps produce ``inf``/``nan`` instead of raising.
"""

from __future__ import annotations

import numpy as np


def lu_decompose(A: np.ndarray) -> np.ndarray:
    """Factor ``A`` in place into unit-lower and upper triangles.

    Args:
        A: Square float64 array, overwritten with ``L`` (below the diagonal,
            unit diagonal implied) and ``U`` (diagonal and above).

    Returns:
        Row permutation: ``perm[i]`` is the original row now stored at row ``i``.
    """
    n = A.shape[0]
    perm = np.arange(n)
    for j in range(n):
        col = A[:, j].copy()
        for i in range(n):
            k = min(i, j)
            col[i] -= np.dot(A[i, :k], col[:k])
            A[i, j] = col[i]

        p = j
        for i in range(j + 1, n):
            if abs(col[i]) > abs(col[p]):
                p = i

        if p != j:
            A[[p, j]] = A[[j, p]]
            perm[[p, j]] = perm[[j, p]]

        pivot = A[j, j]
        if pivot != 0:
            A[j + 1 :, j] /= pivot
    return perm


def lu_substitute(LU: np.ndarray, perm: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Solve ``A x = b`` given the output of :func:`lu_decompose`."""
    n = LU.shape[0]
    x = np.asarray(b, dtype=np.float64)[perm].copy()

    for k in range(n):
        x[k + 1 :] -= x[k] * LU[k + 1 :, k]

    for k in range(n - 1, -1, -1):
        x[k] /= LU[k, k]
        x[:k] -= x[k] * LU[:k, k]
    return x


def solve_in_place(A: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Solve ``A x = b``, overwriting ``A`` with its factors."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        perm = lu_decompose(A)
        return lu_substitute(A, perm, b)


def solve(A: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Solve ``A x = b`` without touching the caller's arrays."""
    return solve_in_place(np.array(A, dtype=np.float64), np.array(b, dtype=np.float64))

