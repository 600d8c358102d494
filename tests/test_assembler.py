"""Tests for matrix3d assembly and canonicalisation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from surface_distort.projection.css import matrix3d_string
from surface_distort.solver.assembler import (
    BASE_MATRIX,
    assemble_matrix,
    canonicalize,
    from_homography,
    to_homography,
)


def test_identity_solution_assembles_to_base_matrix() -> None:
    assert assemble_matrix([1, 0, 0, 0, 1, 0, 0, 0]) == BASE_MATRIX


def test_solution_slots() -> None:
    matrix = assemble_matrix([1, 2, 3, 4, 5, 6, 7, 8])
    assert matrix == (1, 4, 0, 7, 2, 5, 0, 8, 0, 0, 1, 0, 3, 6, 0, 1)


def test_assemble_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        assemble_matrix([1, 0, 0])


def test_canonicalize_strips_noise() -> None:
    assert canonicalize(0.1 + 0.2) == 0.3
    assert canonicalize(1.23456789012) == 1.23456789
    assert canonicalize(0.9999999999999) == 1.0


def test_canonicalize_rounds_ties_away_from_zero() -> None:
    assert canonicalize(1 / 1024) == 0.000976563
    assert canonicalize(-1 / 1024) == -0.000976563
    assert canonicalize(1 + 1 / 1024) == 1.000976563
    assert canonicalize(-(1 + 1 / 1024)) == -1.000976563


def test_tie_rounding_reaches_css_output() -> None:
    matrix = assemble_matrix([1 + 1 / 1024, 0, 0, 0, 1 + 1 / 1024, 0, 0, 0])
    assert matrix3d_string(matrix).startswith("matrix3d(1.000976563, 0, 0, 0, 0, 1.000976563, ")


def test_canonicalize_handles_large_values() -> None:
    assert canonicalize(1e300) == 1e300
    assert canonicalize(-123456789012.5) == -123456789012.5


def test_canonicalize_normalises_negative_zero() -> None:
    value = canonicalize(-1e-12)
    assert value == 0.0
    assert math.copysign(1.0, value) == 1.0


def test_canonicalize_passes_non_finite_through() -> None:
    assert math.isnan(canonicalize(math.nan))
    assert canonicalize(math.inf) == math.inf


def test_homography_conversion() -> None:
    matrix = assemble_matrix([1.5, 0.25, 10, -0.5, 2, -4, 0.001, -0.002])
    H = to_homography(matrix)
    np.testing.assert_allclose(H, [[1.5, 0.25, 10], [-0.5, 2, -4], [0.001, -0.002, 1]])
    assert from_homography(H * 3) == matrix


def test_homography_conversion_validates_shapes() -> None:
    with pytest.raises(ValueError):
        to_homography([1, 0, 0])
    with pytest.raises(ValueError):
        from_homography(np.eye(4))


def test_base_matrix_is_immutable() -> None:
    with pytest.raises(TypeError):
        BASE_MATRIX[0] = 2  # type: ignore[index]
