"""Tests for CSS string output."""

from __future__ import annotations

import math

import pytest

from surface_distort.projection.css import dpr_fix_suffix, format_number, matrix3d_string
from surface_distort.solver.assembler import BASE_MATRIX


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1.0, "1"),
        (-2.0, "-2"),
        (0.5, "0.5"),
        (-0.0, "0"),
        (123.456, "123.456"),
        (0.00001, "0.00001"),
        (1e-7, "1e-7"),
        (math.nan, "NaN"),
        (-math.inf, "-Infinity"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


def test_identity_matrix3d_string() -> None:
    assert matrix3d_string(BASE_MATRIX) == "matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)"


def test_dpr_fix_suffix() -> None:
    assert dpr_fix_suffix(2) == " scale(2, 2) perspective(1000px) translateZ(-1000px)"
    assert dpr_fix_suffix(1.5) == " scale(1.5, 1.5) perspective(1000px) translateZ(-500px)"
    assert dpr_fix_suffix(1) == " scale(1, 1) perspective(1000px) translateZ(0px)"
