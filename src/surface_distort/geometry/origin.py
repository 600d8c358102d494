"""Resolve CSS-like transform-origin specs into an origin-relative offset."""

from __future__ import annotations

import math
import re
from typing import Mapping, Optional, Union

from surface_distort.geometry.point import Point

# Leading decimal number, the same prefix a browser's parseFloat would accept.
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number_prefix(text: str) -> float:
    """Parse the leading number of ``text``; ``nan`` when there is none."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_offset_value(text: Optional[str], total: float) -> float:
    """Convert one axis of an offset such as ``"25%"`` into a negated origin coordinate.

    ``"25%"`` -> ``-0.25 * total``, ``"10px"`` -> ``-10``, anything else
    (``None``, empty, unitless) -> ``-total / 2``. Malformed numbers inside a
    unit are not rejected here and come back as ``nan``.
    """
    text = str(text) if text else ""
    if "%" in text:
        return -parse_number_prefix(text) * total / 100
    if "px" in text:
        return -parse_number_prefix(text)
    return total * -0.5


def resolve_origin(
    offset: Union[Mapping[str, Optional[str]], object, None],
    width: float,
    height: float,
) -> Point:
    """Build the origin point from an offset mapping or ``OffsetConfig``."""
    if offset is None:
        x_text = y_text = None
    elif isinstance(offset, Mapping):
        x_text, y_text = offset.get("x"), offset.get("y")
    else:
        x_text, y_text = getattr(offset, "x", None), getattr(offset, "y", None)
    return Point(parse_offset_value(x_text, width), parse_offset_value(y_text, height))
