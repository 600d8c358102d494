"""Corner geometry, origin resolution and validity checks."""

from .corners import CORNER_NAMES, CornerSet, InvalidArgumentError  # noqa: F401
from .origin import parse_offset_value, resolve_origin  # noqa: F401
from .point import Point  # noqa: F401
from .validation import GeometryError, check_geometry, check_matrix  # noqa: F401
