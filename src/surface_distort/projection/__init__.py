"""CSS serialisation and point projection for solved matrices."""

from .css import dpr_fix_suffix, format_number, matrix3d_string  # noqa: F401
from .mapper import project_corners, project_points  # noqa: F401
