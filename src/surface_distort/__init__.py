"""Projective ``matrix3d`` solver for distorting rectangles onto quadrilaterals."""

from .config import DistortConfig, ProjectConfig, SurfaceConfig, load_config  # noqa: F401
from .distort import VERSION as __version__  # noqa: F401
from .distort import Distort  # noqa: F401
from .geometry import GeometryError, InvalidArgumentError, Point  # noqa: F401
