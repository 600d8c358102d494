"""Linear system construction, LU solving and matrix assembly."""

from .assembler import BASE_MATRIX, Matrix, assemble_matrix, canonicalize  # noqa: F401
from .linear_system import LinearSystem, build_linear_system  # noqa: F401
from .lu import solve, solve_in_place  # noqa: F401
