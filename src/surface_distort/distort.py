"""High-level transform object: corners in, ``matrix3d`` out."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Union

from loguru import logger

from surface_distort.config import OPERATION_ARITY, DistortConfig, OffsetConfig, OperationConfig, SurfaceConfig
from surface_distort.geometry.corners import CORNER_NAMES, CornerSet, InvalidArgumentError
from surface_distort.geometry.origin import resolve_origin
from surface_distort.geometry.point import Point
from surface_distort.geometry.validation import GeometryError, check_geometry, check_matrix
from surface_distort.projection.css import dpr_fix_suffix, matrix3d_string
from surface_distort.solver.assembler import BASE_MATRIX, Matrix, assemble_matrix
from surface_distort.solver.linear_system import build_linear_system
from surface_distort.solver.lu import solve_in_place

VERSION = "1.0.2"

OffsetSpec = Union[OffsetConfig, Mapping[str, Optional[str]], None]


class Surface(Protocol):
    """Anything with a size, e.g. a widget or image wrapper the matrix is applied to."""

    width: float
    height: float


class Distort:
    """Computes the ``matrix3d`` that distorts a ``width x height`` rectangle onto four corners.

    Corners are moved through :meth:`translate`, :meth:`scale`,
    :meth:`force_perspective` or :meth:`move_corner`. None of them recompute the
    matrix; call :meth:`update` (or ``str()``) or :meth:`calculate` for that.
    """

    VERSION = VERSION

    def __init__(
        self,
        width: float = 0,
        height: float = 0,
        offset: OffsetSpec = None,
        dpr_fix: bool = False,
        dpr: float = 1.0,
        surface: Optional[Surface] = None,
    ) -> None:
        self.surface = surface
        if surface is not None:
            width, height = surface.width, surface.height
        self.width = width
        self.height = height
        self.dpr_fix = dpr_fix
        self.dpr = dpr
        self.origin: Point = resolve_origin(offset, width, height)
        self.corners = CornerSet(width, height)
        self.matrix: Matrix = BASE_MATRIX
        self.is_valid = False
        self.error = GeometryError.NONE
        self.style = ""
        self.update()

    @classmethod
    def from_config(cls, config: DistortConfig, surface: Optional[Surface] = None) -> "Distort":
        distort = cls(
            width=config.width,
            height=config.height,
            offset=config.offset,
            dpr_fix=config.dpr_fix,
            dpr=config.dpr,
            surface=surface,
        )
        if isinstance(config, SurfaceConfig):
            for name, (x, y) in config.corners.assigned().items():
                distort.move_corner(name, x, y)
            for operation in config.operations:
                distort.apply(operation)
            distort.update()
        return distort

    @property
    def top_left(self) -> Point:
        return self.corners.top_left

    @property
    def top_right(self) -> Point:
        return self.corners.top_right

    @property
    def bottom_left(self) -> Point:
        return self.corners.bottom_left

    @property
    def bottom_right(self) -> Point:
        return self.corners.bottom_right

    def calculate(self) -> Matrix:
        """Solve for the current corners and store the raw (unvalidated) matrix."""
        self.is_valid = False
        system = build_linear_system(self.corners, self.origin, self.width, self.height)
        solution = solve_in_place(system.A, system.b)
        self.matrix = assemble_matrix(solution)
        logger.debug("Solved matrix for {}: {}", self.corners, self.matrix)
        return self.matrix

    def has_errors(self) -> GeometryError:
        return check_geometry(self.corners)

    def update(self) -> str:
        """Recalculate and return the CSS transform, identity when the result is unusable."""
        self.calculate()
        self.error = self.has_errors() or check_matrix(self.matrix)
        if self.error:
            logger.warning("Discarding distorted matrix ({}); falling back to identity", self.error.name)
            self.is_valid = False
            self.style = matrix3d_string(BASE_MATRIX)
            return self.style

        self.is_valid = True
        self.style = matrix3d_string(self.matrix)
        if self.dpr_fix:
            self.style += dpr_fix_suffix(self.dpr)
        return self.style

    def __str__(self) -> str:
        return self.update()

    def __repr__(self) -> str:
        return f"Distort(width={self.width}, height={self.height}, corners={self.corners!r})"

    def equals(self, other: "Distort") -> bool:
        return str(self) == str(other)

    def clone(self) -> "Distort":
        """Copy with independent corners; ``origin`` and ``surface`` are shared handles."""
        clone = type(self).__new__(type(self))
        clone.surface = self.surface
        clone.width = self.width
        clone.height = self.height
        clone.dpr_fix = self.dpr_fix
        clone.dpr = self.dpr
        clone.origin = self.origin
        clone.corners = self.corners.copy()
        clone.matrix = self.matrix
        clone.is_valid = self.is_valid
        clone.error = self.error
        clone.style = self.style
        return clone

    def translate(self, x: float, y: float) -> "Distort":
        self.corners.translate(x, y)
        return self

    def translate_x(self, x: float) -> "Distort":
        return self.translate(x, 0)

    def translate_y(self, y: float) -> "Distort":
        return self.translate(0, y)

    def scale(self, factor: float) -> "Distort":
        self.corners.scale(factor)
        return self

    def force_perspective(self, direction: str, value: float) -> "Distort":
        self.corners.force_perspective(direction, value)
        return self

    def move_corner(self, name: str, x: float, y: float) -> "Distort":
        self.corners.move_corner(name, x, y)
        return self

    def apply(self, operation: OperationConfig) -> "Distort":
        """Run a configured mutation such as ``{op: scale, args: [1.5]}``."""
        arity = OPERATION_ARITY[operation.op]
        if len(operation.args) != arity:
            raise InvalidArgumentError(f"{operation.op} takes {arity} argument(s), got {operation.args}")
        if operation.op == "force_perspective":
            direction, value = operation.args
            return self.force_perspective(str(direction), _as_float(value))
        return getattr(self, operation.op)(*(_as_float(arg) for arg in operation.args))


def _as_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Expected a number, got {value!r}") from exc


__all__ = ["CORNER_NAMES", "Distort", "Surface", "VERSION"]
