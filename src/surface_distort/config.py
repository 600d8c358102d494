"""Configuration schema and loader for distorted surfaces."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

_OFFSET_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*(?:%|px)\s*$")


class OffsetConfig(BaseModel):
    """Transform origin per axis: ``"<n>%"``, ``"<n>px"`` or unset for the centre."""

    x: Optional[str] = None
    y: Optional[str] = None

    @field_validator("x", "y")
    @classmethod
    def ensure_css_length(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        if not _OFFSET_PATTERN.match(value):
            raise ValueError(f"Offset must look like '50%' or '10px', got {value!r}")
        return value.strip()


class DistortConfig(BaseModel):
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    offset: OffsetConfig = Field(default_factory=OffsetConfig)
    dpr_fix: bool = False
    dpr: float = Field(1.0, gt=0)


class CornersConfig(BaseModel):
    top_left: Optional[List[float]] = Field(None, min_length=2, max_length=2)
    top_right: Optional[List[float]] = Field(None, min_length=2, max_length=2)
    bottom_left: Optional[List[float]] = Field(None, min_length=2, max_length=2)
    bottom_right: Optional[List[float]] = Field(None, min_length=2, max_length=2)

    def assigned(self) -> Dict[str, List[float]]:
        """Only the corners that were set explicitly."""
        return {name: value for name, value in self.model_dump().items() if value is not None}


# Operation name -> number of positional arguments it takes.
OPERATION_ARITY: Dict[str, int] = {
    "translate": 2,
    "translate_x": 1,
    "translate_y": 1,
    "scale": 1,
    "force_perspective": 2,
}

OperationName = Literal[tuple(OPERATION_ARITY)]  # type: ignore[valid-type]


class OperationConfig(BaseModel):
    op: OperationName
    args: List[float | str] = Field(default_factory=list)


class SurfaceConfig(DistortConfig):
    id: str
    corners: CornersConfig = Field(default_factory=CornersConfig)
    operations: List[OperationConfig] = Field(default_factory=list)


class LoggingConfig(BaseModel):
    level: str = Field("INFO")
    output: str = Field("stdout")


class ProjectConfig(BaseModel):
    name: str
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    surfaces: List[SurfaceConfig] = Field(default_factory=list)

    @field_validator("surfaces")
    @classmethod
    def ensure_unique_ids(cls, value: List[SurfaceConfig]) -> List[SurfaceConfig]:
        seen = set()
        duplicates = []
        for surface in value:
            if surface.id in seen:
                duplicates.append(surface.id)
            seen.add(surface.id)
        if duplicates:
            raise ValueError(f"Duplicate surface ids: {duplicates}")
        return value

    def surface_by_id(self, surface_id: str) -> SurfaceConfig:
        for surface in self.surfaces:
            if surface.id == surface_id:
                return surface
        raise KeyError(f"Surface '{surface_id}' not found in configuration")


def load_config(path: str | Path) -> ProjectConfig:
    """Load configuration from YAML file."""
    with open(path, "r", encoding="utf-8") as handle:
        raw: Dict[str, object] = yaml.safe_load(handle)
    return ProjectConfig.model_validate(raw)
