"""Print the matrix3d transform for every surface in a YAML configuration."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from surface_distort.config import ProjectConfig, load_config
from surface_distort.distort import Distort
from surface_distort.projection.css import format_number
from surface_distort.utils.log import configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute CSS matrix3d transforms for distorted surfaces")
    parser.add_argument("--config", type=Path, required=True, help="Path to surfaces YAML configuration")
    parser.add_argument("--surface", type=str, default=None, help="Only compute the surface with this id")
    parser.add_argument("--raw", action="store_true", help="Print the 16 raw matrix values instead of CSS")
    return parser.parse_args(argv)


def render_surfaces(cfg: ProjectConfig, surface_id: Optional[str] = None, raw: bool = False) -> Dict[str, str]:
    """Build each configured surface and return its output line keyed by id."""
    surfaces = [cfg.surface_by_id(surface_id)] if surface_id else cfg.surfaces
    lines: Dict[str, str] = {}
    for surface in surfaces:
        distort = Distort.from_config(surface)
        if not distort.is_valid:
            logger.warning(f"Surface {surface.id} is invalid ({distort.error.name}); emitting identity")
        if raw:
            lines[surface.id] = " ".join(format_number(value) for value in distort.matrix)
        else:
            lines[surface.id] = distort.style
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = load_config(args.config)
    configure_logging(cfg.logging)
    logger.info(f"Computing {len(cfg.surfaces)} surface(s) for project {cfg.name}")
    for surface_id, line in render_surfaces(cfg, args.surface, args.raw).items():
        print(f"{surface_id}: {line}")


if __name__ == "__main__":
    main()
