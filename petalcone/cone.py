from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

import numpy as np
import numpy.typing as npt

from .config import ConeConfig
from .geometry import Mesh, Vec3
from .loft import RingGrid, loft_rings
from .normals import synthesize_normals
from .petal import build_base_loop
from .resample import resample_closed_loop

logger = logging.getLogger(__name__)


@dataclass
class ConeMesh:
    """Everything a renderer needs to draw one petal cone."""

    config: ConeConfig
    base: List[Vec3]
    grid: RingGrid
    normals: npt.NDArray[np.float64]

    @property
    def layers(self) -> int:
        return self.grid.layers

    @property
    def sectors(self) -> int:
        return self.grid.sectors

    def to_mesh(self, name: str = "petal_cone") -> Mesh:
        return self.grid.to_mesh(self.normals, name=name)

    def overlay(self) -> Dict[str, list]:
        """Line sets for the wireframe overlay drawn over the shaded surface."""
        return {
            "rings": self.grid.ring_outlines(),
            "spokes": self.grid.spokes(),
            "diagonals": self.grid.diagonals(),
            "base": list(self.base),
        }


def build_cone(config: ConeConfig) -> ConeMesh:
    """
    Run the full pipeline: petal -> base loop -> (resample) -> loft -> normals.

    Nothing is cached; every call allocates fresh buffers.
    """
    base = build_base_loop(config.shape)
    if config.resampled:
        base = resample_closed_loop(base, config.sectors)
    else:
        logger.debug(f"No sector count requested; keeping the natural {len(base)} points.")

    grid = loft_rings(base, config.ring_layers)
    normals = synthesize_normals(grid)
    logger.debug(f"Built petal cone: {grid.layers + 1} rings x {grid.sectors} sectors.")
    return ConeMesh(config=config, base=base, grid=grid, normals=normals)
