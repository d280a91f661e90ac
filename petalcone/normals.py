"""
Smooth vertex normals for a ring grid.

Each triangle's unit face normal is added to its three corner vertices; the
per-vertex sums are normalized at the end. Sums are kept in float64 so many
accumulations do not drift, and addition order only affects the result at
rounding level.
"""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

import numpy as np
import numpy.typing as npt

from .geometry import DEFAULT_NORMAL, Vec3, v_cross, v_norm, v_sub
from .loft import GridIndex, GridTri, RingGrid

logger = logging.getLogger(__name__)

# Vertex sums at or below this length finalize to DEFAULT_NORMAL.
FINALIZE_EPS = 1e-9


def face_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Unit normal of triangle (a, b, c) from (b - a) x (c - a)."""
    return v_norm(v_cross(v_sub(b, a), v_sub(c, a)))


class NormalAccumulator:
    """Running sum of face normals for every (ring, sector) vertex."""

    def __init__(self, rings: int, sectors: int) -> None:
        self.sums = np.zeros((rings, sectors, 3), dtype=np.float64)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.sums.shape[0], self.sums.shape[1])

    def add(self, index: GridIndex, normal: Vec3) -> None:
        self.sums[index] += normal

    def add_face(self, corners: Iterable[GridIndex], normal: Vec3) -> None:
        for index in corners:
            self.add(index, normal)

    def finalize(self) -> npt.NDArray[np.float64]:
        """Unit normal per vertex; degenerate sums become DEFAULT_NORMAL."""
        lengths = np.linalg.norm(self.sums, axis=-1)
        out = np.empty_like(self.sums)
        ok = lengths > FINALIZE_EPS
        out[ok] = self.sums[ok] / lengths[ok][:, None]
        out[~ok] = DEFAULT_NORMAL
        degenerate = int(np.count_nonzero(~ok))
        if degenerate:
            logger.debug(f"{degenerate} vertex normal(s) fell back to the default {DEFAULT_NORMAL}.")
        return out


def accumulate_normals(grid: RingGrid, triangles: Iterable[GridTri]) -> NormalAccumulator:
    acc = NormalAccumulator(*grid.shape)
    for a, b, c in triangles:
        n = face_normal(grid[a], grid[b], grid[c])
        acc.add_face((a, b, c), n)
    return acc


def synthesize_normals(grid: RingGrid) -> npt.NDArray[np.float64]:
    """Smooth unit normals with the same (rings, sectors, 3) shape as the grid."""
    return accumulate_normals(grid, grid.triangles()).finalize()
