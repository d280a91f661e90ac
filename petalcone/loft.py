from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from .config import ConfigError, require_at_least
from .geometry import Mesh, Tri, Vec3

logger = logging.getLogger(__name__)

GridIndex = Tuple[int, int]  # (ring, sector)
GridTri = Tuple[GridIndex, GridIndex, GridIndex]


def quad_triangles(r: int, i: int, sectors: int) -> Tuple[GridTri, GridTri]:
    """
    The two triangles of quad (r, i), split along the v00-v11 diagonal.

        v00 = (r, i)      v01 = (r, i + 1)
        v10 = (r + 1, i)  v11 = (r + 1, i + 1)

    The sector index wraps, so the last quad of a ring closes the loop.
    """
    inext = (i + 1) % sectors
    v00, v01 = (r, i), (r, inext)
    v10, v11 = (r + 1, i), (r + 1, inext)
    return (v00, v10, v11), (v00, v11, v01)


def grid_triangles(layers: int, sectors: int) -> Iterator[GridTri]:
    for r in range(layers):
        for i in range(sectors):
            yield from quad_triangles(r, i, sectors)


class RingGrid:
    """
    Concentric copies of a closed base loop, ring 0 at the apex.

    points has shape (layers + 1, sectors, 3); points[r, i] is sector i of
    ring r and lies on the spoke from the origin to base sector i.
    """

    def __init__(self, points: npt.NDArray[np.float64]) -> None:
        if points.ndim != 3 or points.shape[2] != 3:
            raise ValueError(f"expected a (rings, sectors, 3) array, got shape {points.shape}")
        if points.shape[0] < 2:
            raise ValueError("a ring grid needs at least an apex ring and a base ring")
        self.points = points

    @property
    def layers(self) -> int:
        return self.points.shape[0] - 1

    @property
    def sectors(self) -> int:
        return self.points.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.points.shape[0], self.points.shape[1])

    def __getitem__(self, index: GridIndex) -> Vec3:
        x, y, z = self.points[index]
        return (float(x), float(y), float(z))

    def ring(self, r: int) -> List[Vec3]:
        return [tuple(p) for p in self.points[r].tolist()]

    @property
    def base(self) -> List[Vec3]:
        return self.ring(self.layers)

    def vertex_index(self, r: int, i: int) -> int:
        return r * self.sectors + i

    # ---- triangulation ----
    def triangles(self) -> Iterator[GridTri]:
        return grid_triangles(self.layers, self.sectors)

    def faces(self) -> List[Tri]:
        return [
            (self.vertex_index(*a), self.vertex_index(*b), self.vertex_index(*c))
            for a, b, c in self.triangles()
        ]

    def to_mesh(self, normals: Optional[npt.NDArray[np.float64]] = None, name: str = "petal_cone") -> Mesh:
        verts = [tuple(p) for p in self.points.reshape(-1, 3).tolist()]
        norms = None
        if normals is not None:
            if normals.shape != self.points.shape:
                raise ValueError(
                    f"normals shape {normals.shape} does not match grid shape {self.points.shape}"
                )
            norms = [tuple(n) for n in normals.reshape(-1, 3).tolist()]
        return Mesh(verts, self.faces(), norms, name=name)

    # ---- wireframe overlay ----
    def ring_outlines(self) -> List[List[Vec3]]:
        """One closed loop per ring, apex ring included."""
        return [self.ring(r) for r in range(self.layers + 1)]

    def spokes(self) -> List[List[Vec3]]:
        """One apex-to-base polyline per sector."""
        return [[tuple(p) for p in self.points[:, i].tolist()] for i in range(self.sectors)]

    def diagonals(self) -> List[Tuple[Vec3, Vec3]]:
        """The v00-v11 split edge of every quad."""
        out: List[Tuple[Vec3, Vec3]] = []
        for r in range(self.layers):
            for i in range(self.sectors):
                out.append((self[r, i], self[r + 1, (i + 1) % self.sectors]))
        return out


def loft_rings(base: Sequence[Vec3], layers: int) -> RingGrid:
    """Scale the base loop by r / layers for r = 0..layers."""
    require_at_least("layers", layers)
    if not base:
        raise ConfigError("cannot loft an empty base loop")
    base_arr = np.asarray(base, dtype=np.float64)
    scales = np.arange(layers + 1, dtype=np.float64) / layers
    points = scales[:, None, None] * base_arr[None, :, :]
    logger.debug(f"Lofted {layers + 1} rings x {len(base)} sectors.")
    return RingGrid(points)
