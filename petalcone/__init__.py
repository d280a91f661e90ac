"""
petalcone: procedural lofted Bézier "petal cone" meshes.

Four rotated Bézier petals form a closed base loop, which is resampled by arc
length, lofted from an apex into concentric rings and given smooth vertex
normals. Rendering is left to the caller.

    from petalcone import ConeConfig, build_cone
    cone = build_cone(ConeConfig.demo())
    cone.grid.points.shape   # (8, 96, 3)
"""
from .config import ConeConfig, ConfigError, ShapeParams
from .cone import ConeMesh, build_cone
from .geometry import Mesh, bezier
from .loft import RingGrid, loft_rings
from .normals import NormalAccumulator, synthesize_normals
from .petal import build_base_loop, generate_petal, rotate_petal
from .resample import resample_closed_loop
from .view import ViewState

__all__ = [
    "ConeConfig",
    "ConeMesh",
    "ConfigError",
    "Mesh",
    "NormalAccumulator",
    "RingGrid",
    "ShapeParams",
    "ViewState",
    "bezier",
    "build_base_loop",
    "build_cone",
    "generate_petal",
    "loft_rings",
    "resample_closed_loop",
    "rotate_petal",
    "synthesize_normals",
]
