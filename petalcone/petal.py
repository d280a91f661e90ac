from __future__ import annotations

import logging
import math
from typing import List, Sequence

from .config import ShapeParams
from .geometry import Vec3, bezier

logger = logging.getLogger(__name__)

# Transverse skew of the interior control points; keeps the petal from
# collapsing into a flat symmetric arc.
ASYMMETRY = 0.6

REPLICA_ANGLES = (0.0, 90.0, 180.0, 270.0)


def petal_control_points(shape: ShapeParams) -> List[Vec3]:
    """p0..p3 of one petal, all in the plane x = axial_length."""
    L = shape.axial_length
    half = 0.5 * math.radians(shape.sweep_deg)
    r_in, r_out = shape.inner_radius, shape.outer_radius

    # start/end on the inner circle around +Z (y = sin, z = cos)
    p0 = (L, r_in * math.sin(-half), r_in * math.cos(-half))
    p3 = (L, r_in * math.sin(half), r_in * math.cos(half))
    p1 = (L, ASYMMETRY * r_out, r_out)
    p2 = (L, -ASYMMETRY * r_out, r_out)
    return [p0, p1, p2, p3]


def generate_petal(shape: ShapeParams) -> List[Vec3]:
    """Sample one petal at samples + 1 uniform parameter steps (not arc length)."""
    p0, p1, p2, p3 = petal_control_points(shape)
    n = shape.samples
    return [bezier(p0, p1, p2, p3, i / n) for i in range(n + 1)]


def rotate_petal(petal: Sequence[Vec3], angle_deg: float) -> List[Vec3]:
    """Rotate about the X axis; x is left unchanged."""
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    return [(x, y * c - z * s, y * s + z * c) for x, y, z in petal]


def build_base_loop(shape: ShapeParams) -> List[Vec3]:
    """Four rotated copies of one petal, concatenated in rotation order."""
    petal = generate_petal(shape)
    base: List[Vec3] = []
    for angle in REPLICA_ANGLES:
        base.extend(rotate_petal(petal, angle))
    logger.debug(f"Base loop built from {len(REPLICA_ANGLES)} petals ({len(base)} points).")
    return base
