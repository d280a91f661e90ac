"""
Small vector/matrix toolkit shared by the petal cone pipeline.

Contents
--------
• Vec3 tuple helpers (sub / lerp / cross / length / normalize)
• 4×4 rotation matrices used by the view state
• Cubic Bézier evaluation (Bernstein form)
• Mesh container for the flattened triangle output
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

Vec3 = Tuple[float, float, float]
Tri = Tuple[int, int, int]
Mat4 = List[List[float]]

DEFAULT_NORMAL: Vec3 = (0.0, 0.0, 1.0)

# -----------------------------
# Small vector/matrix utilities
# -----------------------------

def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a: Vec3) -> float:
    return math.sqrt(v_dot(a, a))


def v_dist(a: Vec3, b: Vec3) -> float:
    return v_len(v_sub(b, a))


def v_norm(a: Vec3) -> Vec3:
    """Unit vector along `a`; a zero vector gives DEFAULT_NORMAL instead of NaN."""
    l = v_len(a)
    if l == 0.0:
        return DEFAULT_NORMAL
    return (a[0] / l, a[1] / l, a[2] / l)


def mat_mul(a: Mat4, b: Mat4) -> Mat4:
    out = [[0.0] * 4 for _ in range(4)]
    for r in range(4):
        for c in range(4):
            out[r][c] = (
                a[r][0] * b[0][c]
                + a[r][1] * b[1][c]
                + a[r][2] * b[2][c]
                + a[r][3] * b[3][c]
            )
    return out


def mat_rotate_x(a: float) -> Mat4:
    c, s = math.cos(a), math.sin(a)
    return [
        [1, 0, 0, 0],
        [0, c, -s, 0],
        [0, s, c, 0],
        [0, 0, 0, 1],
    ]


def mat_rotate_y(a: float) -> Mat4:
    c, s = math.cos(a), math.sin(a)
    return [
        [c, 0, s, 0],
        [0, 1, 0, 0],
        [-s, 0, c, 0],
        [0, 0, 0, 1],
    ]


def apply_mat(v: Vec3, m: Mat4) -> Vec3:
    x, y, z = v
    # v' = M * [x, y, z, 1]
    xp = m[0][0] * x + m[0][1] * y + m[0][2] * z + m[0][3]
    yp = m[1][0] * x + m[1][1] * y + m[1][2] * z + m[1][3]
    zp = m[2][0] * x + m[2][1] * y + m[2][2] * z + m[2][3]
    wp = m[3][0] * x + m[3][1] * y + m[3][2] * z + m[3][3]
    if wp != 0 and wp != 1:
        return (xp / wp, yp / wp, zp / wp)
    return (xp, yp, zp)


# -------------
# Bézier curves
# -------------

def bernstein_weights(t: float) -> Tuple[float, float, float, float]:
    u = 1.0 - t
    return (u * u * u, 3.0 * u * u * t, 3.0 * u * t * t, t * t * t)


def bezier(p0: Vec3, p1: Vec3, p2: Vec3, p3: Vec3, t: float) -> Vec3:
    """Cubic Bézier point at parameter t. Values outside [0, 1] extrapolate."""
    b0, b1, b2, b3 = bernstein_weights(t)
    return (
        b0 * p0[0] + b1 * p1[0] + b2 * p2[0] + b3 * p3[0],
        b0 * p0[1] + b1 * p1[1] + b2 * p2[1] + b3 * p3[1],
        b0 * p0[2] + b1 * p1[2] + b2 * p2[2] + b3 * p3[2],
    )


# --------------
# Mesh container
# --------------

def triangle_area(a: Vec3, b: Vec3, c: Vec3) -> float:
    return 0.5 * v_len(v_cross(v_sub(b, a), v_sub(c, a)))


@dataclass
class Mesh:
    vertices: List[Vec3] = field(default_factory=list)
    faces: List[Tri] = field(default_factory=list)
    normals: Optional[List[Vec3]] = None  # aligned 1:1 with vertices when present
    name: str = "mesh"

    def transform(self, m: Mat4) -> "Mesh":
        self.vertices = [apply_mat(v, m) for v in self.vertices]
        if self.normals:
            # rotation-only matrices; renormalize to absorb rounding
            self.normals = [v_norm(apply_mat(n, m)) for n in self.normals]
        return self

    def transformed(self, m: Mat4) -> "Mesh":
        return self.copy().transform(m)

    def copy(self) -> "Mesh":
        return Mesh(self.vertices.copy(), self.faces.copy(),
                    None if self.normals is None else self.normals.copy(),
                    self.name)

    def bounds(self) -> Tuple[Vec3, Vec3]:
        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def surface_area(self) -> float:
        area = 0.0
        for ia, ib, ic in self.faces:
            area += triangle_area(self.vertices[ia], self.vertices[ib], self.vertices[ic])
        return area


def polyline_length(points: Sequence[Vec3], closed: bool = False) -> float:
    n = len(points)
    if n < 2:
        return 0.0
    total = sum(v_dist(points[i], points[i + 1]) for i in range(n - 1))
    if closed:
        total += v_dist(points[-1], points[0])
    return total
