"""
Arc-length resampling of closed polylines.

Petal curves are sampled uniformly in the Bézier parameter, which bunches
points near the cusps where the four petals meet. Resampling by cumulative
chord length spreads the ring vertices evenly and lets the sector count be
chosen independently of the curve's sample density.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from .config import ConfigError, require_at_least
from .geometry import Vec3, v_dist, v_lerp

logger = logging.getLogger(__name__)


def cumulative_lengths(loop: Sequence[Vec3]) -> List[float]:
    """
    Chord length from loop[0] to every vertex, closing back to loop[0].

    Returns N + 1 values: acc[0] == 0 and acc[N] is the loop perimeter.
    """
    n = len(loop)
    acc = [0.0] * (n + 1)
    for i in range(n):
        acc[i + 1] = acc[i] + v_dist(loop[i], loop[(i + 1) % n])
    return acc


def resample_closed_loop(loop: Sequence[Vec3], target: int) -> List[Vec3]:
    """
    Redistribute a closed loop into exactly `target` points equally spaced by
    arc length, starting at loop[0].

    A loop of zero length (all points coincident) yields `target` copies of
    its first point.
    """
    require_at_least("target", target)
    n = len(loop)
    if n == 0:
        raise ConfigError("cannot resample an empty loop")

    acc = cumulative_lengths(loop)
    total = acc[n]
    if total <= 0.0:
        logger.debug(f"Degenerate loop of {n} coincident points; repeating the first point.")
        return [loop[0]] * target

    out: List[Vec3] = []
    # The arc-length targets increase with k, so the segment pointer only
    # moves forward across the whole pass.
    j = 0
    for k in range(target):
        s = total * k / target
        while j + 1 < n and acc[j + 1] <= s:
            j += 1
        seg_start, seg_end = acc[j], acc[j + 1]
        t = (s - seg_start) / (seg_end - seg_start) if seg_end > seg_start else 0.0
        out.append(v_lerp(loop[j % n], loop[(j + 1) % n], t))

    logger.debug(f"Resampled closed loop: {n} -> {target} points (perimeter {total:.6g}).")
    return out
