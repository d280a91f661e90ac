"""
Configuration structures for the petal cone generator.

ShapeParams fixes one petal's control points; ConeConfig adds the loft
resolution (layers) and the optional resampled sector count. Both validate on
construction and raise ConfigError, so a bad value never reaches the geometry
code.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


class ConfigError(ValueError):
    """Raised for configuration values the generator cannot mesh."""


def require_at_least(name: str, n: int, minimum: int = 1) -> None:
    if n < minimum:
        raise ConfigError(f"{name} must be >= {minimum} (got {n})")


def _require_finite(name: str, x: float) -> None:
    if not math.isfinite(x):
        raise ConfigError(f"{name} must be finite (got {x})")


def _require_non_negative(name: str, x: float) -> None:
    _require_finite(name, x)
    if x < 0:
        raise ConfigError(f"{name} must be >= 0 (got {x})")


@dataclass(frozen=True)
class ShapeParams:
    """
    Shape of a single petal.

    axial_length:
        Offset of the petal plane along the X (longitudinal) axis.
    samples:
        Number of parameter intervals along the Bézier curve; the petal has
        samples + 1 points.
    inner_radius:
        Radius of the circle the curve starts and ends on.
    outer_radius:
        How far the interior control points push the petal outward.
    sweep_deg:
        Angle between the start and end points on the inner circle. 0 closes
        the petal into a cusp.
    """

    axial_length: float = 3.0
    samples: int = 50
    inner_radius: float = 0.4
    outer_radius: float = 2.4
    sweep_deg: float = 0.0

    def __post_init__(self) -> None:
        _require_finite("axial_length", self.axial_length)
        require_at_least("samples", self.samples)
        _require_non_negative("inner_radius", self.inner_radius)
        _require_non_negative("outer_radius", self.outer_radius)
        _require_finite("sweep_deg", self.sweep_deg)

    @property
    def natural_sectors(self) -> int:
        """Vertex count of the four concatenated petals."""
        return 4 * (self.samples + 1)


@dataclass(frozen=True)
class ConeConfig:
    """
    Full generator input.

    layers:
        Number of ring intervals between apex and base. None uses
        shape.samples.
    sectors:
        Vertices per ring. Values <= 0 keep the natural base loop
        (4 * (samples + 1) points) without resampling.
    """

    shape: ShapeParams = field(default_factory=ShapeParams)
    layers: Optional[int] = None
    sectors: int = -1

    def __post_init__(self) -> None:
        if self.layers is not None:
            require_at_least("layers", self.layers)

    @property
    def ring_layers(self) -> int:
        return self.shape.samples if self.layers is None else self.layers

    @property
    def resampled(self) -> bool:
        return self.sectors > 0

    @property
    def ring_sectors(self) -> int:
        return self.sectors if self.resampled else self.shape.natural_sectors

    @classmethod
    def demo(cls) -> "ConeConfig":
        """The reference scene: 60-sample petals, 7 layers, 96 sectors."""
        shape = ShapeParams(axial_length=3.0, samples=60, inner_radius=0.5,
                            outer_radius=2.5, sweep_deg=0.0)
        return cls(shape=shape, layers=7, sectors=96)
