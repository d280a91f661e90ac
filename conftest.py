import pytest

from petalcone.config import ConeConfig, ShapeParams


@pytest.fixture
def demo_config() -> ConeConfig:
    return ConeConfig.demo()


@pytest.fixture
def shape() -> ShapeParams:
    return ShapeParams(axial_length=3.0, samples=60, inner_radius=0.5, outer_radius=2.5, sweep_deg=0.0)


@pytest.fixture
def square_loop():
    """Unit square in the z = 0 plane, perimeter 4."""
    return [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]

