"""Tests for configuration validation."""

import dataclasses
import math

import pytest

from petalcone.config import ConeConfig, ConfigError, ShapeParams


class TestShapeParams:
    def test_defaults(self):
        s = ShapeParams()
        assert (s.axial_length, s.samples, s.inner_radius, s.outer_radius, s.sweep_deg) == (3.0, 50, 0.4, 2.4, 0.0)
        assert s.natural_sectors == 204

    @pytest.mark.parametrize("kwargs, field_name", [
        ({"samples": 0}, "samples"),
        ({"samples": -3}, "samples"),
        ({"inner_radius": -0.1}, "inner_radius"),
        ({"outer_radius": -1.0}, "outer_radius"),
        ({"axial_length": math.nan}, "axial_length"),
        ({"sweep_deg": math.inf}, "sweep_deg"),
    ])
    def test_rejects_invalid(self, kwargs, field_name):
        with pytest.raises(ConfigError, match=field_name):
            ShapeParams(**kwargs)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match=r"samples must be >= 1 \(got 0\)"):
            ShapeParams(samples=0)

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ShapeParams().samples = 3


class TestConeConfig:
    def test_demo(self):
        c = ConeConfig.demo()
        assert c.shape == ShapeParams(3.0, 60, 0.5, 2.5, 0.0)
        assert (c.ring_layers, c.ring_sectors, c.resampled) == (7, 96, True)

    def test_layers_fall_back_to_samples(self):
        c = ConeConfig(ShapeParams(samples=12))
        assert c.ring_layers == 12

    @pytest.mark.parametrize("sectors", [0, -1, -50])
    def test_non_positive_sectors_keep_natural_count(self, sectors):
        c = ConeConfig(ShapeParams(samples=60), sectors=sectors)
        assert not c.resampled
        assert c.ring_sectors == 244

    def test_rejects_zero_layers(self):
        with pytest.raises(ConfigError, match="layers"):
            ConeConfig(layers=0)
