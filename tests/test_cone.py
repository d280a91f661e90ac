"""End-to-end tests for the petal cone pipeline."""

from unittest import mock

import numpy as np
import pytest

from petalcone import cone as cone_module
from petalcone.config import ConeConfig, ShapeParams
from petalcone.cone import build_cone
from petalcone.petal import build_base_loop
from petalcone.resample import resample_closed_loop


class TestBuildCone:
    def test_demo_scene_dimensions(self, demo_config):
        cone = build_cone(demo_config)
        assert cone.grid.points.shape == (8, 96, 3)
        assert cone.grid.points.shape[0] * cone.grid.points.shape[1] == 768
        assert cone.normals.shape == (8, 96, 3)

    def test_demo_apex_is_zero(self, demo_config):
        cone = build_cone(demo_config)
        assert np.all(cone.grid.points[0] == 0.0)

    def test_demo_base_matches_resampled_loop(self, demo_config):
        cone = build_cone(demo_config)
        expected = resample_closed_loop(build_base_loop(demo_config.shape), 96)
        np.testing.assert_array_equal(cone.grid.points[7], np.asarray(expected))
        assert cone.base == expected

    def test_natural_sector_count_without_resampling(self):
        config = ConeConfig(ShapeParams(samples=60), layers=3, sectors=0)
        with mock.patch.object(cone_module, "resample_closed_loop") as resample:
            cone = build_cone(config)
        resample.assert_not_called()
        assert cone.sectors == 244
        assert config.ring_sectors == 244

    def test_layers_default_to_samples(self):
        cone = build_cone(ConeConfig(ShapeParams(samples=8)))
        assert cone.layers == 8

    def test_normals_are_unit(self, demo_config):
        cone = build_cone(demo_config)
        np.testing.assert_allclose(np.linalg.norm(cone.normals, axis=-1), 1.0, atol=1e-9)

    def test_repeated_builds_are_identical(self, demo_config):
        a = build_cone(demo_config)
        b = build_cone(demo_config)
        np.testing.assert_array_equal(a.grid.points, b.grid.points)
        np.testing.assert_array_equal(a.normals, b.normals)
        assert a.grid.points is not b.grid.points

    def test_sweep_changes_geometry(self):
        flat = build_cone(ConeConfig(ShapeParams(samples=20), layers=2, sectors=32))
        swept = build_cone(ConeConfig(ShapeParams(samples=20, sweep_deg=30.0), layers=2, sectors=32))
        assert not np.allclose(flat.grid.points, swept.grid.points)


class TestConeOutputs:
    def test_to_mesh(self, demo_config):
        mesh = build_cone(demo_config).to_mesh()
        assert len(mesh.vertices) == 768
        assert len(mesh.normals) == 768
        assert len(mesh.faces) == 2 * 7 * 96
        assert mesh.name == "petal_cone"
        assert mesh.surface_area() > 0.0

    def test_overlay(self, demo_config):
        overlay = build_cone(demo_config).overlay()
        assert set(overlay) == {"rings", "spokes", "diagonals", "base"}
        assert len(overlay["rings"]) == 8
        assert len(overlay["spokes"]) == 96
        assert len(overlay["diagonals"]) == 7 * 96
        assert len(overlay["base"]) == 96

    def test_bounds_stay_within_base_extent(self, demo_config):
        mesh = build_cone(demo_config).to_mesh()
        lo, hi = mesh.bounds()
        assert lo[0] == pytest.approx(0.0)
        assert hi[0] == pytest.approx(demo_config.shape.axial_length)
