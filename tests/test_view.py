"""Tests for the interactive view state."""

import math

import numpy as np
import pytest

from petalcone.geometry import Mesh, apply_mat, mat_mul, mat_rotate_x, mat_rotate_y
from petalcone.view import ViewState


class TestDrag:
    def test_drag_requires_press(self):
        view = ViewState()
        assert not view.drag(10, 10)
        assert (view.rot_x, view.rot_y) == (0.0, 0.0)

    def test_drag_rotates_by_sensitivity(self):
        view = ViewState()
        view.press(100, 100)
        assert view.drag(110, 96)
        assert view.rot_y == pytest.approx(5.0)
        assert view.rot_x == pytest.approx(-2.0)

    def test_drag_is_incremental(self):
        view = ViewState()
        view.press(0, 0)
        view.drag(4, 0)
        view.drag(8, 0)
        assert view.rot_y == pytest.approx(4.0)

    def test_release_stops_drag(self):
        view = ViewState()
        view.press(0, 0)
        view.release()
        assert not view.drag(50, 50)
        assert view.rot_y == 0.0


class TestKeys:
    @pytest.mark.parametrize("key, expected", [
        ("left", (0.0, -3.0)),
        ("right", (0.0, 3.0)),
        ("up", (-3.0, 0.0)),
        ("down", (3.0, 0.0)),
    ])
    def test_arrow_keys(self, key, expected):
        view = ViewState()
        assert view.key(key)
        assert (view.rot_x, view.rot_y) == expected

    def test_reset_key(self):
        view = ViewState(rot_x=12.0, rot_y=-7.5)
        assert view.key("R")
        assert (view.rot_x, view.rot_y) == (0.0, 0.0)

    def test_unknown_key_is_ignored(self):
        view = ViewState(rot_x=1.0)
        assert not view.key("q")
        assert view.rot_x == 1.0


class TestModelMatrix:
    def test_rest_pose_is_initial_orientation(self):
        expected = mat_mul(mat_rotate_x(math.radians(35.0)), mat_rotate_y(math.radians(-35.0)))
        np.testing.assert_allclose(ViewState().model_matrix(), expected, atol=1e-12)

    def test_is_a_rotation(self):
        view = ViewState(rot_x=20.0, rot_y=-110.0)
        m = np.asarray(view.model_matrix(), dtype=float)
        r = m[:3, :3]
        np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        p = apply_mat((1.0, 2.0, 3.0), view.model_matrix())
        assert np.linalg.norm(p) == pytest.approx(np.linalg.norm((1.0, 2.0, 3.0)))

    def test_full_turn_matches_rest_pose(self):
        np.testing.assert_allclose(ViewState(rot_y=360.0).model_matrix(), ViewState().model_matrix(), atol=1e-12)

    def test_apply_rotates_a_copy(self):
        mesh = Mesh([(1.0, 0.0, 0.0)], [], [(1.0, 0.0, 0.0)])
        view = ViewState(rot_y=25.0)
        moved = view.apply(mesh)
        np.testing.assert_allclose(moved.vertices[0], apply_mat((1.0, 0.0, 0.0), view.model_matrix()))
        assert np.linalg.norm(moved.normals[0]) == pytest.approx(1.0)
        assert mesh.vertices[0] == (1.0, 0.0, 0.0)
