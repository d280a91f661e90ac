"""
Interactive view state for renderers that display a petal cone.

Holds the drag/keyboard rotation angles that a window toolkit updates from its
input callbacks. Geometry never reads it; only the model transform does.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from .geometry import Mat4, Mesh, mat_mul, mat_rotate_x, mat_rotate_y

# Fixed initial orientation (degrees) applied before the interactive rotation.
INITIAL_TILT_X = 35.0
INITIAL_TURN_Y = -35.0

# key name -> (delta rot_x, delta rot_y) in units of key_step
_KEY_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "left": (0, -1),
    "right": (0, 1),
    "up": (-1, 0),
    "down": (1, 0),
}


@dataclass
class ViewState:
    rot_x: float = 0.0
    rot_y: float = 0.0
    sensitivity: float = 0.5  # degrees per pixel of drag
    key_step: float = 3.0     # degrees per arrow key press
    dragging: bool = False
    last_x: int = 0
    last_y: int = 0

    def press(self, x: int, y: int) -> None:
        self.dragging = True
        self.last_x, self.last_y = x, y

    def release(self) -> None:
        self.dragging = False

    def drag(self, x: int, y: int) -> bool:
        """Apply pointer motion; returns True when the view changed."""
        if not self.dragging:
            return False
        dx = x - self.last_x
        dy = y - self.last_y
        # horizontal drag turns about Y, vertical drag about X
        self.rot_y += dx * self.sensitivity
        self.rot_x += dy * self.sensitivity
        self.last_x, self.last_y = x, y
        return True

    def key(self, name: str) -> bool:
        """Arrow keys rotate by key_step; "r" resets. Unknown keys are ignored."""
        name = name.lower()
        if name == "r":
            self.reset()
            return True
        direction = _KEY_DIRECTIONS.get(name)
        if direction is None:
            return False
        self.rot_x += direction[0] * self.key_step
        self.rot_y += direction[1] * self.key_step
        return True

    def reset(self) -> None:
        self.rot_x = self.rot_y = 0.0

    def model_matrix(self) -> Mat4:
        """Initial orientation followed by the interactive X then Y rotation."""
        m = mat_rotate_x(math.radians(INITIAL_TILT_X))
        m = mat_mul(m, mat_rotate_y(math.radians(INITIAL_TURN_Y)))
        m = mat_mul(m, mat_rotate_x(math.radians(self.rot_x)))
        return mat_mul(m, mat_rotate_y(math.radians(self.rot_y)))

    def apply(self, mesh: Mesh) -> Mesh:
        """Copy of `mesh` in view orientation; the input is left untouched."""
        return mesh.transformed(self.model_matrix())
