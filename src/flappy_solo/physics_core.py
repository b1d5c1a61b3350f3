"""
physics_core.py: The deterministic per-frame kinematics, scrolling and bounds logic.
"""

from typing import Tuple

from .constants import (
    GRAVITY, FLAP_VELOCITY, FLAP_FRAME_COUNT, FLAP_FRAME_INTERVAL
)
from .data_models import Box, Direction, Flappy, ScrollLayer


class PhysicsCore:
    """
    Stateless frame-step helpers. All units are per frame; there is no
    delta time since the loop runs at a fixed cadence.
    """

    GRAVITY = GRAVITY
    FLAP_VELOCITY = FLAP_VELOCITY

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Accelerates the fall by one frame of gravity and moves by the new velocity."""
        velocity += self.GRAVITY
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity snapped on an ascending frame."""
        return self.FLAP_VELOCITY

    def step_player(self, flappy: Flappy):
        """
        Applies the vertical motion of the current direction. The direction is
        latched: it stays whatever the last input set until a game over.
        """
        box = flappy.box
        if flappy.direction is Direction.DESCEND:
            box.y, flappy.velocity = self.apply_gravity_and_movement(box.y, flappy.velocity)
        elif flappy.direction is Direction.ASCEND:
            flappy.velocity = self.flap()
            box.y += flappy.velocity

    def scroll(self, layer: ScrollLayer):
        """Moves a tiled layer left, wrapping by its own width once fully off screen."""
        box = layer.box
        box.x -= layer.speed
        if box.x + box.width <= 0:
            box.x += box.width

    def advance_animation(self, flappy: Flappy):
        flappy.frame_counter += 1
        if flappy.frame_counter > FLAP_FRAME_INTERVAL:
            flappy.frame_counter = 0
            flappy.frame_index = (flappy.frame_index + 1) % FLAP_FRAME_COUNT

    def out_of_bounds(self, box: Box, floor_top: float) -> bool:
        """Floor/ceiling test: touching either one ends the run."""
        return box.y + box.height >= floor_top or box.y <= 0
