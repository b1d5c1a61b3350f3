"""
game_engine.py: The authoritative single-player world simulation.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable

from .constants import (
    BACKGROUND_SPEED, FLOOR_SPEED, OBSTACLE_COUNT, OBSTACLE_SPEED,
    OBSTACLE_SPACING, OBSTACLE_RECYCLE_MARGIN, IDLE_X_WIDTHS
)
from .data_models import Box, Direction, Flappy, GameState, ScrollLayer
from .geometry import WorldGeometry
from .input_adapter import Signal
from .obstacle_pool import ObstaclePool
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the game state and advances it one frame per step().
    Inherits kinematics, scrolling and bounds checks from PhysicsCore.
    """
    geometry: WorldGeometry = field(default_factory=WorldGeometry.default)
    rng: random.Random = field(default_factory=random.Random)
    pool: ObstaclePool = field(default_factory=ObstaclePool)
    tick_count: int = 0
    state: GameState = field(init=False)

    def __post_init__(self):
        g = self.geometry
        floor_width, floor_height = g.floor
        self.state = GameState(
            background=ScrollLayer(Box(0, 0, *g.background), BACKGROUND_SPEED),
            floor=ScrollLayer(Box(0, g.size - floor_height, floor_width, floor_height), FLOOR_SPEED),
            flappy=Flappy(box=Box(0, 0, *g.flappy)),
        )
        self._reset_this_tick = False
        self._start_position_obstacles()
        self._start_position_flappy()

    # ----------------- Input -----------------

    def apply_signal(self, signal: Signal):
        flappy = self.state.flappy
        if signal is Signal.ASCEND:
            flappy.direction = Direction.ASCEND
        elif signal is Signal.DESCEND:
            if not self.state.in_game:
                logger.info(f"Run started (record {self.state.score.record})")
            self.state.in_game = True
            flappy.direction = Direction.DESCEND

    # ----------------- Frame step -----------------

    def step(self, signals: Iterable[Signal] = ()):
        """
        Advances the world by one frame. Signals drained from the input
        adapter are applied first, in arrival order.
        """
        self.tick_count += 1
        self._reset_this_tick = False
        for signal in signals:
            self.apply_signal(signal)

        state = self.state
        self.scroll(state.background)
        self.scroll(state.floor)
        self.advance_animation(state.flappy)

        if state.in_game:
            self._step_obstacles()

        self.step_player(state.flappy)

        if self.out_of_bounds(state.flappy.box, state.floor.box.y):
            self.game_over()

    def _step_obstacles(self):
        state = self.state
        player = state.flappy.box
        for obstacle in state.obstacles:
            obstacle.move_x(OBSTACLE_SPEED)

            if obstacle.x + obstacle.width < 0:
                obstacle.reset_to_new_position(
                    self.geometry.size + obstacle.width + OBSTACLE_RECYCLE_MARGIN, self.rng)

            if obstacle.intersects(player):
                self.game_over()
                # The layout was just rebuilt; the rest belongs to the next run
                return

            if obstacle.passed_on(player):
                obstacle.scored = True
                state.score.credit()

    def game_over(self):
        """
        Zeroes the run score and returns to the idle layout. Further calls
        before the next step are no-ops, so simultaneous hits reset once.
        """
        if self._reset_this_tick:
            return
        self._reset_this_tick = True
        score = self.state.score
        logger.info(f"Game over: score {score.point}, record {score.record}")
        score.point = 0
        self._start_position_obstacles()
        self._start_position_flappy()

    # ----------------- Layout -----------------

    def _start_position_obstacles(self):
        size = self.geometry.size
        pipe_width, pipe_height = self.geometry.pipe
        obstacles = []
        for i in range(OBSTACLE_COUNT):
            obstacle = self.pool.acquire(0, 0, pipe_width, pipe_height)
            obstacle.reset_to_new_position(size + pipe_width + i * OBSTACLE_SPACING, self.rng)
            obstacles.append(obstacle)
        self.state.obstacles = obstacles

    def _start_position_flappy(self):
        state = self.state
        box = state.flappy.box
        size = self.geometry.size
        state.flappy.direction = Direction.NONE
        state.flappy.velocity = 0.0
        state.in_game = False
        box.x = size // 2 - box.width * IDLE_X_WIDTHS
        box.y = size // 2 - box.height // 2
