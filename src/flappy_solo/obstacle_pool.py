"""
obstacle_pool.py: Fixed-size round-robin recycler for obstacles.
"""

import logging
from typing import List

from .constants import OBSTACLE_POOL_SIZE, OBSTACLE_COUNT
from .data_models import Obstacle

logger = logging.getLogger(__name__)


class ObstaclePool:
    """
    Hands out pre-allocated obstacles in round-robin order.

    The pool does not track which obstacles are in use. Capacity must stay
    above the number of obstacles alive at once, or a live obstacle gets
    overwritten by a later acquire.
    """

    def __init__(self, size: int = OBSTACLE_POOL_SIZE, peak_live: int = OBSTACLE_COUNT):
        if size <= peak_live:
            raise ValueError(
                f"Pool capacity {size} must exceed peak live obstacles {peak_live}")
        self._obstacles: List[Obstacle] = [Obstacle() for _ in range(size)]
        self._next_available = 0
        logger.debug(f"Obstacle pool allocated with {size} obstacles")

    def __len__(self):
        return len(self._obstacles)

    @property
    def cursor(self) -> int:
        return self._next_available

    def acquire(self, x: int, y: int, width: int, height: int) -> Obstacle:
        """Re-initializes the obstacle under the cursor in place and advances the cursor."""
        obstacle = self._obstacles[self._next_available]
        obstacle.x = x
        obstacle.y = y
        obstacle.width = width
        obstacle.height = height
        obstacle.top.set_bounds(x, y, width, height)
        obstacle.bottom.set_bounds(x, height + obstacle.vertical_gap, width, height)
        self._next_available = (self._next_available + 1) % len(self._obstacles)
        return obstacle
