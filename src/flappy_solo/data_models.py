"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from types import ModuleType
from typing import List, Union

from .constants import (
    VERTICAL_GAP, TOP_PIPE_MIN_OFFSET, TOP_PIPE_OFFSET_RANGE,
    FLAP_FRAME_COUNTER_START
)


class Direction(Enum):
    """Vertical motion mode of the player."""
    NONE = "none"
    ASCEND = "ascend"
    DESCEND = "descend"


@dataclass
class Box:
    """Axis-aligned rectangle. The player box carries float coordinates."""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    def set_bounds(self, x: float, y: float, width: float, height: float):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def intersects(self, other: "Box") -> bool:
        """True iff both boxes are non-empty and share positive area."""
        if self.width <= 0 or self.height <= 0 or other.width <= 0 or other.height <= 0:
            return False
        return (self.x < other.x + other.width and other.x < self.x + self.width
                and self.y < other.y + other.height and other.y < self.y + self.height)


@dataclass
class Obstacle:
    """A top/bottom pipe pair scrolling left as one unit."""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    vertical_gap: int = VERTICAL_GAP
    scored: bool = False
    top: Box = field(default_factory=Box)
    bottom: Box = field(default_factory=Box)

    def __post_init__(self):
        self.top.set_bounds(self.x, self.y, self.width, self.height)
        self.bottom.set_bounds(self.x, self.height + self.vertical_gap, self.width, self.height)

    def reset_to_new_position(self, new_x: int, rng: Union[random.Random, ModuleType] = random):
        """Moves the pair to new_x with a fresh random gap height and clears scored."""
        self.x = new_x
        self.top.x = new_x
        self.bottom.x = new_x
        self.top.y = -(rng.randrange(TOP_PIPE_OFFSET_RANGE) + TOP_PIPE_MIN_OFFSET)
        self.bottom.y = self.top.y + self.height + self.vertical_gap
        self.scored = False

    def intersects(self, box: Box) -> bool:
        return box.intersects(self.top) or box.intersects(self.bottom)

    def passed_on(self, box: Box) -> bool:
        """True once the box's x has cleared the trailing edge of an uncredited pair."""
        return box.x > self.x + self.width and not self.scored

    def move_x(self, dx: int):
        self.x -= dx
        self.top.x -= dx
        self.bottom.x -= dx


@dataclass
class Flappy:
    """The player sprite state."""
    box: Box = field(default_factory=Box)
    velocity: float = 0.0
    direction: Direction = Direction.NONE

    # Animation
    frame_index: int = 0
    frame_counter: int = FLAP_FRAME_COUNTER_START


@dataclass
class ScrollLayer:
    """A horizontally tiled layer drawn twice side by side."""
    box: Box
    speed: int


@dataclass
class Score:
    point: int = 0                 # Current run
    record: int = 0                # Best run this process, never reset

    def credit(self):
        self.point += 1
        if self.point > self.record:
            self.record = self.point


@dataclass
class GameState:
    """Everything the per-frame update mutates and the renderer reads."""
    background: ScrollLayer
    floor: ScrollLayer
    flappy: Flappy = field(default_factory=Flappy)
    obstacles: List[Obstacle] = field(default_factory=list)
    score: Score = field(default_factory=Score)
    in_game: bool = False
