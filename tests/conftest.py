import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy_solo.constants import ASSET_FILES, DEFAULT_ASSET_SIZES, FLAP_FRAME_SIZE
from flappy_solo.game_engine import GameEngine


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(rng):
    return GameEngine(rng=rng)


@pytest.fixture
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def asset_dir(tmp_path, pygame_session):
    """A directory holding plain images with the stock asset sizes."""
    for name, dims in DEFAULT_ASSET_SIZES.items():
        surface = pygame.Surface(dims)
        surface.fill((10, 120, 200))
        pygame.image.save(surface, str(tmp_path / ASSET_FILES[name]))

    frame_width, frame_height = FLAP_FRAME_SIZE
    sheet = pygame.Surface((frame_width * 3, frame_height))
    for i, color in enumerate([(255, 0, 0), (0, 255, 0), (0, 0, 255)]):
        sheet.fill(color, pygame.Rect(i * frame_width, 0, frame_width, frame_height))
    pygame.image.save(sheet, str(tmp_path / ASSET_FILES["flappy_sheet"]))
    return tmp_path
