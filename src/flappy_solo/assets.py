"""
assets.py: Loads the game's images by logical name with pygame.

Loading fails fast: a missing or corrupt image raises AssetMissingError
instead of leaving a hole that would only show up while drawing.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

import pygame

from .constants import ASSET_FILES, FLAP_FRAME_COUNT, FLAP_FRAME_SIZE, SIZE
from .errors import AssetMissingError
from .geometry import WorldGeometry

logger = logging.getLogger(__name__)

DEFAULT_ASSET_DIR = Path(__file__).parent / "assets"


@dataclass
class Assets:
    """Decoded images, unscaled."""
    background: pygame.Surface
    floor: pygame.Surface
    tap_to_start: pygame.Surface
    top_pipe: pygame.Surface
    bottom_pipe: pygame.Surface
    flap_frames: List[pygame.Surface]

    def geometry(self, size: int = SIZE) -> WorldGeometry:
        sizes = {
            "background": self.background.get_size(),
            "floor": self.floor.get_size(),
            "tap_to_start": self.tap_to_start.get_size(),
            "top_pipe": self.top_pipe.get_size(),
        }
        return WorldGeometry.from_sizes(sizes, self.flap_frames[0].get_size(), size)


class AssetLoader:
    def __init__(self, asset_dir: Union[str, Path, None] = None,
                 files: Optional[Dict[str, str]] = None):
        self.asset_dir = Path(asset_dir) if asset_dir is not None else DEFAULT_ASSET_DIR
        self.files = files or ASSET_FILES

    def load_image(self, name: str) -> pygame.Surface:
        """Loads one image by logical name."""
        try:
            path = self.asset_dir / self.files[name]
        except KeyError:
            raise AssetMissingError(name, self.asset_dir, "unknown asset name") from None
        if not path.is_file():
            raise AssetMissingError(name, path, "no such file")
        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            raise AssetMissingError(name, path, str(e)) from e

        # Pixel format conversion needs a display mode
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        logger.debug(f"Loaded asset {name} {image.get_size()} from {path}")
        return image

    def slice_frames(self, sheet: pygame.Surface) -> List[pygame.Surface]:
        """Cuts the horizontal sprite sheet into equally sized animation frames."""
        frame_width, frame_height = FLAP_FRAME_SIZE
        needed = frame_width * FLAP_FRAME_COUNT
        if sheet.get_width() < needed or sheet.get_height() < frame_height:
            raise AssetMissingError(
                "flappy_sheet", self.asset_dir / self.files["flappy_sheet"],
                f"sprite sheet is {sheet.get_size()}, need at least {(needed, frame_height)}")
        return [
            sheet.subsurface(pygame.Rect(i * frame_width, 0, frame_width, frame_height)).copy()
            for i in range(FLAP_FRAME_COUNT)
        ]

    def load(self) -> Assets:
        """Loads every asset the game draws."""
        assets = Assets(
            background=self.load_image("background"),
            floor=self.load_image("floor"),
            tap_to_start=self.load_image("tap_to_start"),
            top_pipe=self.load_image("top_pipe"),
            bottom_pipe=self.load_image("bottom_pipe"),
            flap_frames=self.slice_frames(self.load_image("flappy_sheet")),
        )
        logger.info(f"Loaded {len(self.files)} assets from {self.asset_dir}")
        return assets
