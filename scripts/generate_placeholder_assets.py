#!/usr/bin/env python3
"""
Draw flat-colored placeholder images for every game asset.

Writes into src/flappy_solo/assets/ by default, which only an editable install
reads. For a regular install pass a directory and start the game with
`flappy-solo --assets <directory>`. Sizes match DEFAULT_ASSET_SIZES.
"""

import argparse
import os
import sys

import pygame

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from flappy_solo.constants import (
    ASSET_FILES, DEFAULT_ASSET_SIZES, FLAP_FRAME_COUNT, FLAP_FRAME_SIZE
)

ASSET_DIR = os.path.join(os.path.dirname(__file__), '..', 'src', 'flappy_solo', 'assets')

COLORS = {
    "background": (78, 192, 202),
    "floor": (222, 216, 149),
    "tap_to_start": (250, 250, 250),
    "top_pipe": (84, 168, 48),
    "bottom_pipe": (84, 168, 48),
}
FLAP_COLORS = [(250, 200, 40), (250, 170, 30), (240, 140, 20)]


def make_sprite_sheet() -> pygame.Surface:
    frame_width, frame_height = FLAP_FRAME_SIZE
    sheet = pygame.Surface((frame_width * FLAP_FRAME_COUNT, frame_height), pygame.SRCALPHA)
    for i, color in enumerate(FLAP_COLORS):
        pygame.draw.ellipse(sheet, color, (i * frame_width, 0, frame_width, frame_height))
    return sheet


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write placeholder game images.")
    parser.add_argument("target", nargs="?", default=ASSET_DIR,
                        help="directory to write into (pass the same path to --assets)")
    target = parser.parse_args(argv).target

    os.makedirs(target, exist_ok=True)
    for name, color in COLORS.items():
        surface = pygame.Surface(DEFAULT_ASSET_SIZES[name], pygame.SRCALPHA)
        surface.fill(color)
        path = os.path.join(target, ASSET_FILES[name])
        pygame.image.save(surface, path)
        print(f"  {name}: {path}")

    path = os.path.join(target, ASSET_FILES["flappy_sheet"])
    pygame.image.save(make_sprite_sheet(), path)
    print(f"  flappy_sheet: {path}")


if __name__ == "__main__":
    main()
