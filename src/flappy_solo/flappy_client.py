#!/usr/bin/env python3
"""
flappy_client.py

Window host: opens the pygame window, forwards pointer events to the input
adapter and runs the simulation and rendering on the frame driver thread.
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from .assets import AssetLoader
from .constants import BASE_SIZE, SCALE, WINDOW_TITLE
from .errors import AssetMissingError
from .frame_driver import FrameDriver
from .game_engine import GameEngine
from .input_adapter import InputAdapter
from .renderer import Renderer

logger = logging.getLogger(__name__)

EVENT_WAIT_MS = 100


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


class FlappyClient:
    def __init__(self, asset_dir: Optional[str] = None, scale: int = SCALE):
        pygame.init()
        size = BASE_SIZE * scale
        # No RESIZABLE flag: the window keeps the canvas size
        self.screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Game Logic ---
        assets = AssetLoader(asset_dir).load()
        geometry = assets.geometry(size)
        self.engine = GameEngine(geometry=geometry)
        self.input = InputAdapter()
        self.renderer = Renderer(assets, geometry)

        self.driver = FrameDriver(self._update, self._render)

    def _update(self):
        self.engine.step(self.input.drain())

    def _render(self):
        self.renderer.draw(self.engine.state)
        self.renderer.present(self.screen)

    def run(self):
        """Pumps window events until the window closes or the frame loop dies."""
        self.driver.start()
        try:
            while self.driver.running.is_set():
                event = pygame.event.wait(EVENT_WAIT_MS)
                if event.type == pygame.QUIT:
                    logger.info("Window closed.")
                    break
                self.input.handle_event(event)
        finally:
            self.driver.stop()
            try:
                self.driver.join()
            finally:
                pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Single-screen Flappy Bird.")
    parser.add_argument("--scale", type=int, default=SCALE,
                        help=f"integer window scale of the {BASE_SIZE}px canvas")
    parser.add_argument("--assets", default=None,
                        help="directory holding the PNG assets")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    if args.scale < 1:
        parser.error("--scale must be a positive integer")

    setup_logging(args.debug)
    try:
        client = FlappyClient(asset_dir=args.assets, scale=args.scale)
    except AssetMissingError as e:
        logger.error(str(e))
        pygame.quit()
        return 1
    client.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
