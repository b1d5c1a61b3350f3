"""
renderer.py: Composes a frame off-screen and presents it to the window.

present() is called from the frame thread; SDL allows that on X11, Windows
and the dummy driver but not on macOS.
"""

from typing import Optional

import pygame

from .assets import Assets
from .constants import (
    HUD_COLOR, HUD_FONT, HUD_FONT_SIZE, RECORD_TEXT_POS, POINT_TEXT_OFFSET
)
from .data_models import GameState, ScrollLayer
from .geometry import WorldGeometry


class Renderer:
    """
    Draws the game state into its own view surface. present() blits the
    finished view onto the display in one piece.
    """

    def __init__(self, assets: Assets, geometry: WorldGeometry):
        self.geometry = geometry
        size = geometry.size
        self.view = pygame.Surface((size, size))

        scale = pygame.transform.scale
        self.background = scale(assets.background, geometry.background)
        self.floor = scale(assets.floor, geometry.floor)
        self.top_pipe = scale(assets.top_pipe, geometry.pipe)
        self.bottom_pipe = scale(assets.bottom_pipe, geometry.pipe)
        self.flap_frames = [scale(frame, geometry.flappy) for frame in assets.flap_frames]
        self.tap_to_start = scale(assets.tap_to_start, geometry.tap_to_start)
        tap_width, tap_height = geometry.tap_to_start
        self.tap_to_start_pos = (size // 2 - tap_width // 2, size // 2 - tap_height // 2)

        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(HUD_FONT, HUD_FONT_SIZE * geometry.distortion, bold=True)

    def draw(self, state: GameState) -> pygame.Surface:
        view = self.view
        self._draw_layer(self.background, state.background)

        for obstacle in state.obstacles:
            view.blit(self.top_pipe, (obstacle.x, obstacle.top.y))
            view.blit(self.bottom_pipe, (obstacle.x, obstacle.bottom.y))

        self._draw_layer(self.floor, state.floor)

        flappy = state.flappy
        view.blit(self.flap_frames[flappy.frame_index], (int(flappy.box.x), int(flappy.box.y)))

        if not state.in_game:
            view.blit(self.tap_to_start, self.tap_to_start_pos)
            self._draw_text(f"Record: {state.score.record}", RECORD_TEXT_POS)
        else:
            offset_x, baseline = POINT_TEXT_OFFSET
            self._draw_text(str(state.score.point), (self.geometry.size - offset_x, baseline))
        return view

    def present(self, screen: Optional[pygame.Surface] = None):
        screen = screen or pygame.display.get_surface()
        if screen is None:
            return
        screen.blit(self.view, (0, 0))
        pygame.display.flip()

    def _draw_layer(self, image: pygame.Surface, layer: ScrollLayer):
        box = layer.box
        self.view.blit(image, (box.x, box.y))
        self.view.blit(image, (box.x + box.width, box.y))

    def _draw_text(self, text: str, baseline_pos):
        surface = self.font.render(text, True, HUD_COLOR)
        x, baseline = baseline_pos
        self.view.blit(surface, (x, baseline - self.font.get_ascent()))
