"""
input_adapter.py: Translates pointer events into simulation control signals.

Events arrive on the window thread; the frame thread drains them once at the
top of every update, so an input is always applied by exactly one step.
"""

import logging
import threading
from enum import Enum
from typing import List

import pygame

logger = logging.getLogger(__name__)

# Left, middle, right. pygame 2 reports wheel motion as buttons 4 and up
POINTER_BUTTONS = (1, 2, 3)


class Signal(Enum):
    ASCEND = "ascend"                   # Pointer down
    DESCEND = "descend"                 # Pointer up, also starts a run


class InputAdapter:
    def __init__(self):
        self._pending: List[Signal] = []
        self._lock = threading.Lock()

    def pointer_down(self):
        self._push(Signal.ASCEND)

    def pointer_up(self):
        self._push(Signal.DESCEND)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feeds a pygame event in. Returns True if it was a recognized pointer event."""
        if getattr(event, "button", None) not in POINTER_BUTTONS:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.pointer_down()
            return True
        if event.type == pygame.MOUSEBUTTONUP:
            self.pointer_up()
            return True
        return False

    def drain(self) -> List[Signal]:
        """Takes every pending signal in arrival order."""
        with self._lock:
            signals, self._pending = self._pending, []
        return signals

    def _push(self, signal: Signal):
        with self._lock:
            self._pending.append(signal)
        logger.debug(f"Input signal queued: {signal.value}")
