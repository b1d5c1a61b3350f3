"""
frame_driver.py: Runs update + render back to back on a dedicated thread.
"""

import logging
import threading
import time
from typing import Callable, Optional

from .constants import FRAME_SLEEP

logger = logging.getLogger(__name__)


class FrameDriver:
    """
    Fixed-cadence loop. Sleeps a constant FRAME_SLEEP after every frame;
    frame time is not measured or compensated.
    """

    def __init__(self, update: Callable[[], None], render: Callable[[], None],
                 frame_sleep: float = FRAME_SLEEP,
                 sleep: Callable[[float], None] = time.sleep):
        self.update = update
        self.render = render
        self.frame_sleep = frame_sleep
        self._sleep = sleep
        self.frame_count = 0
        self.error: Optional[BaseException] = None

        self.running = threading.Event()
        self.thread: Optional[threading.Thread] = None

    def start(self):
        """Starts the loop thread. A second call while running is ignored."""
        if self.thread is not None:
            return
        self.running.set()
        self.thread = threading.Thread(target=self._run, name="frame-driver", daemon=True)
        self.thread.start()

    def stop(self):
        self.running.clear()

    def join(self, timeout: Optional[float] = None):
        """Waits for the loop to finish and re-raises whatever stopped it."""
        if self.thread is not None:
            self.thread.join(timeout)
        if self.error is not None:
            raise self.error

    def run_frame(self):
        self.update()
        self.render()
        self.frame_count += 1

    def _run(self):
        logger.info(f"Frame thread started. Target rate: {1 / self.frame_sleep:.0f} Hz.")
        try:
            while self.running.is_set():
                self.run_frame()
                self._sleep(self.frame_sleep)
        except Exception as e:
            logger.exception("Frame loop crashed")
            self.error = e
        finally:
            self.running.clear()
            logger.info(f"Frame thread stopped after {self.frame_count} frames.")
