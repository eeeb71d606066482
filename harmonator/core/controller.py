from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .render import render_frame
from .state import HarmonicState

logger = logging.getLogger(__name__)


class AnimationController:
    """Runs the render loop on one background thread.

    The loop re-reads config and partials from ``state`` every frame, so edits
    show up on the next frame without a restart. Elapsed time is measured from
    the moment ``start`` was called.
    """

    def __init__(self, state: HarmonicState, surface, clock: Callable[[], float] = time.monotonic):
        self._state = state
        self._surface = surface
        self._clock = clock
        self._lock = threading.Lock()
        self._stop_flag = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._origin = 0.0
        self._frame_count = 0

    @property
    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def start(self) -> bool:
        with self._lock:
            if self._thread is not None:
                if self._thread.is_alive():
                    return False
                self._thread = None
            if not self._state.has_sequence:
                logger.warning("start ignored: no sequence generated yet")
                return False
            # one stop flag per loop; an exiting loop keeps its own
            self._stop_flag = threading.Event()
            self._origin = self._clock()
            self._frame_count = 0
            self._thread = threading.Thread(
                target=self._render_loop,
                args=(self._stop_flag, self._origin),
                name="harmonator-render",
                daemon=True,
            )
            self._thread.start()
        logger.info("animation started")
        return True

    def stop(self, timeout: Optional[float] = 1.0) -> bool:
        """Request a stop and wait up to ``timeout`` for the loop to exit.

        A loop still busy with a slow frame stays registered, so ``start``
        keeps refusing until it has actually exited.
        """
        with self._lock:
            thread = self._thread
            if thread is None:
                return False
            self._stop_flag.set()
            if thread is not threading.current_thread():
                thread.join(timeout)
            if thread.is_alive():
                logger.warning("render thread did not exit within %ss", timeout)
            else:
                self._thread = None
        logger.info("animation stopped after %d frames", self._frame_count)
        return True

    def _render_loop(self, stop_flag: threading.Event, origin: float):
        while not stop_flag.is_set():
            config = self._state.config
            partials = self._state.snapshot.partials
            if len(partials):
                try:
                    t = self._clock() - origin
                    frame = render_frame(config.mode, partials, config.width, config.height, t)
                except Exception:
                    logger.exception("render failed in %s mode", config.mode.label)
                else:
                    if stop_flag.is_set():
                        break
                    self._surface.present(frame)
                    self._frame_count += 1
            stop_flag.wait(config.frame_interval)

    def __enter__(self) -> "AnimationController":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
