from __future__ import annotations

import logging
import threading
from typing import Optional

from .sequence import iter_terms
from .state import HarmonicState

logger = logging.getLogger(__name__)


def format_term(exponent: int, value: int) -> str:
    return f"Term {exponent}: {value}"


class TermStreamer:
    """Writes one "Term n: value" line per frame interval until stopped.

    Base and modulus are re-read every tick; a change carries on from the
    current exponent with the new parameters.
    """

    def __init__(self, state: HarmonicState, surface):
        self._state = state
        self._surface = surface
        self._lock = threading.Lock()
        self._stop_flag = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.exponent = 1

    @property
    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self, start: int = 1) -> bool:
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return False
            if not self._state.has_sequence:
                logger.warning("term stream ignored: no sequence generated yet")
                return False
            self.exponent = start
            self._stop_flag = threading.Event()
            self._thread = threading.Thread(
                target=self._stream_loop, args=(self._stop_flag,), name="harmonator-terms", daemon=True
            )
            self._thread.start()
        return True

    def stop(self, timeout: Optional[float] = 1.0) -> bool:
        with self._lock:
            thread = self._thread
            if thread is None:
                return False
            self._stop_flag.set()
            thread.join(timeout)
            if not thread.is_alive():
                self._thread = None
        return True

    def _stream_loop(self, stop_flag: threading.Event):
        params = None
        terms = None
        while not stop_flag.is_set():
            snap = self._state.snapshot
            if (snap.base, snap.modulus) != params:
                params = (snap.base, snap.modulus)
                terms = iter_terms(snap.base, snap.modulus, start=self.exponent)
            exponent, value = next(terms)
            self._surface.write(format_term(exponent, value) + "\n")
            self.exponent = exponent + 1
            stop_flag.wait(self._state.config.frame_interval)
