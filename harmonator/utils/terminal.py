from __future__ import annotations

import sys
import threading
from typing import List, TextIO

_CLEAR_SCREEN = "\033[2J"
_CURSOR_HOME = "\033[H"
_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"


class TerminalSurface:
    """Redraws frames in place on an ANSI terminal."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self.caption = ""
        self.lock = threading.Lock()

    def present(self, frame) -> None:
        with self.lock:
            text = frame.text() + "\n"
            if self.caption:
                text += self.caption
            self.stream.write(_CLEAR_SCREEN + _CURSOR_HOME + text)
            self.stream.flush()

    def write(self, text: str) -> None:
        with self.lock:
            self.stream.write(text)
            self.stream.flush()

    def __enter__(self) -> "TerminalSurface":
        self.write(_HIDE_CURSOR)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.write(_SHOW_CURSOR)


class MemorySurface:
    """Keeps presented frames in memory instead of drawing them."""

    def __init__(self, limit: int = 0):
        self.limit = limit
        self.frames: List[object] = []
        self.lines: List[str] = []
        self.lock = threading.Lock()

    def present(self, frame) -> None:
        with self.lock:
            self.frames.append(frame)
            if self.limit and len(self.frames) > self.limit:
                del self.frames[0]

    def write(self, text: str) -> None:
        with self.lock:
            self.lines.extend(text.splitlines())
