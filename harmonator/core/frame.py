from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np


class RenderMode(IntEnum):
    OSCILLOSCOPE = 1
    LISSAJOUS = 2
    PLASMA = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Frame:
    rows: Tuple[str, ...]
    status: str

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def text(self) -> str:
        return "\n".join(self.rows + (self.status,))


def blank_grid(width: int, height: int) -> np.ndarray:
    return np.full((height, width), " ", dtype="<U1")


def status_line(mode: RenderMode, width: int, height: int, partial_count: int) -> str:
    return f"[{RenderMode(mode).label}] canvas {width}x{height} | partials {partial_count}"


def grid_to_frame(grid: np.ndarray, mode: RenderMode, partial_count: int) -> Frame:
    rows, cols = grid.shape
    lines = tuple("".join(grid[r]) for r in range(rows))
    return Frame(lines, status_line(mode, cols, rows, partial_count))


def normalized_axis(n: int) -> np.ndarray:
    return np.arange(n, dtype=np.float64) / max(1, n - 1)


def check_render_args(partials, width: int, height: int) -> None:
    if len(partials) == 0:
        raise ValueError("cannot render without partials")
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid canvas {width}x{height}")
