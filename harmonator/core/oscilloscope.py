from __future__ import annotations

import math

import numpy as np

from ..utils.ramps import BASELINE_CHAR, TRACE_CHAR
from .frame import Frame, RenderMode, blank_grid, check_render_args, grid_to_frame, normalized_axis
from .partials import PartialSet


def scope_signal(partials: PartialSet, width: int, t: float) -> np.ndarray:
    """tanh-saturated partial sum sampled at each column, in [-1, 1]."""
    xn = normalized_axis(width)
    phase = (
        2 * math.pi * partials.frequency[:, None] * xn[None, :]
        + partials.angular_velocity[:, None] * t
        + partials.phase[:, None]
    )
    s = (partials.amplitude[:, None] * np.sin(phase)).sum(axis=0)
    return np.tanh(s)


def render_oscilloscope(partials: PartialSet, width: int, height: int, t: float) -> Frame:
    check_render_args(partials, width, height)
    grid = blank_grid(width, height)
    mid = height // 2
    grid[mid, :] = BASELINE_CHAR

    value = scope_signal(partials, width, t)
    rows = mid - np.round(value * 0.4 * height).astype(int)
    rows = np.clip(rows, 0, height - 1)
    # every other column, so the trace reads as a dotted line
    cols = np.arange(0, width, 2)
    grid[rows[cols], cols] = TRACE_CHAR
    return grid_to_frame(grid, RenderMode.OSCILLOSCOPE, len(partials))
