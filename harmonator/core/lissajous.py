from __future__ import annotations

import math

import numpy as np

from ..utils.ramps import CURVE_CHAR
from .frame import Frame, RenderMode, blank_grid, check_render_args, grid_to_frame
from .partials import PartialSet

FILL = 0.9


def lissajous_points(partials: PartialSet, count: int, t: float):
    s = np.arange(count, dtype=np.float64) / count
    f = partials.frequency[:, None]
    w = partials.angular_velocity[:, None]
    p = partials.phase[:, None]
    a = partials.amplitude[:, None]
    two_pi_s = 2 * math.pi * s[None, :]
    # Y runs at a detuned frequency and shifted phase so the figure is not an ellipse.
    x = np.tanh((a * np.sin(f * two_pi_s + w * t + p)).sum(axis=0))
    y = np.tanh((a * np.cos(1.5 * f * two_pi_s + 0.8 * w * t + 1.3 * p)).sum(axis=0))
    return x, y


def render_lissajous(partials: PartialSet, width: int, height: int, t: float) -> Frame:
    check_render_args(partials, width, height)
    grid = blank_grid(width, height)
    count = 3 * max(width, height)
    x, y = lissajous_points(partials, count, t)

    cx = (width - 1) / 2.0
    cy = (height - 1) / 2.0
    cols = np.clip(np.round(cx + x * cx * FILL).astype(int), 0, width - 1)
    rows = np.clip(np.round(cy - y * cy * FILL).astype(int), 0, height - 1)
    grid[rows, cols] = CURVE_CHAR
    return grid_to_frame(grid, RenderMode.LISSAJOUS, len(partials))
