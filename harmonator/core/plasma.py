from __future__ import annotations

import math

import numpy as np

from ..utils.ramps import ASCII_RAMP_EXT, levels_to_chars
from .frame import Frame, RenderMode, check_render_args, grid_to_frame, normalized_axis
from .partials import PartialSet


def plasma_field(partials: PartialSet, width: int, height: int, t: float) -> np.ndarray:
    """Per-cell intensity in [0, 1]."""
    x = normalized_axis(width)
    y = normalized_axis(height)
    field = np.zeros((height, width), dtype=np.float64)
    for f, w, a, p in zip(partials.frequency, partials.angular_velocity, partials.amplitude, partials.phase):
        sx = np.sin(2 * math.pi * f * x + w * t + p)
        cy = np.cos(2 * math.pi * f * y - 0.7 * w * t + p)
        field += a * (cy[:, None] + sx[None, :])
    return 0.5 + 0.5 * np.tanh(0.5 * field)


def render_plasma(partials: PartialSet, width: int, height: int, t: float, ramp: str = ASCII_RAMP_EXT) -> Frame:
    check_render_args(partials, width, height)
    grid = levels_to_chars(plasma_field(partials, width, height, t), ramp)
    return grid_to_frame(grid, RenderMode.PLASMA, len(partials))
