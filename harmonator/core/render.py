from __future__ import annotations

from typing import Callable, Dict

from .frame import Frame, RenderMode
from .lissajous import render_lissajous
from .oscilloscope import render_oscilloscope
from .partials import PartialSet
from .plasma import render_plasma

Renderer = Callable[[PartialSet, int, int, float], Frame]

RENDERERS: Dict[RenderMode, Renderer] = {
    RenderMode.OSCILLOSCOPE: render_oscilloscope,
    RenderMode.LISSAJOUS: render_lissajous,
    RenderMode.PLASMA: render_plasma,
}


def render_frame(mode, partials: PartialSet, width: int, height: int, t: float) -> Frame:
    return RENDERERS[RenderMode(mode)](partials, width, height, t)
