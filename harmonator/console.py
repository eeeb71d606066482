from __future__ import annotations

import logging
import sys

from .core.controller import AnimationController
from .core.sequence import describe_sequence
from .core.state import MAX_HEIGHT, MAX_WIDTH, CanvasConfig, HarmonicState
from .core.stream import TermStreamer
from .settings import Settings
from .utils.terminal import TerminalSurface

logger = logging.getLogger(__name__)

MENU = """
--- harmonator ---
1. New base / modulus (current: {base} mod {modulus})
2. Start animation
3. Stop animation
4. Render mode (current: {mode})  [1 oscilloscope, 2 lissajous, 3 plasma]
5. Canvas size (current: {width}x{height})
6. Frame interval (current: {interval} ms)
7. Show sequence
8. Stream terms
0. Quit
"""


def build(settings: Settings):
    try:
        config = CanvasConfig(settings.width, settings.height, settings.frame_interval_ms, settings.mode)
    except ValueError as e:
        logger.warning("falling back to default canvas: %s", e)
        config = CanvasConfig()
    state = HarmonicState(config, settings.max_sequence_length, settings.max_partials)
    state.regenerate(settings.base, settings.modulus)
    return state


def _ask(prompt: str, read=input) -> str:
    return read(prompt).strip()


def _stream_terms(state: HarmonicState, surface, read=input) -> str:
    streamer = TermStreamer(state, surface)
    if not streamer.start():
        return "No sequence to stream.\n"
    try:
        read("")
    except EOFError:
        pass
    finally:
        streamer.stop()
    return f"Streamed up to term {streamer.exponent - 1}.\n"


def run_menu(state: HarmonicState, controller: AnimationController, surface: TerminalSurface, read=input) -> None:
    notice = ""
    while True:
        snap, cfg = state.snapshot, state.config
        text = notice + MENU.format(
            base=snap.base, modulus=snap.modulus, mode=cfg.mode.label,
            width=cfg.width, height=cfg.height, interval=cfg.frame_interval_ms,
        )
        notice = ""
        # the render loop clears the screen each frame; it redraws the menu under the footer
        if controller.is_running:
            surface.caption = text
        else:
            surface.caption = ""
            surface.write(text)
        try:
            choice = _ask("Select an option: ", read)
        except EOFError:
            return
        if choice == "1":
            ok = state.regenerate(_ask("Base: ", read), _ask("Modulus: ", read))
            notice = "Sequence updated.\n" if ok else "Invalid input, sequence unchanged.\n"
        elif choice == "2":
            if not controller.start():
                notice = "Animation already running or no sequence.\n"
        elif choice == "3":
            controller.stop()
        elif choice == "4":
            if not state.set_mode(_ask("Mode (1-3): ", read)):
                notice = "Mode must be 1, 2 or 3.\n"
        elif choice == "5":
            ok = state.set_canvas(_ask("Width: ", read), _ask("Height: ", read))
            if not ok:
                notice = f"Canvas must be between 40x16 and {MAX_WIDTH}x{MAX_HEIGHT}.\n"
        elif choice == "6":
            if not state.set_speed(_ask("Interval ms (10-200): ", read)):
                notice = "Interval must be between 10 and 200 ms.\n"
        elif choice == "7":
            seq = state.snapshot.sequence
            notice = describe_sequence(seq) + "\n"
            notice += ", ".join(str(v) for v in seq[:64]) + (" ...\n" if len(seq) > 64 else "\n")
        elif choice == "8":
            if controller.is_running:
                notice = "Stop the animation before streaming terms.\n"
            else:
                surface.write("Streaming terms, press Enter to stop.\n")
                notice = _stream_terms(state, surface, read)
        elif choice == "0":
            return
        else:
            notice = "Invalid option. Please try again.\n"


def main() -> int:
    settings = Settings.from_env()
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    state = build(settings)
    surface = TerminalSurface()
    controller = AnimationController(state, surface)
    with surface, controller:
        try:
            run_menu(state, controller, surface)
        except KeyboardInterrupt:
            pass
    return 0
