from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .frame import RenderMode
from .modmath import U64_MASK
from .partials import MAX_PARTIALS, PartialSet, synthesize_partials
from .sequence import MAX_SEQUENCE_LENGTH, generate_sequence

logger = logging.getLogger(__name__)

MIN_WIDTH = 40
MIN_HEIGHT = 16
MAX_WIDTH = 400
MAX_HEIGHT = 200
MIN_INTERVAL_MS = 10
MAX_INTERVAL_MS = 200


@dataclass(frozen=True)
class CanvasConfig:
    width: int = 80
    height: int = 24
    frame_interval_ms: int = 50
    mode: RenderMode = RenderMode.OSCILLOSCOPE

    def __post_init__(self):
        if not (MIN_WIDTH <= self.width <= MAX_WIDTH and MIN_HEIGHT <= self.height <= MAX_HEIGHT):
            raise ValueError(
                f"canvas {self.width}x{self.height} outside {MIN_WIDTH}x{MIN_HEIGHT}..{MAX_WIDTH}x{MAX_HEIGHT}"
            )
        if not MIN_INTERVAL_MS <= self.frame_interval_ms <= MAX_INTERVAL_MS:
            raise ValueError(f"frame interval {self.frame_interval_ms}ms outside [{MIN_INTERVAL_MS}, {MAX_INTERVAL_MS}]")
        object.__setattr__(self, "mode", RenderMode(self.mode))

    @property
    def frame_interval(self) -> float:
        return self.frame_interval_ms / 1000.0


@dataclass(frozen=True)
class Snapshot:
    """A sequence and the partials derived from it, always swapped together."""

    sequence: Tuple[int, ...] = ()
    partials: PartialSet = field(default_factory=PartialSet.empty)
    base: Optional[int] = None
    modulus: Optional[int] = None


def parse_unsigned(value) -> Optional[int]:
    """int in [0, 2**64) from an int, integral float or numeric string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        n = int(value)
    except (TypeError, ValueError):
        return None
    if n < 0 or n > U64_MASK:
        return None
    return n


class HarmonicState:
    """Shared configuration and sequence data for the render loop.

    Readers take no lock: each property returns an immutable object that was
    swapped in whole. Writers serialize on ``_write_lock``.
    """

    def __init__(
        self,
        config: Optional[CanvasConfig] = None,
        max_sequence_length: int = MAX_SEQUENCE_LENGTH,
        max_partials: int = MAX_PARTIALS,
    ):
        self._config = config or CanvasConfig()
        self._snapshot = Snapshot()
        self._write_lock = threading.Lock()
        self.max_sequence_length = max_sequence_length
        self.max_partials = max_partials

    @property
    def config(self) -> CanvasConfig:
        return self._config

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def has_sequence(self) -> bool:
        return len(self._snapshot.sequence) > 0

    def regenerate(self, base, modulus) -> bool:
        b = parse_unsigned(base)
        m = parse_unsigned(modulus)
        if b is None or m is None:
            logger.warning("rejected regenerate(%r, %r): not unsigned integers", base, modulus)
            return False
        if m == 0:
            logger.warning("rejected regenerate(%d, 0): modulus must be positive", b)
            return False
        seq = generate_sequence(b, m, self.max_sequence_length)
        snap = Snapshot(seq, synthesize_partials(seq, self.max_partials), b, m)
        with self._write_lock:
            self._snapshot = snap
        logger.info("regenerated base=%d modulus=%d: %d terms, %d partials", b, m, len(seq), len(snap.partials))
        return True

    def _update_config(self, **changes) -> bool:
        with self._write_lock:
            try:
                self._config = replace(self._config, **changes)
            except ValueError as e:
                logger.warning("rejected config change %s: %s", changes, e)
                return False
        return True

    def set_mode(self, mode) -> bool:
        try:
            mode = RenderMode(int(mode))
        except (TypeError, ValueError):
            logger.warning("rejected mode %r", mode)
            return False
        return self._update_config(mode=mode)

    def set_canvas(self, width, height) -> bool:
        w, h = parse_unsigned(width), parse_unsigned(height)
        if w is None or h is None:
            logger.warning("rejected canvas %r x %r", width, height)
            return False
        return self._update_config(width=w, height=h)

    def set_speed(self, milliseconds) -> bool:
        ms = parse_unsigned(milliseconds)
        if ms is None:
            logger.warning("rejected frame interval %r", milliseconds)
            return False
        return self._update_config(frame_interval_ms=ms)
