from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

MAX_PARTIALS = 24
MIN_PARTIALS = 3


def _frozen(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class PartialSet:
    """Parallel oscillator parameters, one entry per partial."""

    frequency: np.ndarray = field(default_factory=lambda: _frozen([]))
    angular_velocity: np.ndarray = field(default_factory=lambda: _frozen([]))
    amplitude: np.ndarray = field(default_factory=lambda: _frozen([]))
    phase: np.ndarray = field(default_factory=lambda: _frozen([]))

    @classmethod
    def empty(cls) -> "PartialSet":
        return cls()

    def __len__(self) -> int:
        return int(self.amplitude.shape[0])

    def __eq__(self, other) -> bool:
        if not isinstance(other, PartialSet):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, name), getattr(other, name))
            for name in ("frequency", "angular_velocity", "amplitude", "phase")
        )

    __hash__ = None


def synthesize_partials(sequence: Sequence[int], max_partials: int = MAX_PARTIALS) -> PartialSet:
    n = len(sequence)
    if n == 0:
        return PartialSet.empty()
    k = max(MIN_PARTIALS, min(n, max_partials))
    # Short sequences are reused cyclically to reach the minimum.
    values = np.array([int(sequence[i % n]) for i in range(k)], dtype=object)
    idx = np.arange(k, dtype=np.float64)

    freq = 0.5 + 0.12 * ((values % 17).astype(np.float64) + 1.0)
    omega = 0.6 + 0.07 * ((values % 29).astype(np.float64) + 3.0)
    amp = 1.0 / (1.0 + 0.8 * idx)
    phase = (values % 360).astype(np.float64) * (math.pi / 180.0)
    return PartialSet(_frozen(freq), _frozen(omega), _frozen(amp), _frozen(phase))
