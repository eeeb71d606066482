from __future__ import annotations

import numpy as np

# Brightness ramps, empty -> solid.
ASCII_RAMP_PURE = " .:-=+*#%@"
ASCII_RAMP_EXT = " .`^\",:;Il!i><~+_-?][}{1)(|/\\tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$█"

BASELINE_CHAR = "-"
TRACE_CHAR = "*"
CURVE_CHAR = "o"


def ramp_array(ramp: str) -> np.ndarray:
    if not ramp or len(ramp) < 2:
        ramp = ASCII_RAMP_PURE
    return np.array(list(ramp), dtype="<U1")


def levels_to_chars(levels: np.ndarray, ramp: str = ASCII_RAMP_EXT) -> np.ndarray:
    """Map values in [0, 1] onto ramp glyphs, 0 -> first glyph."""
    chars = ramp_array(ramp)
    n = len(chars) - 1
    indices = np.clip(np.round(np.clip(levels, 0.0, 1.0) * n).astype(int), 0, n)
    return chars[indices]
