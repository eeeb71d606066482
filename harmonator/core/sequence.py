from __future__ import annotations

import logging
from typing import Iterator, Sequence, Tuple

from .modmath import modexp, mulmod, to_u64

logger = logging.getLogger(__name__)

# Safety bound for long or degenerate orbits. Not derived from the modulus.
MAX_SEQUENCE_LENGTH = 5000


def generate_sequence(base: int, modulus: int, max_length: int = MAX_SEQUENCE_LENGTH) -> Tuple[int, ...]:
    """One period of base**i mod modulus for i = 1, 2, ...

    Stops before the first repeated value or once ``max_length`` values are
    collected. modulus == 0 gives an empty sequence; callers reject it first.
    """
    if to_u64(modulus) == 0 or max_length <= 0:
        return ()
    seen = set()
    out = []
    exponent = 1
    while len(out) < max_length:
        value = modexp(base, exponent, modulus)
        if value in seen:
            break
        seen.add(value)
        out.append(value)
        exponent += 1
    else:
        logger.debug("sequence for base=%s modulus=%s truncated at %d terms", base, modulus, max_length)
    return tuple(out)


def iter_terms(base: int, modulus: int, start: int = 1) -> Iterator[Tuple[int, int]]:
    """Endless (exponent, value) stream, one multiplication per term."""
    modulus = to_u64(modulus)
    exponent = max(0, int(start))
    value = modexp(base, exponent, modulus)
    while True:
        yield exponent, value
        exponent += 1
        value = mulmod(value, base, modulus)


def describe_sequence(seq: Sequence[int]) -> str:
    if not seq:
        return "no sequence"
    return f"period {len(seq)}  min {min(seq)}  max {max(seq)}  first {seq[0]}  last {seq[-1]}"
