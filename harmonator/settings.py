from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields

from .core.partials import MAX_PARTIALS
from .core.sequence import MAX_SEQUENCE_LENGTH

logger = logging.getLogger(__name__)

ENV_PREFIX = "HARMONATOR_"


@dataclass(frozen=True)
class Settings:
    base: int = 2
    modulus: int = 9
    width: int = 80
    height: int = 24
    frame_interval_ms: int = 50
    mode: int = 1
    max_sequence_length: int = MAX_SEQUENCE_LENGTH
    max_partials: int = MAX_PARTIALS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Defaults overridden by HARMONATOR_<FIELD> variables.

        Unparseable values keep the default.
        """
        env = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if isinstance(f.default, str):
                values[f.name] = raw.strip().upper()
                continue
            try:
                values[f.name] = int(raw.strip())
            except ValueError:
                logger.warning("ignoring %s%s=%r: not an integer", ENV_PREFIX, f.name.upper(), raw)
        return cls(**values)
