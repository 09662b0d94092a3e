"""Runtime settings for undocalc, read from environment variables.

Self-contained, no config files. Every setting has a default so the
calculator runs with an empty environment.
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = "Enter command(s) (e.g., increment, decrement, double, randadd, undo): "

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Resolved settings for one session."""

    seed: Optional[int] = None
    prompt: str = DEFAULT_PROMPT
    show_banner: bool = True

    def make_rng(self) -> random.Random:
        """Random source for RandomAdd; seeded when UNDOCALC_SEED is set."""
        return random.Random(self.seed)


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        # Bad seed falls back to system randomness
        return None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ).

    Recognised variables:
        UNDOCALC_SEED: integer seed for RandomAdd.
        UNDOCALC_PROMPT: prompt text shown before each input line.
        UNDOCALC_NO_BANNER: truthy value suppresses the startup banner.
    """
    env = os.environ if env is None else env
    no_banner = env.get("UNDOCALC_NO_BANNER", "").strip().lower() in _TRUTHY
    return Settings(
        seed=_parse_seed(env.get("UNDOCALC_SEED")),
        prompt=env.get("UNDOCALC_PROMPT", DEFAULT_PROMPT),
        show_banner=not no_banner,
    )
