"""Environment-driven defaults for the gildedrose CLI.

Only the presentation layer is configurable; the quality rules are fixed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Days printed by the text fixture when nothing else is given.
DEFAULT_DAYS = 2

_DAYS_VAR = "GILDEDROSE_DAYS"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass
class Settings:
    """Resolved CLI defaults."""

    days: int = DEFAULT_DAYS


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigError: if GILDEDROSE_DAYS is set but not a non-negative integer.
    """
    env = os.environ if env is None else env

    raw = env.get(_DAYS_VAR, "").strip()
    if not raw:
        return Settings()

    try:
        days = int(raw)
    except ValueError:
        raise ConfigError(f"{_DAYS_VAR} must be an integer, got {raw!r}") from None
    if days < 0:
        raise ConfigError(f"{_DAYS_VAR} must not be negative, got {days}")
    return Settings(days=days)
