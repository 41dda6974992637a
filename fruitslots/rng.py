"""The random engine shared by every part of the game."""

from __future__ import annotations

import random

_ENGINE = random.Random()


def get_engine() -> random.Random:
    """Return the process-wide random engine, seeded from system entropy."""
    return _ENGINE