"""components.items — Collectibles."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Collectible:
    """A pickup.  Position is its centre.

    ``gathered`` is a soft delete: a reset un-gathers the same items at
    the same places instead of generating new ones.
    """
    radius: float = 8.0      # px
    gathered: bool = False
    sparkle: float = 0.0     # pulsing phase, visual only
    value: int = 100
