"""components.rendering — Visual-only state."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class HitFlash:
    """Brief visual feedback when a hostile is struck."""
    remaining: float = 0.1  # seconds to show flash effect
