"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
import random
from dataclasses import dataclass, field


@dataclass
class GameClock:
    """Monotonic game time — accumulated ``dt`` while PLAYING."""
    time: float = 0.0
    ticks: int = 0


@dataclass
class Camera:
    """View offset in world pixels (top-left of the visible area)."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class Viewport:
    """Current display size.  Updated by the host on resize."""
    width: int = 1280
    height: int = 720


@dataclass
class Score:
    """Points shown on the HUD.  Only ever increases until a reset."""
    points: int = 0


@dataclass
class Session:
    """High-level game phase: start → playing → game_over → playing."""
    phase: str = "start"
    resets: int = 0


@dataclass
class Rng:
    """Injectable random source for placement jitter and hop heights.

    Tests swap ``source`` for a seeded or scripted ``random.Random``.
    """
    source: random.Random = field(default_factory=random.Random)

    def random(self) -> float:
        return self.source.random()

    def uniform(self, a: float, b: float) -> float:
        return self.source.uniform(a, b)
