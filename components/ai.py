"""components.ai — Hostile behaviour state."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Hostile:
    """A hostile entity.

    ``movement_pattern`` selects the behaviour routine ("patrol", "jump",
    "flying", "shooter", "tank"); ``enemy_type`` selects the stat row
    (size, health, contact damage, score value).

    Defeated hostiles are never removed: ``active`` goes False and every
    system skips them until a reset flips it back.
    """
    movement_pattern: str = "patrol"
    enemy_type: str = "ground"
    patrol_direction: int = 1        # ±1
    patrol_origin: float = 0.0       # px, anchor x
    patrol_range: float = 150.0      # px
    anim_cycle: float = 0.0          # phase accumulator
    active: bool = True
    health: int = 10
    max_health: int = 10
    shoot_cooldown: float = 0.0      # s
    spawn_x: float = 0.0
    spawn_y: float = 0.0
