"""components.player — The hero's control and combat state.

Position, Velocity and Body live in their own components; everything
the control resolver and the interaction pass read or write about the
hero lives here.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Hero:
    """Marks the hero entity and holds its ability timers.

    ``can_jump`` is recomputed every physics step: it starts False and
    only a resolved landing on a tile sets it.  ``coyote`` is the grace
    window (seconds) after leaving a surface during which a jump is
    still honoured.  ``animation_phase`` is visual only.
    """
    can_jump: bool = False
    coyote: float = 0.0              # s
    dash_energy: float = 100.0       # 0–100
    dash_cooldown: float = 0.0       # s
    life_points: int = 100           # 0–100
    facing_right: bool = True
    invulnerable_time: float = 0.0   # s
    attack_cooldown: float = 0.0     # s
    is_attacking: bool = False
    attack_duration: float = 0.0     # s left in the current swing
    animation_phase: float = 0.0
    spawn_x: float = 100.0           # px
    spawn_y: float = 400.0           # px
