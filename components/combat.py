"""components.combat — Projectiles."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Projectile:
    """A shot flying through the world.  Position is its centre.

    Transient: the projectile system deletes the entity outright once it
    leaves the view, hits a tile, or hits the hero.
    """
    radius: float = 6.0        # px
    damage: int = 5
    from_enemy: bool = True
    active: bool = True
    owner_eid: int = -1
