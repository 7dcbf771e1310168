"""logic/projectiles.py — Projectile tick system.

Each tick:
  1. Move every Projectile by its velocity.
  2. Delete it if it left the camera view by more than ``cull_margin``.
  3. Delete it if its centre is inside a tile.

Deletion is real (``world.kill``); shots never come back on reset.
Hero hits are checked later in the interaction pass.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from components import Projectile, Position, Velocity, TileMap
from core.collision import point_inside
from core.tuning import get as _tun
from logic.camera import view_bounds

if TYPE_CHECKING:
    from core.ecs import World


def projectile_system(world: "World", dt: float) -> int:
    """Tick all projectiles.  Returns how many were removed."""
    left, top, right, bottom = view_bounds(
        world, _tun("projectiles", "cull_margin", 100.0))
    tilemap = world.res(TileMap)

    to_kill: list[int] = []
    for eid, proj, pos, vel in world.query(Projectile, Position, Velocity):
        if not proj.active:
            to_kill.append(eid)
            continue

        pos.x += vel.x * dt
        pos.y += vel.y * dt

        if not (left <= pos.x <= right and top <= pos.y <= bottom):
            to_kill.append(eid)
            continue

        if tilemap is not None and _hits_tile(tilemap, pos.x, pos.y):
            to_kill.append(eid)
            continue

    for eid in to_kill:
        world.kill(eid)
    return len(to_kill)


def _hits_tile(tilemap: TileMap, x: float, y: float) -> bool:
    for tile in tilemap.tiles:
        if point_inside(x, y, tile.x, tile.y, tile.size, tile.size):
            return True
    return False


def clear_projectiles(world: "World") -> int:
    """Delete every projectile (used by the game reset)."""
    n = 0
    for eid, _ in world.all_of(Projectile):
        world.kill(eid)
        n += 1
    return n
