"""logic/movement.py — Hero physics and terrain resolution.

Integrates gravity and velocity, then pushes the hero out of every tile
it overlaps.  The resolver is greedy and single-axis: for each
overlapping tile, in TileMap order (row-major), it measures the four
penetration depths and corrects along the smallest one only.

  * top    — only while falling (vy > 0): land, vy = 0, can_jump = True
  * bottom — only while rising (vy < 0): bonk, vy = 0
  * left / right — push out sideways, scale vx by wall_velocity_factor

When several tiles overlap at once the outcome depends on that order;
corners at grid seams can jitter.  dt is not clamped here.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from components import Hero, Position, Velocity, Body, TileMap
from core.collision import overlaps, penetration
from core.tuning import get as _tun

if TYPE_CHECKING:
    from core.ecs import World


def hero_physics_system(world: "World", dt: float) -> None:
    res = world.query_one(Hero, Position, Velocity, Body)
    if res is None:
        return
    _, hero, pos, vel, body = res

    vel.y += _tun("hero", "gravity", 1200.0) * dt
    vel.y = min(_tun("hero", "terminal_velocity", 600.0), vel.y)

    pos.x += vel.x * dt
    pos.y += vel.y * dt

    hero.can_jump = False
    tilemap = world.res(TileMap)
    if tilemap is not None:
        hero.can_jump = resolve_terrain(tilemap, pos, vel, body)

    if hero.can_jump:
        hero.coyote = _tun("hero", "coyote_time", 0.1)


def resolve_terrain(tilemap: TileMap, pos: Position, vel: Velocity,
                    body: Body) -> bool:
    """Push the box out of every overlapping tile.  Returns True if landed."""
    landed = False
    wall_factor = _tun("hero", "wall_velocity_factor", 0.0)
    w, h = body.width, body.height

    for tile in tilemap.tiles:
        tx, ty, ts = tile.x, tile.y, tile.size
        if not overlaps(pos.x, pos.y, w, h, tx, ty, ts, ts):
            continue

        pen = penetration(pos.x, pos.y, w, h, tx, ty, ts, ts)
        least = pen.minimum()

        if least == pen.top and vel.y > 0:
            pos.y = ty - h
            vel.y = 0.0
            landed = True
        elif least == pen.bottom and vel.y < 0:
            pos.y = ty + ts
            vel.y = 0.0
        elif least == pen.left:
            pos.x = tx - w
            vel.x *= wall_factor
        elif least == pen.right:
            pos.x = tx + ts
            vel.x *= wall_factor

    return landed


def land_on_tiles(tilemap: TileMap, pos: Position, vel: Velocity,
                  body: Body, bounce_vy) -> bool:
    """Bounce a falling box off the first tile it sinks into.

    *bounce_vy* is a zero-arg callable giving the new (negative) vy, so
    each landing draws a fresh random hop height.
    """
    for tile in tilemap.tiles:
        if vel.y <= 0:
            break
        if overlaps(pos.x, pos.y, body.width, body.height,
                    tile.x, tile.y, tile.size, tile.size):
            pos.y = tile.y - body.height
            vel.y = bounce_vy()
            return True
    return False
