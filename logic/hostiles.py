"""logic/hostiles.py — Hostile behaviour routines.

One routine per movement pattern, dispatched from ``hostile_system``.
Inactive (defeated) hostiles are skipped entirely.

    patrol   walk back and forth, reversing past ``patrol_range`` from the
             anchor; speed comes from the enemy type
    jump     gravity plus a random-height hop on every landing
    flying   sine/cosine drift driven by ``anim_cycle``; ignores terrain
    shooter  stands still; every ``shoot_interval`` s fires a shot
             toward the hero when the hero is within ``shoot_range``
    tank     slow patrol at ``tank_speed``
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, Callable
from components import Hostile, Hero, Position, Velocity, Body, TileMap, Rng
from core.tuning import get as _tun
from logic.entity_factory import hostile_stat, spawn_projectile
from logic.movement import land_on_tiles

if TYPE_CHECKING:
    from core.ecs import World


def hostile_system(world: "World", dt: float) -> None:
    hero_pos = None
    res = world.query_one(Hero, Position)
    if res is not None:
        hero_pos = res[2]

    phase_rate = _tun("hostiles", "phase_rate", 6.0)
    for eid, hostile, pos, vel, body in world.query(Hostile, Position, Velocity, Body):
        if not hostile.active:
            continue
        hostile.anim_cycle += phase_rate * dt
        routine = _ROUTINES.get(hostile.movement_pattern)
        if routine is not None:
            routine(world, eid, hostile, pos, vel, body, dt, hero_pos)


# ── Routines ─────────────────────────────────────────────────────────

def _patrol_step(hostile: Hostile, pos: Position, speed: float, dt: float) -> None:
    if abs(pos.x - hostile.patrol_origin) > hostile.patrol_range:
        hostile.patrol_direction *= -1
    pos.x += hostile.patrol_direction * speed * dt


def _patrol(world, eid, hostile, pos, vel, body, dt, hero_pos):
    _patrol_step(hostile, pos, hostile_stat(hostile.enemy_type, "patrol_speed"), dt)


def _tank(world, eid, hostile, pos, vel, body, dt, hero_pos):
    _patrol_step(hostile, pos, _tun("hostiles", "tank_speed", 40.0), dt)


def _jump(world, eid, hostile, pos, vel, body, dt, hero_pos):
    vel.y += _tun("hostiles", "gravity", 800.0) * dt
    pos.y += vel.y * dt

    tilemap = world.res(TileMap)
    if tilemap is None:
        return
    rng = world.res(Rng) or Rng()
    low = _tun("hostiles", "bounce_min", 300.0)
    extra = _tun("hostiles", "bounce_extra", 150.0)
    land_on_tiles(tilemap, pos, vel, body, lambda: -(low + rng.random() * extra))


def _flying(world, eid, hostile, pos, vel, body, dt, hero_pos):
    pos.x += math.sin(hostile.anim_cycle * 0.5) * _tun("hostiles", "fly_speed", 100.0) * dt
    pos.y += math.cos(hostile.anim_cycle * 0.3) * _tun("hostiles", "fly_bob", 50.0) * dt


def _shooter(world, eid, hostile, pos, vel, body, dt, hero_pos):
    hostile.shoot_cooldown -= dt
    if hostile.shoot_cooldown > 0 or hero_pos is None:
        return
    if abs(hero_pos.x - pos.x) < _tun("hostiles", "shoot_range", 400.0):
        fire_at_hero(world, eid, pos, body, hero_pos)
        hostile.shoot_cooldown = _tun("hostiles", "shoot_interval", 2.0)


def fire_at_hero(world, eid: int, pos: Position, body: Body, hero_pos: Position) -> int:
    """Spawn a horizontal shot from the shooter's centre toward the hero."""
    direction = 1 if hero_pos.x > pos.x else -1
    speed = _tun("projectiles", "speed", 200.0)
    return spawn_projectile(world,
                            pos.x + body.width / 2, pos.y + body.height / 2,
                            direction * speed, 0.0, owner_eid=eid)


_ROUTINES: dict[str, Callable] = {
    "patrol": _patrol,
    "jump": _jump,
    "flying": _flying,
    "shooter": _shooter,
    "tank": _tank,
}
