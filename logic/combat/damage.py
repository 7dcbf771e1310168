"""logic/combat/damage.py — Canonical damage application and defeat.

Every code path that hurts a hostile (melee swing, stomp) goes through
``damage_hostile()``; every path that hurts the hero (contact, enemy
shot) goes through ``damage_hero()``.  That keeps scoring, soft-delete,
invulnerability, particles and logging consistent.

Defeat is a soft delete: ``Hostile.active`` goes False, the entity
stays in the World so a reset can bring it back where it started.
"""

from __future__ import annotations
from components import Position, Body, Velocity, Hero, Hostile, HitFlash, Score
from core.events import EventBus, HostileDefeated, HeroDamaged
from core.tuning import get as _tun
from logic.entity_factory import hostile_stat
from logic.particles import ParticleManager


def damage_hostile(world, eid: int, amount: int, *, cause: str = "attack",
                   particle_preset: str = "hit") -> bool:
    """Take *amount* health from hostile *eid*.  Returns True on defeat.

    A hostile that is already inactive is left alone and never scores
    twice.
    """
    hostile = world.get(eid, Hostile)
    if hostile is None or not hostile.active:
        return False

    hostile.health -= amount

    flash = world.get(eid, HitFlash)
    if flash is None:
        world.add(eid, HitFlash())
    else:
        flash.remaining = 0.1

    cx, cy = _centre(world, eid)
    pm = world.res(ParticleManager)
    if pm is not None:
        pm.emit_preset(particle_preset, cx, cy)

    print(f"[COMBAT] {hostile.enemy_type} e{eid} took {amount} ({cause}), "
          f"HP {max(0, hostile.health)}/{hostile.max_health}")

    if hostile.health <= 0:
        defeat_hostile(world, eid, cause=cause)
        return True
    return False


def defeat_hostile(world, eid: int, *, cause: str = "") -> int:
    """Deactivate hostile *eid* and award its score.  Returns points."""
    hostile = world.get(eid, Hostile)
    if hostile is None or not hostile.active:
        return 0
    hostile.active = False
    hostile.health = min(hostile.health, 0)

    points = int(hostile_stat(hostile.enemy_type, "score"))
    score = world.res(Score)
    if score is not None:
        score.points += points

    pm = world.res(ParticleManager)
    if pm is not None:
        cx, cy = _centre(world, eid)
        pm.emit_preset("defeat", cx, cy)

    bus = world.res(EventBus)
    if bus is not None:
        bus.emit(HostileDefeated(eid=eid, enemy_type=hostile.enemy_type,
                                 score=points, cause=cause))
    return points


def damage_hero(world, amount: int, *, source: str = "contact",
                knockback_dir: int = 0) -> bool:
    """Apply *amount* to the hero unless invulnerable.  Returns True if hit.

    Life is clamped at zero.  A non-zero *knockback_dir* (±1) sets a
    horizontal shove away from the attacker.
    """
    res = world.query_one(Hero, Velocity)
    if res is None:
        return False
    _, hero, vel = res
    if hero.invulnerable_time > 0:
        return False

    hero.life_points = max(0, hero.life_points - int(amount))
    hero.invulnerable_time = _tun("hero", "invulnerable_time", 1.5)
    if knockback_dir:
        vel.x = knockback_dir * _tun("hero", "knockback_speed", 200.0)

    print(f"[COMBAT] hero took {amount} ({source}), life {hero.life_points}")
    bus = world.res(EventBus)
    if bus is not None:
        bus.emit(HeroDamaged(amount=int(amount), source=source,
                             life_left=hero.life_points))
    return True


def _centre(world, eid: int) -> tuple[float, float]:
    pos = world.get(eid, Position)
    body = world.get(eid, Body)
    if pos is None:
        return 0.0, 0.0
    if body is None:
        return pos.x, pos.y
    return pos.x + body.width / 2, pos.y + body.height / 2
