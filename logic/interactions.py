"""logic/interactions.py — Hero-vs-everything contact pass.

Runs after all movement for the tick is done, separate from terrain
resolution:

  * collectibles  — circle test around the hero centre, +value score
  * hostiles      — box overlap; a stomp *or* contact damage, never both
  * enemy shots   — circle test; damage, then the shot is deleted
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING
from components import (
    Hero, Hostile, Collectible, Projectile, Position, Velocity, Body, Score,
)
from core.collision import overlaps
from core.events import EventBus, ItemCollected
from core.tuning import get as _tun
from logic.combat import damage_hostile, damage_hero
from logic.entity_factory import hostile_stat

if TYPE_CHECKING:
    from core.ecs import World


def interaction_system(world: "World") -> None:
    res = world.query_one(Hero, Position, Velocity, Body)
    if res is None:
        return
    _, hero, pos, vel, body = res
    cx = pos.x + body.width / 2
    cy = pos.y + body.height / 2

    collect_items(world, cx, cy)
    touch_hostiles(world, hero, pos, vel, body)
    catch_projectiles(world, cx, cy)


# ── Collectibles ─────────────────────────────────────────────────────

def collect_items(world: "World", cx: float, cy: float) -> int:
    """Gather every item within reach of (cx, cy).  Returns points won."""
    reach = _tun("collectibles", "pickup_radius", 12.0)
    score = world.res(Score)
    bus = world.res(EventBus)
    won = 0
    for eid, item, ipos in world.query(Collectible, Position):
        if item.gathered:
            continue
        if math.hypot(cx - ipos.x, cy - ipos.y) < item.radius + reach:
            item.gathered = True
            won += item.value
            if score is not None:
                score.points += item.value
            print(f"[PICKUP] item e{eid} +{item.value}")
            if bus is not None:
                bus.emit(ItemCollected(eid=eid, score=item.value))
    return won


# ── Hostile contact ──────────────────────────────────────────────────

def is_stomp(hero: Hero, pos: Position, vel: Velocity, hpos: Position) -> bool:
    """Falling fast enough, above the hostile, and not mid-swing."""
    return (vel.y > _tun("hero.stomp", "threshold", 200.0)
            and pos.y < hpos.y
            and not hero.is_attacking)


def touch_hostiles(world: "World", hero: Hero, pos: Position, vel: Velocity,
                   body: Body) -> None:
    for eid, hostile, hpos, hbody in world.query(Hostile, Position, Body):
        if not hostile.active:
            continue
        if not overlaps(pos.x, pos.y, body.width, body.height,
                        hpos.x, hpos.y, hbody.width, hbody.height):
            continue

        if is_stomp(hero, pos, vel, hpos):
            damage_hostile(world, eid, int(_tun("hero.stomp", "damage", 15)),
                           cause="stomp", particle_preset="stomp")
            vel.y = _tun("hero.stomp", "bounce", -300.0)
        elif hero.invulnerable_time <= 0:
            direction = -1 if pos.x < hpos.x else 1
            damage_hero(world, int(hostile_stat(hostile.enemy_type, "damage")),
                        source="contact", knockback_dir=direction)


# ── Enemy projectiles ────────────────────────────────────────────────

def catch_projectiles(world: "World", cx: float, cy: float) -> int:
    reach = _tun("projectiles", "hit_radius", 12.0)
    hits: list[int] = []
    for eid, proj, ppos in world.query(Projectile, Position):
        if not proj.active or not proj.from_enemy:
            continue
        if math.hypot(cx - ppos.x, cy - ppos.y) >= proj.radius + reach:
            continue
        if damage_hero(world, proj.damage, source="projectile"):
            proj.active = False
            hits.append(eid)
    for eid in hits:
        world.kill(eid)
    return len(hits)
