"""logic/combat/attacks.py — Hero melee swing.

A swing is a timed sub-state on the hero (``is_attacking`` for
``duration`` seconds, then ``cooldown`` before the next).  Hits are
evaluated once, on the tick the swing starts, against a reach box in
front of the hero that is as tall as the hero.
"""

from __future__ import annotations
from components import Position, Body, Hero, Hostile
from core.collision import overlaps
from core.tuning import get as _tun
from logic.combat.damage import damage_hostile


def attack_rect(pos: Position, body: Body, facing_right: bool,
                reach: float) -> tuple[float, float, float, float]:
    """World-space (x, y, w, h) of the swing's reach box."""
    ax = pos.x + body.width if facing_right else pos.x - reach
    return ax, pos.y, reach, body.height


def start_attack(world, hero_eid: int) -> list[int]:
    """Enter the attacking sub-state and resolve hits.  Returns hit eids."""
    hero = world.get(hero_eid, Hero)
    pos = world.get(hero_eid, Position)
    body = world.get(hero_eid, Body)

    hero.is_attacking = True
    hero.attack_duration = _tun("hero.attack", "duration", 0.3)
    hero.attack_cooldown = _tun("hero.attack", "cooldown", 0.5)

    reach = _tun("hero.attack", "reach", 40.0)
    damage = int(_tun("hero.attack", "damage", 10))
    shove = _tun("hero.attack", "knockback", 30.0)
    ax, ay, aw, ah = attack_rect(pos, body, hero.facing_right, reach)
    direction = 1 if hero.facing_right else -1

    hits = []
    for eid, hostile, hpos, hbody in world.query(Hostile, Position, Body):
        if not hostile.active:
            continue
        if not overlaps(ax, ay, aw, ah, hpos.x, hpos.y, hbody.width, hbody.height):
            continue
        hits.append(eid)
        damage_hostile(world, eid, damage, cause="attack")
        hpos.x += direction * shove
    return hits
