"""logic/entity_factory.py — Descriptor-driven entity spawning.

Hostiles are described by small dicts (from ``[hostiles] roster`` in
tuning.toml, or ``DEFAULT_ROSTER`` when the file says nothing)::

    {"x": 400.0, "y": 500.0, "pattern": "patrol", "type": "ground"}

The ``type`` picks a stat row (size, health, contact damage, score)
from ``[hostiles.types.<type>]`` falling back to ``HOSTILE_TYPES``.
"""

from __future__ import annotations
from typing import Any
from core.ecs import World
from core.constants import HOSTILE_TYPES
from core.tuning import get as _tun
from components import (
    Position, Velocity, Body, Hero, Hostile, Collectible, Projectile,
)


# ── Field-schema helpers ─────────────────────────────────────────────

def _float(v: Any, default: float = 0.0) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return default


def _int(v: Any, default: int = 0) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _str(v: Any, default: str = "") -> str:
    return str(v) if v is not None else default


def hostile_stat(enemy_type: str, key: str) -> float:
    """Look up one stat for *enemy_type* (tuning first, then table)."""
    row = HOSTILE_TYPES.get(enemy_type, HOSTILE_TYPES["ground"])
    return _tun(f"hostiles.types.{enemy_type}", key, row[key])


def normalise_descriptor(raw: Any) -> dict[str, Any]:
    """Accept a roster dict or an ``(x, y, pattern, type)`` tuple."""
    if isinstance(raw, dict):
        return {
            "x": _float(raw.get("x")),
            "y": _float(raw.get("y")),
            "pattern": _str(raw.get("pattern"), "patrol"),
            "type": _str(raw.get("type"), "ground"),
        }
    x, y, pattern, etype = raw
    return {"x": _float(x), "y": _float(y),
            "pattern": _str(pattern, "patrol"), "type": _str(etype, "ground")}


# ── Spawners ─────────────────────────────────────────────────────────

def spawn_hero(world: World) -> int:
    sx = _tun("hero", "spawn_x", 100.0)
    sy = _tun("hero", "spawn_y", 400.0)
    eid = world.spawn()
    world.add(eid, Position(x=sx, y=sy))
    world.add(eid, Velocity())
    world.add(eid, Body(width=_tun("hero", "width", 24.0),
                        height=_tun("hero", "height", 32.0)))
    world.add(eid, Hero(spawn_x=sx, spawn_y=sy))
    return eid


def spawn_hostile(world: World, descriptor: Any) -> int:
    d = normalise_descriptor(descriptor)
    etype = d["type"]
    size = _float(hostile_stat(etype, "size"), 28.0)
    health = _int(hostile_stat(etype, "health"), 10)

    eid = world.spawn()
    world.add(eid, Position(x=d["x"], y=d["y"]))
    world.add(eid, Velocity())
    world.add(eid, Body(width=size, height=size))
    world.add(eid, Hostile(
        movement_pattern=d["pattern"],
        enemy_type=etype,
        patrol_origin=d["x"],
        patrol_range=_float(hostile_stat(etype, "range"), 150.0),
        health=health,
        max_health=health,
        spawn_x=d["x"],
        spawn_y=d["y"],
    ))
    return eid


def spawn_collectible(world: World, x: float, y: float) -> int:
    eid = world.spawn()
    world.add(eid, Position(x=x, y=y))
    world.add(eid, Collectible(
        radius=_tun("collectibles", "radius", 8.0),
        value=int(_tun("collectibles", "value", 100)),
    ))
    return eid


def spawn_projectile(world: World, x: float, y: float, vx: float, vy: float,
                     *, owner_eid: int = -1, from_enemy: bool = True) -> int:
    eid = world.spawn()
    world.add(eid, Position(x=x, y=y))
    world.add(eid, Velocity(x=vx, y=vy))
    world.add(eid, Projectile(
        radius=_tun("projectiles", "radius", 6.0),
        damage=int(_tun("projectiles", "damage", 5)),
        from_enemy=from_enemy,
        owner_eid=owner_eid,
    ))
    return eid
