"""logic/session.py — Game phase machine and reset.

    start ──(start input)──▶ playing ──(life ≤ 0 or fell)──▶ game_over
                                ▲                               │
                                └────────(reset input)──────────┘

While in ``start`` or ``game_over`` the simulation is frozen; only the
matching input is looked at.  A reset restores every mutable value to
its spawn state.  The tile grid and the collectible *positions* are
never regenerated.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from components import (
    Hero, Hostile, Collectible, Position, Velocity, Camera, Score, Session,
    TileMap, HitFlash,
)
from core.constants import PHASE_START, PHASE_PLAYING, PHASE_GAME_OVER
from core.events import EventBus, PhaseChanged
from core.tuning import get as _tun
from logic.particles import ParticleManager
from logic.projectiles import clear_projectiles

if TYPE_CHECKING:
    from core.ecs import World
    from logic.input_manager import InputState


def initial_phase() -> str:
    if _tun("session", "start_screen", True):
        return PHASE_START
    return PHASE_PLAYING


def set_phase(world: "World", new: str, reason: str = "") -> None:
    session = world.res(Session)
    if session is None or session.phase == new:
        return
    old = session.phase
    session.phase = new
    print(f"[SESSION] {old} -> {new}" + (f" ({reason})" if reason else ""))
    bus = world.res(EventBus)
    if bus is not None:
        bus.emit(PhaseChanged(old=old, new=new, reason=reason))


def session_gate(world: "World", inp: "InputState") -> bool:
    """Return True if the simulation should run this tick.

    The tick that consumes a start or reset input does not simulate.
    """
    session = world.res(Session)
    if session is None:
        return True

    if session.phase == PHASE_START:
        if inp.held("start"):
            set_phase(world, PHASE_PLAYING, "start")
        return False

    if session.phase == PHASE_GAME_OVER:
        if inp.held("reset"):
            reset_game_state(world)
            set_phase(world, PHASE_PLAYING, "reset")
        return False

    return True


def hero_fell(world: "World", pos: Position) -> bool:
    tilemap = world.res(TileMap)
    if tilemap is None:
        return False
    return pos.y > tilemap.pixel_bottom + _tun("hero", "fall_margin", 100.0)


def check_termination(world: "World") -> bool:
    """Move to game_over when the hero is out of life or off the map."""
    res = world.query_one(Hero, Position)
    if res is None:
        return False
    _, hero, pos = res
    if hero.life_points <= 0:
        set_phase(world, PHASE_GAME_OVER, "defeated")
        return True
    if hero_fell(world, pos):
        set_phase(world, PHASE_GAME_OVER, "fell")
        return True
    return False


def reset_game_state(world: "World") -> None:
    """Restore hero, hostiles, items, score and camera to spawn state."""
    for eid, hero, pos, vel in world.query(Hero, Position, Velocity):
        pos.x, pos.y = hero.spawn_x, hero.spawn_y
        vel.x = vel.y = 0.0
        hero.life_points = 100
        hero.dash_energy = 100.0
        hero.dash_cooldown = 0.0
        hero.invulnerable_time = 0.0
        hero.attack_cooldown = 0.0
        hero.is_attacking = False
        hero.attack_duration = 0.0
        hero.can_jump = False
        hero.coyote = 0.0
        hero.facing_right = True

    for eid, hostile, pos, vel in world.query(Hostile, Position, Velocity):
        hostile.active = True
        hostile.health = hostile.max_health
        hostile.patrol_direction = 1
        hostile.anim_cycle = 0.0
        hostile.shoot_cooldown = 0.0
        pos.x, pos.y = hostile.spawn_x, hostile.spawn_y
        vel.x = vel.y = 0.0
        world.remove(eid, HitFlash)

    for _, item in world.all_of(Collectible):
        item.gathered = False

    clear_projectiles(world)
    world.purge()
    pm = world.res(ParticleManager)
    if pm is not None:
        pm.clear()

    score = world.res(Score)
    if score is not None:
        score.points = 0
    cam = world.res(Camera)
    if cam is not None:
        cam.x = cam.y = 0.0

    session = world.res(Session)
    if session is not None:
        session.resets += 1
        print(f"[SESSION] reset #{session.resets}")
