"""logic/controls.py — Hero control resolution (first step of a tick).

Reads the held-control set and turns it into velocity changes and
ability state.  Order inside the step matters and is fixed:

    left/right accel → friction → speed clamp → jump → dash → attack
    → timers (attack swing, dash regen, cooldowns, invulnerability)

Friction runs every tick whether or not a direction is held.  When
both directions are held the right input is applied second, so it
decides ``facing_right``.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from components import Hero, Position, Velocity, Body
from core.tuning import get as _tun
from logic.combat import start_attack

if TYPE_CHECKING:
    from core.ecs import World
    from logic.input_manager import InputState


def hero_control_system(world: "World", dt: float, inp: "InputState") -> None:
    res = world.query_one(Hero, Position, Velocity, Body)
    if res is None:
        return
    eid, hero, pos, vel, body = res

    # ── Horizontal ───────────────────────────────────────────────────
    accel = _tun("hero", "move_accel", 1200.0)
    if inp.held("move_left"):
        vel.x -= accel * dt
        hero.facing_right = False
    if inp.held("move_right"):
        vel.x += accel * dt
        hero.facing_right = True

    if hero.can_jump:
        vel.x *= _tun("hero", "friction", 0.85)
    else:
        vel.x *= _tun("hero", "air_friction", 0.9)

    max_speed = _tun("hero", "max_speed", 250.0)
    vel.x = max(-max_speed, min(max_speed, vel.x))

    # ── Jump (grounded, or inside the coyote window) ────────────────
    if inp.held("jump") and (hero.can_jump or hero.coyote > 0):
        vel.y = -_tun("hero", "jump_power", 420.0)
        hero.can_jump = False
        hero.coyote = 0.0

    # ── Dash ─────────────────────────────────────────────────────────
    if inp.held("dash"):
        try_dash(hero, vel)

    # ── Melee ────────────────────────────────────────────────────────
    if (inp.held("attack") and _tun("hero.attack", "enabled", True)
            and hero.attack_cooldown <= 0 and not hero.is_attacking):
        start_attack(world, eid)

    advance_timers(hero, dt)
    hero.animation_phase += abs(vel.x) * 0.01


def try_dash(hero: Hero, vel: Velocity) -> bool:
    """Instant horizontal impulse in the facing direction.

    Needs at least ``dash_cost`` energy and an expired cooldown.
    """
    cost = _tun("hero", "dash_cost", 50.0)
    if hero.dash_energy < cost or hero.dash_cooldown > 0:
        return False
    direction = 1 if hero.facing_right else -1
    vel.x += _tun("hero", "dash_force", 600.0) * direction
    hero.dash_energy = max(0.0, hero.dash_energy - cost)
    hero.dash_cooldown = _tun("hero", "dash_cooldown", 1.0)
    return True


def advance_timers(hero: Hero, dt: float) -> None:
    if hero.is_attacking:
        hero.attack_duration -= dt
        if hero.attack_duration <= 0:
            hero.is_attacking = False
            hero.attack_duration = 0.0

    regen = _tun("hero", "dash_regen", 30.0)
    hero.dash_energy = min(100.0, hero.dash_energy + regen * dt)
    hero.dash_cooldown = max(0.0, hero.dash_cooldown - dt)
    hero.attack_cooldown = max(0.0, hero.attack_cooldown - dt)
    hero.invulnerable_time = max(0.0, hero.invulnerable_time - dt)
    hero.coyote = max(0.0, hero.coyote - dt)
