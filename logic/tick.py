"""logic/tick.py — System tick orchestration.

Houses the per-frame system pipeline plus tiny single-purpose systems
(clock, hit flash, sparkle) that don't warrant their own files.

Usage::

    from logic.tick import tick_systems
    simulated = tick_systems(world, dt, inp)

The order below is part of the game's behaviour; do not reorder.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import GameClock, HitFlash, Collectible
from logic.controls import hero_control_system
from logic.movement import hero_physics_system
from logic.hostiles import hostile_system
from logic.projectiles import projectile_system
from logic.interactions import interaction_system
from logic.camera import camera_system, view_bounds
from logic.session import session_gate, check_termination
from logic.particles import ParticleManager
from core.events import EventBus
from core.tuning import get as _tun

if TYPE_CHECKING:
    from core.ecs import World
    from logic.input_manager import InputState


# ── Tiny per-frame systems ───────────────────────────────────────────

def clock_system(world: "World", dt: float) -> None:
    clock = world.res(GameClock)
    if clock:
        clock.time += dt
        clock.ticks += 1


def hit_flash_system(world: "World", dt: float) -> None:
    """Count down hit flashes and drop the expired ones."""
    expired = []
    for eid, flash in world.all_of(HitFlash):
        flash.remaining -= dt
        if flash.remaining <= 0:
            expired.append(eid)
    for eid in expired:
        world.remove(eid, HitFlash)


def sparkle_system(world: "World", dt: float) -> None:
    rate = _tun("collectibles", "sparkle_rate", 9.0)
    for _, item in world.all_of(Collectible):
        if not item.gathered:
            item.sparkle += rate * dt


def tick_systems(world: "World", dt: float, inp: "InputState") -> bool:
    """Run one simulation step.  Returns False when the phase gate froze it.

    Parameters
    ----------
    world : World
        The ECS world.
    dt : float
        Seconds since the previous tick, wall-clock measured.
    inp : InputState
        Held controls; read, never cleared.
    """
    if not session_gate(world, inp):
        return False

    clock_system(world, dt)

    # Hero
    hero_control_system(world, dt, inp)
    hero_physics_system(world, dt)

    # Everything else that moves
    hostile_system(world, dt)
    projectile_system(world, dt)
    pm = world.res(ParticleManager)
    if pm:
        pm.update(dt, view_bounds(world, _tun("particles", "cull_margin", 100.0)))
    hit_flash_system(world, dt)
    sparkle_system(world, dt)

    interaction_system(world)
    camera_system(world)
    check_termination(world)

    world.purge()

    # Event bus drain
    bus = world.res(EventBus)
    if bus:
        bus.drain()
    return True
