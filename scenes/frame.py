"""scenes/frame.py — Drawable description of one frame.

``build_frame(world)`` reads the world and produces an ordered list of
screen-space ``DrawCommand`` records.  It never touches pygame, so the
renderer can be swapped and the output can be asserted in tests.

Layers, back to front::

    sky → mountains → tiles → collectibles → projectiles → hostiles
        → hero (+ swing, dash trail) → particles → HUD → banners

Anything outside the viewport is culled; defeated hostiles and
gathered items are left out.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

from components import (
    Hero, Hostile, Collectible, Projectile, Position, Body, HitFlash,
    Camera, Viewport, Score, Session, TileMap,
)
from core.constants import (
    BLOCK_COLORS, SKY_TOP, SKY_BOTTOM, MOUNTAIN_COLOR, DASH_READY,
    DASH_EMPTY, GAME_OVER_RED, PHASE_START, PHASE_GAME_OVER,
)
from core.tuning import get as _tun
from logic.particles import ParticleManager

if TYPE_CHECKING:
    from core.ecs import World


HOSTILE_COLORS = {
    "ground": (231, 76, 60),
    "hopper": (231, 76, 60),
    "flyer":  (155, 89, 182),
    "ranged": (230, 126, 34),
    "tank":   (127, 140, 141),
}
HERO_COLOR = (52, 152, 219)
COIN_COLOR = (255, 215, 0)
SHOT_COLOR = (255, 107, 107)


@dataclass
class DrawCommand:
    kind: str
    x: float
    y: float
    w: float = 0.0
    h: float = 0.0
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Frame:
    width: int
    height: int
    commands: list[DrawCommand] = field(default_factory=list)

    def add(self, kind: str, x: float, y: float, w: float = 0.0, h: float = 0.0,
            **extra) -> DrawCommand:
        cmd = DrawCommand(kind, x, y, w, h, extra)
        self.commands.append(cmd)
        return cmd

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [c for c in self.commands if c.kind == kind]


def _visible(x: float, y: float, w: float, h: float, vw: int, vh: int) -> bool:
    return x + w > 0 and x < vw and y + h > 0 and y < vh


def build_frame(world: "World") -> Frame:
    view = world.res(Viewport) or Viewport()
    cam = world.res(Camera) or Camera()
    vw, vh = view.width, view.height
    frame = Frame(vw, vh)
    ox, oy = -cam.x, -cam.y

    # ── Background ──────────────────────────────────────────────────
    frame.add("sky", 0, 0, vw, vh, top=SKY_TOP, bottom=SKY_BOTTOM)
    parallax = cam.x * _tun("render", "parallax", 0.3)
    for i in range(10):
        mx = i * 200 - parallax
        peak = 150 + math.sin(i * 0.7) * 50
        points = [(mx, vh), (mx + 50, vh - peak), (mx + 100, vh - peak + 30),
                  (mx + 150, vh - peak - 20), (mx + 200, vh)]
        frame.add("mountain", mx, vh - peak - 20, 200, peak + 20,
                  color=MOUNTAIN_COLOR, points=points)

    # ── Terrain ─────────────────────────────────────────────────────
    tilemap = world.res(TileMap)
    if tilemap is not None:
        for tile in tilemap.tiles:
            sx, sy = tile.x + ox, tile.y + oy
            if not _visible(sx, sy, tile.size, tile.size, vw, vh):
                continue
            frame.add("tile", sx, sy, tile.size, tile.size,
                      block=tile.block_type,
                      color=BLOCK_COLORS.get(tile.block_type, (255, 0, 255)))

    # ── Collectibles ────────────────────────────────────────────────
    for _, item, pos in world.query(Collectible, Position):
        if item.gathered:
            continue
        r = item.radius * (1 + math.sin(item.sparkle) * 0.2)
        sx, sy = pos.x + ox, pos.y + oy
        if not _visible(sx - 2 * r, sy - 2 * r, 4 * r, 4 * r, vw, vh):
            continue
        frame.add("collectible", sx, sy, r, r, color=COIN_COLOR)

    # ── Projectiles ─────────────────────────────────────────────────
    for _, proj, pos in world.query(Projectile, Position):
        if not proj.active:
            continue
        sx, sy = pos.x + ox, pos.y + oy
        if _visible(sx - proj.radius, sy - proj.radius,
                    2 * proj.radius, 2 * proj.radius, vw, vh):
            frame.add("projectile", sx, sy, proj.radius, proj.radius,
                      color=SHOT_COLOR)

    # ── Hostiles ────────────────────────────────────────────────────
    for eid, hostile, pos, body in world.query(Hostile, Position, Body):
        if not hostile.active:
            continue
        sx, sy = pos.x + ox, pos.y + oy
        if not _visible(sx, sy, body.width, body.height, vw, vh):
            continue
        frame.add("hostile", sx, sy, body.width, body.height,
                  enemy_type=hostile.enemy_type,
                  color=HOSTILE_COLORS.get(hostile.enemy_type, (231, 76, 60)),
                  flash=world.has(eid, HitFlash),
                  anim=hostile.anim_cycle,
                  health=hostile.health / max(1, hostile.max_health),
                  show_health=hostile.max_health > 10)

    # ── Hero ────────────────────────────────────────────────────────
    hero = None
    res = world.query_one(Hero, Position, Body)
    if res is not None:
        _, hero, pos, body = res
        sx, sy = pos.x + ox, pos.y + oy
        facing = 1 if hero.facing_right else -1
        if hero.dash_cooldown > 0:
            for i in range(1, 4):
                frame.add("trail", sx - facing * i * 8, sy, body.width, body.height,
                          color=HERO_COLOR)
        blink = hero.invulnerable_time > 0 and int(hero.invulnerable_time * 10) % 2 == 0
        frame.add("hero", sx, sy, body.width, body.height, color=HERO_COLOR,
                  facing_right=hero.facing_right, faded=blink,
                  leg=math.sin(hero.animation_phase) * 3)
        if hero.is_attacking:
            swing = 1 - hero.attack_duration / _tun("hero.attack", "duration", 0.3)
            frame.add("swing", sx + (body.width if hero.facing_right else 0),
                      sy + body.height / 2, 20, 4,
                      facing_right=hero.facing_right,
                      angle=-math.pi / 4 + swing * math.pi / 2)

    # ── Particles ───────────────────────────────────────────────────
    pm = world.res(ParticleManager)
    if pm is not None:
        for p in pm.particles:
            t = max(0.0, p.life / p.max_life) if p.fade else 1.0
            frame.add("particle", p.x + ox, p.y + oy, p.size, p.size,
                      color=p.color, alpha=int(255 * t))

    _hud(frame, world, hero)
    return frame


def _hud(frame: Frame, world: "World", hero: Hero | None) -> None:
    vh = frame.height
    score = world.res(Score)
    points = score.points if score else 0
    life = hero.life_points if hero else 0
    energy = hero.dash_energy if hero else 0.0
    ready = energy >= _tun("hero", "dash_cost", 50.0)

    frame.add("bar", 10, vh - 40, 150, 20, fill=energy / 100,
              color=DASH_READY if ready else DASH_EMPTY, label="DASH")
    frame.add("text", 10, 10, text=f"Score: {points}")
    frame.add("text", 10, 30, text=f"Health: {life}")

    session = world.res(Session)
    phase = session.phase if session else None
    if phase == PHASE_START:
        frame.add("banner", 0, vh / 2 - 50, frame.width, 100,
                  title="PIXEL REALM", hint="Press Enter to Start",
                  color=(255, 255, 255))
    elif phase == PHASE_GAME_OVER:
        frame.add("banner", 0, vh / 2 - 50, frame.width, 100,
                  title="GAME OVER", hint="Press R to Restart",
                  color=GAME_OVER_RED)
