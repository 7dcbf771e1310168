"""
scenes/platformer_scene.py — Side-scrolling platformer view

Builds the level once on entry, then runs one simulation step per
frame and paints the frame description.

    A/D or ←/→   move          Space/W/↑   jump
    Shift        dash          K/J         attack
    Enter        start         R           restart after game over
    F5           reload tuning.toml
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.events import EventBus
from core import tuning as tuning_mod
from components import (
    Hero, Camera, GameClock, Viewport, Score, Session, TileMap, DevLog, Rng,
)
from logic.input_manager import InputState
from logic.particles import ParticleManager
from logic.session import initial_phase
from logic.tick import tick_systems
from logic.worldgen import build_world
from scenes.frame import build_frame
from scenes.platform_draw import draw_frame


def publish_status(world, sink) -> bool:
    """Push score and life to an optional display sink.

    Returns False when there is no sink or it failed; the game goes on
    either way.
    """
    if sink is None:
        return False
    score = world.res(Score)
    res = world.query_one(Hero)
    life = res[1].life_points if res else 0
    try:
        sink(f"Score {score.points if score else 0}  Health {life}")
    except pygame.error:
        return False
    return True


class PlatformerScene(Scene):
    def __init__(self, rng: Rng | None = None):
        self.input = InputState()
        self._rng = rng
        self.status_sink = None

    def on_enter(self, app: App):
        world = app.world
        if world.res(TileMap) is not None:
            return

        w, h = app.screen.get_size()
        world.set_res(Viewport(width=w, height=h))
        world.set_res(Camera())
        world.set_res(GameClock())
        world.set_res(Score())
        world.set_res(Session(phase=initial_phase()))
        world.set_res(self._rng or Rng())
        world.set_res(DevLog())
        world.set_res(ParticleManager(rng=world.res(Rng)))

        # ── Event bus ───────────────────────────────────────────────
        bus = world.res(EventBus)
        if bus is None:
            bus = EventBus()
            world.set_res(bus)
        subscribe_log_handlers(world, bus)

        build_world(world)
        self.status_sink = app.set_status

    # ── event handler ────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        if self.input.feed(event):
            if event.type == pygame.KEYDOWN and event.key == pygame.K_F5:
                tuning_mod.reload()
            return

        if event.type == pygame.VIDEORESIZE:
            view = app.world.res(Viewport)
            if view is not None:
                view.width, view.height = event.w, event.h
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.input.clear()

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        tick_systems(app.world, dt, self.input)
        publish_status(app.world, self.status_sink)

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        fonts = {"sm": app.font_sm, "md": app.font, "lg": app.font_lg, "xl": app.font_xl}
        draw_frame(surface, build_frame(app.world), fonts)


def subscribe_log_handlers(world, bus: EventBus) -> None:
    """Route gameplay events into the DevLog."""

    def _now() -> float:
        clock = world.res(GameClock)
        return clock.time if clock else 0.0

    def _log(eid: int, cat: str, msg: str, **details):
        log = world.res(DevLog)
        if log is not None:
            log.record(eid, cat, msg, t=_now(), details=details or None)

    def _on_defeated(ev):
        _log(ev.eid, "combat", f"{ev.enemy_type} defeated by {ev.cause}", score=ev.score)
        print(f"[COMBAT] {ev.enemy_type} e{ev.eid} defeated (+{ev.score})")

    def _on_hero_damaged(ev):
        _log(-1, "hero", f"took {ev.amount} from {ev.source}", life=ev.life_left)

    def _on_collected(ev):
        _log(ev.eid, "pickup", f"+{ev.score}")

    def _on_phase(ev):
        _log(-1, "session", f"{ev.old} -> {ev.new}", reason=ev.reason)

    bus.subscribe("HostileDefeated", _on_defeated)
    bus.subscribe("HeroDamaged", _on_hero_damaged)
    bus.subscribe("ItemCollected", _on_collected)
    bus.subscribe("PhaseChanged", _on_phase)
