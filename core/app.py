"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
You don't edit this file to build your game.
You write Scenes and push/pop them.

    app = App(title="Pixel Realm", width=1280, height=720)
    app.push_scene(PlatformerScene())
    app.run()

Frames are paced by ``Clock.tick(fps)``; the elapsed time handed to the
scene is measured by ``GameCycle`` and is not fixed.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.driver import GameCycle
from core.ecs import World
from core.tuning import get as _tun


class SurfaceUnavailable(RuntimeError):
    """The display surface could not be created.  The game cannot start."""


class App:
    def __init__(self, title: str = "Pixel Realm", width: int = 1280, height: int = 720):
        pygame.init()
        self._windowed_size = (width, height)
        try:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            raise SurfaceUnavailable(f"cannot open a {width}x{height} window: {exc}") from exc
        pygame.display.set_caption(title)
        self.title = title
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = int(_tun("driver", "fps", 60))
        self.dt = 0.0

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        # The ECS world — owned here, handed to scenes by reference
        self.world = World()

        self.cycle = GameCycle(update=self._update, render=self._render,
                               max_dt=_tun("driver", "max_dt", 0.0))

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("monospace", 18)
        self.font_xl = pygame.font.SysFont("monospace", 36, bold=True)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)

    # -- Main loop --

    def _update(self, dt: float):
        self.dt = dt
        if self.scene:
            self.scene.update(dt, self)

    def _render(self):
        if self.scene:
            self.scene.draw(self.screen, self)
        pygame.display.flip()

    def run(self):
        self.cycle.start()
        while self.running:
            self.clock.tick(self.fps)

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                    if self.scene:
                        self.scene.handle_event(event, self)
                elif self.scene:
                    self.scene.handle_event(event, self)

            if not self.running:
                break
            self.cycle.cycle()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)
        if self.scene:
            w, h = self.screen.get_size()
            self.scene.handle_event(
                pygame.event.Event(pygame.VIDEORESIZE, w=w, h=h, size=(w, h)), self)

    # -- Status sink --

    def set_status(self, text: str):
        """Show score/health in the window caption."""
        pygame.display.set_caption(f"{self.title} — {text}")
