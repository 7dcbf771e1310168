"""
core/scene.py — Scene interface

A Scene owns one playable screen.  The app keeps a stack of them and
only the top one receives events, updates and draws.

    class PlatformerScene(Scene):
        def on_enter(self, app):      # build the world, subscribe handlers
        def handle_event(self, event, app):   # keys, resize, focus
        def update(self, dt, app):    # one simulation step, dt in seconds
        def draw(self, surface, app): # describe the frame, then paint it
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        """Advance simulation by *dt* wall-clock seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
