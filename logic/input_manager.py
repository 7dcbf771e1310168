"""logic/input_manager.py — Held-key input layer.

Sits between raw pygame events and the simulation.  The scene feeds in
raw KEYDOWN / KEYUP events; the state keeps the set of host key codes
that are currently down.  Systems ask about *logical controls* and
never touch raw keycodes:

    self.input = InputState()
    # for each event:
    self.input.feed(event)

    if self.input.held("jump"):
        ...

The set is sampled, never consumed: reading a control does not clear
it, so a key held across several ticks reads True on every one.
"""

from __future__ import annotations
import pygame


# ── Logical controls ────────────────────────────────────────────────
# move_left  move_right  jump  dash  attack  start  reset

_BINDS: dict[str, tuple[int, ...]] = {
    "move_left":  (pygame.K_a, pygame.K_LEFT),
    "move_right": (pygame.K_d, pygame.K_RIGHT),
    "jump":       (pygame.K_SPACE, pygame.K_w, pygame.K_UP),
    "dash":       (pygame.K_LSHIFT, pygame.K_RSHIFT),
    "attack":     (pygame.K_k, pygame.K_j),
    "start":      (pygame.K_RETURN, pygame.K_KP_ENTER),
    "reset":      (pygame.K_r,),
}

CONTROLS = tuple(_BINDS)


class InputState:
    """Set of held host key codes with a logical-control view."""

    def __init__(self, binds: dict[str, tuple[int, ...]] | None = None):
        self._held: set[int] = set()
        self._binds = dict(binds or _BINDS)

    # ── mutation (host side) ────────────────────────────────────

    def press(self, key: int):
        self._held.add(key)

    def release(self, key: int):
        self._held.discard(key)

    def feed(self, event: pygame.event.Event) -> bool:
        """Apply a raw pygame event.  Returns True if it was a key event."""
        if event.type == pygame.KEYDOWN:
            self.press(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.release(event.key)
            return True
        return False

    def clear(self):
        """Drop every held key (window lost focus)."""
        self._held.clear()

    def hold(self, control: str):
        """Press the first key bound to *control*.  Used by scripted input."""
        self.press(self._binds[control][0])

    def let_go(self, control: str):
        """Release every key bound to *control*."""
        for key in self._binds[control]:
            self._held.discard(key)

    # ── queries (simulation side) ───────────────────────────────

    def held(self, control: str) -> bool:
        """True if any key bound to *control* is currently down."""
        return any(k in self._held for k in self._binds.get(control, ()))

    def held_keys(self) -> frozenset[int]:
        return frozenset(self._held)

    def __repr__(self) -> str:
        on = [c for c in self._binds if self.held(c)]
        return f"InputState(held={on})"
