"""logic/particles.py — Lightweight particle system

Attack hits, stomps and defeats throw short-lived debris.  Particles
are transient: they are dropped from the list the moment their life
runs out or they leave the camera view by more than ``cull_margin``,
and are cleared outright on a game reset.

Usage:
    particles = ParticleManager(rng=world.res(Rng))
    world.set_res(particles)

    # Spawn effects from anywhere:
    pm = world.res(ParticleManager)
    pm.emit_preset("hit", x, y)                               # tuned burst
    pm.emit_burst(x, y, count=6, color=(255, 255, 100))       # sparks

    # In the tick orchestrator (bounds = camera view plus a margin):
    pm.update(dt, bounds)

Drawing is handled by scenes/frame.build_frame().
"""

from __future__ import annotations
import math
from components.resources import Rng
from core.tuning import get as _tun, section as _tun_sec


class Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "max_life", "color", "size", "gravity", "drag", "fade")

    def __init__(
        self,
        x: float, y: float,
        vx: float, vy: float,
        life: float,
        color: tuple[int, int, int],
        size: float = 2.0,
        gravity: float = 0.0,
        drag: float = 0.98,
        fade: bool = True,
    ):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = life
        self.color = color
        self.size = size
        self.gravity = gravity
        self.drag = drag
        self.fade = fade


class ParticleManager:
    """Manages all active particles. Stored as a world resource."""

    def __init__(self, max_particles: int | None = None, rng: Rng | None = None):
        if max_particles is None:
            max_particles = int(_tun("particles", "max_particles", 512))
        self._particles: list[Particle] = []
        self._max = max_particles
        self._rng = rng or Rng()

    @property
    def count(self) -> int:
        return len(self._particles)

    @property
    def particles(self) -> list[Particle]:
        """Public read-only access to the live particle list."""
        return self._particles

    # ── emitters ─────────────────────────────────────────────────────

    def emit(self, p: Particle):
        """Add a single particle (low-level)."""
        if len(self._particles) < self._max:
            self._particles.append(p)

    def emit_burst(
        self,
        x: float, y: float,
        count: int = 8,
        color: tuple[int, int, int] = (255, 255, 255),
        speed: float = 120.0,
        life: float = 0.5,
        size: float = 2.0,
        gravity: float = 0.0,
        drag: float = 0.96,
        spread: float = 2 * math.pi,
        angle: float = 0.0,
        fade: bool = True,
    ):
        """Emit a radial burst of particles.

        Args:
            x, y:     world-pixel position
            count:    number of particles
            color:    RGB tuple
            speed:    base speed in px/sec (randomized ±50 %)
            life:     seconds each particle lives (randomized ±30 %)
            size:     pixel edge of each square
            gravity:  downward acceleration in px/sec²
            drag:     velocity multiplier per tick (0-1, lower = more drag)
            spread:   arc width in radians (2π = full circle)
            angle:    center angle of the arc (0 = right, π/2 = down)
            fade:     whether particles fade out over lifetime
        """
        rng = self._rng
        half = spread / 2.0
        for _ in range(count):
            a = angle + rng.uniform(-half, half)
            s = speed * rng.uniform(0.5, 1.5)
            plife = life * rng.uniform(0.7, 1.3)
            self.emit(Particle(
                x=x, y=y,
                vx=math.cos(a) * s,
                vy=math.sin(a) * s,
                life=plife,
                color=color,
                size=max(1.0, size + rng.uniform(-0.5, 0.5)),
                gravity=gravity,
                drag=drag,
                fade=fade,
            ))

    def emit_preset(self, preset: str, x: float, y: float, **overrides):
        """Emit a burst configured by ``[particles.<preset>]``."""
        ps = _tun_sec(f"particles.{preset}")
        kwargs = {
            "count": int(ps.get("count", 8)),
            "color": tuple(ps.get("color", [255, 255, 255])),
            "speed": float(ps.get("speed", 120.0)),
            "life": float(ps.get("life", 0.4)),
            "size": float(ps.get("size", 3.0)),
            "gravity": float(ps.get("gravity", 600.0)),
        }
        kwargs.update(overrides)
        self.emit_burst(x, y, **kwargs)

    # ── tick ─────────────────────────────────────────────────────────

    def update(self, dt: float,
               bounds: tuple[float, float, float, float] | None = None):
        """Age and move every particle.

        Expired particles are dropped.  With *bounds* ``(left, top, right,
        bottom)`` in world space, particles that end the step outside
        them are dropped too.
        """
        alive: list[Particle] = []
        for p in self._particles:
            p.life -= dt
            if p.life <= 0:
                continue
            p.vy += p.gravity * dt
            p.vx *= p.drag
            p.vy *= p.drag
            p.x += p.vx * dt
            p.y += p.vy * dt
            if bounds is not None:
                left, top, right, bottom = bounds
                if not (left <= p.x <= right and top <= p.y <= bottom):
                    continue
            alive.append(p)
        self._particles = alive

    def clear(self):
        """Remove all particles immediately."""
        self._particles.clear()
