"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Velocity, Body
player         Hero
ai             Hostile
items          Collectible
combat         Projectile
rendering      HitFlash
terrain        Tile, TileMap
resources      GameClock, Camera, Viewport, Score, Session, Rng
dev_log        DevLog

All public names are re-exported here so code can do
``from components import Position``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Velocity, Body

# ── Actors ───────────────────────────────────────────────────────────
from components.player import Hero
from components.ai import Hostile
from components.items import Collectible
from components.combat import Projectile

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import HitFlash

# ── Terrain ──────────────────────────────────────────────────────────
from components.terrain import Tile, TileMap

# ── World resources / singletons ─────────────────────────────────────
from components.resources import Camera, GameClock, Viewport, Score, Session, Rng
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Position", "Velocity", "Body",
    # actors
    "Hero", "Hostile", "Collectible", "Projectile",
    # rendering
    "HitFlash",
    # terrain
    "Tile", "TileMap",
    # resources
    "Camera", "GameClock", "Viewport", "Score", "Session", "Rng", "DevLog",
]
