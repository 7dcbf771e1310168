"""core/constants.py — Shared constants used across the codebase.

Centralises the default level layout and magic numbers so there's
exactly one place to change them.  ``data/tuning.toml`` may override
any of these per profile; the values here are what the game uses when
the file says nothing.

Unit System
-----------
All gameplay distances are in **pixels**, times in **seconds**,
speeds in **px/s** and accelerations in **px/s²**.  The y axis points
down, so a negative vy is upward motion.
"""

# ── Tile block types ────────────────────────────────────────────────
BLOCK_SURFACE  = "surface"     # top row of the ground profile
BLOCK_FILL     = "fill"        # everything below the surface row
BLOCK_PLATFORM = "platform"    # floating ledges

# Render
TILE_SIZE = 32

BLOCK_COLORS = {
    BLOCK_SURFACE:  (76, 153, 0),
    BLOCK_FILL:     (139, 90, 43),
    BLOCK_PLATFORM: (127, 140, 141),
}

# ── World generation defaults ───────────────────────────────────────
COLUMN_COUNT = 150
BASE_HEIGHT = 20.0             # ground row before undulation
BOTTOM_ROW = 23                # exclusive — fill stops above this row
AMPLITUDE_SIN = 2.0            # sin(c·0.3) term
AMPLITUDE_COS = 1.5            # cos(c·0.15) term

# (start_column, row, length)
DEFAULT_PLATFORMS: list[tuple[int, int, int]] = [
    (8, 16, 4),
    (15, 14, 5),
    (23, 12, 3),
    (30, 15, 6),
    (40, 13, 4),
    (48, 11, 5),
    (58, 14, 6),
    (70, 12, 4),
    (80, 10, 5),
    (92, 13, 7),
    (105, 11, 5),
    (118, 15, 6),
    (130, 13, 4),
    (140, 9, 5),
]

# (x, y, movement_pattern, enemy_type)
DEFAULT_ROSTER: list[tuple[float, float, str, str]] = [
    (400.0, 500.0, "patrol", "ground"),
    (800.0, 450.0, "jump", "hopper"),
    (1200.0, 480.0, "patrol", "ground"),
    (1600.0, 420.0, "jump", "hopper"),
    (2000.0, 500.0, "flying", "flyer"),
    (2400.0, 450.0, "patrol", "tank"),
    (2800.0, 480.0, "flying", "flyer"),
    (3200.0, 420.0, "shooter", "ranged"),
    (3600.0, 500.0, "patrol", "ground"),
    (4000.0, 450.0, "tank", "tank"),
]

# ── Hostile type table ──────────────────────────────────────────────
# size: square box edge, range: patrol range, damage: contact damage,
# score: points awarded on defeat.
HOSTILE_TYPES: dict[str, dict[str, float]] = {
    "ground": {"size": 28, "range": 150, "health": 10, "damage": 10, "score": 50,  "patrol_speed": 80},
    "hopper": {"size": 28, "range": 150, "health": 10, "damage": 10, "score": 50,  "patrol_speed": 80},
    "flyer":  {"size": 28, "range": 150, "health": 10, "damage": 10, "score": 50,  "patrol_speed": 80},
    "ranged": {"size": 28, "range": 150, "health": 15, "damage": 10, "score": 100, "patrol_speed": 80},
    "tank":   {"size": 36, "range": 100, "health": 30, "damage": 15, "score": 150, "patrol_speed": 50},
}

# ── Session phases ──────────────────────────────────────────────────
PHASE_START     = "start"
PHASE_PLAYING   = "playing"
PHASE_GAME_OVER = "game_over"

# ── HUD palette ─────────────────────────────────────────────────────
SKY_TOP = (44, 62, 80)
SKY_BOTTOM = (52, 73, 94)
MOUNTAIN_COLOR = (26, 37, 47)
DASH_READY = (52, 152, 219)
DASH_EMPTY = (149, 165, 166)
GAME_OVER_RED = (231, 76, 60)
