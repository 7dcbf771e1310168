"""logic/worldgen.py — One-shot scene construction.

Builds the tile world, the collectibles, the hostile roster and the
hero into an empty World.  Runs once per scene; a game reset never
calls back in here, it only rewinds what this module created.

Ground profile, per column ``c``::

    ground_row(c) = floor(base + sin(c·0.3)·A + cos(c·0.15)·B)

The ground row is tagged surface, every row below it down to the
bottom row is fill.  Floating platforms come from ``(start, row, len)``
descriptors.  The finished tile list is sorted row-major, which fixes
the order the collision resolver visits overlapping tiles in.
"""

from __future__ import annotations
import math
from core.ecs import World
from core.tuning import get as _tun
from core.constants import (
    TILE_SIZE, COLUMN_COUNT, BASE_HEIGHT, BOTTOM_ROW,
    AMPLITUDE_SIN, AMPLITUDE_COS, DEFAULT_PLATFORMS, DEFAULT_ROSTER,
    BLOCK_SURFACE, BLOCK_FILL, BLOCK_PLATFORM,
)
from components import Tile, TileMap, Rng
from logic.entity_factory import spawn_hero, spawn_hostile, spawn_collectible


def ground_row(col: int, base: float, amp_sin: float, amp_cos: float) -> int:
    return math.floor(base + math.sin(col * 0.3) * amp_sin + math.cos(col * 0.15) * amp_cos)


def generate_tiles(
    *,
    tile_size: int = TILE_SIZE,
    columns: int = COLUMN_COUNT,
    base_height: float = BASE_HEIGHT,
    bottom_row: int = BOTTOM_ROW,
    amp_sin: float = AMPLITUDE_SIN,
    amp_cos: float = AMPLITUDE_COS,
    platforms: list | None = None,
) -> TileMap:
    """Deterministic terrain: ground columns plus floating platforms."""
    if platforms is None:
        platforms = DEFAULT_PLATFORMS

    tiles: list[Tile] = []
    for col in range(columns):
        top = ground_row(col, base_height, amp_sin, amp_cos)
        for row in range(top, bottom_row):
            kind = BLOCK_SURFACE if row == top else BLOCK_FILL
            tiles.append(Tile(col=col, row=row, size=tile_size, block_type=kind))

    for start, row, length in platforms:
        for i in range(int(length)):
            tiles.append(Tile(col=int(start) + i, row=int(row), size=tile_size,
                              block_type=BLOCK_PLATFORM))

    tiles.sort(key=lambda t: (t.row, t.col))
    return TileMap(tiles=tiles, tile_size=tile_size,
                   columns=columns, bottom_row=bottom_row)


def collectible_positions(rng: Rng, count: int, *,
                          start_x: float = 100.0, spacing: float = 150.0,
                          jitter: float = 50.0, y_min: float = 200.0,
                          y_range: float = 300.0) -> list[tuple[float, float]]:
    """Left-to-right coin trail with random jitter.

    Draws two numbers per item (x jitter, then y) from *rng*.
    """
    out = []
    for i in range(count):
        x = start_x + i * spacing + rng.random() * jitter
        y = y_min + rng.random() * y_range
        out.append((x, y))
    return out


def tiles_from_tuning() -> TileMap:
    return generate_tiles(
        tile_size=int(_tun("world", "tile_size", TILE_SIZE)),
        columns=int(_tun("world", "columns", COLUMN_COUNT)),
        base_height=float(_tun("world", "base_height", BASE_HEIGHT)),
        bottom_row=int(_tun("world", "bottom_row", BOTTOM_ROW)),
        amp_sin=float(_tun("world", "amplitude_sin", AMPLITUDE_SIN)),
        amp_cos=float(_tun("world", "amplitude_cos", AMPLITUDE_COS)),
        platforms=_tun("world", "platforms", DEFAULT_PLATFORMS),
    )


def build_world(world: World) -> TileMap:
    """Populate *world* with terrain, collectibles, hostiles and the hero.

    Reads the ``Rng`` resource (creating an unseeded one if absent) so
    tests can make placement reproducible.
    """
    rng = world.res(Rng)
    if rng is None:
        rng = Rng()
        world.set_res(rng)

    tilemap = tiles_from_tuning()
    world.set_res(tilemap)

    coins = collectible_positions(
        rng, int(_tun("collectibles", "count", 30)),
        start_x=_tun("collectibles", "start_x", 100.0),
        spacing=_tun("collectibles", "spacing", 150.0),
        jitter=_tun("collectibles", "jitter", 50.0),
        y_min=_tun("collectibles", "y_min", 200.0),
        y_range=_tun("collectibles", "y_range", 300.0),
    )
    for x, y in coins:
        spawn_collectible(world, x, y)

    roster = _tun("hostiles", "roster", DEFAULT_ROSTER)
    for desc in roster:
        spawn_hostile(world, desc)

    spawn_hero(world)

    print(f"[WORLD] {len(tilemap)} tiles, {len(coins)} collectibles, "
          f"{len(roster)} hostiles")
    return tilemap
