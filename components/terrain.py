"""components.terrain — Static tile world.

The tile list is generated once per scene and never mutated.  It is an
ordered list, not a grid index: collision passes walk it front to back,
so its order is the resolution order.  Worldgen sorts it row-major
(top row first, left to right within a row).
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Tile:
    col: int
    row: int
    size: int = 32             # px per tile edge
    block_type: str = "fill"

    @property
    def x(self) -> int:
        return self.col * self.size

    @property
    def y(self) -> int:
        return self.row * self.size


@dataclass
class TileMap:
    """World resource holding every tile plus the world's extents."""
    tiles: list[Tile] = field(default_factory=list)
    tile_size: int = 32
    columns: int = 0
    bottom_row: int = 0

    @property
    def pixel_width(self) -> int:
        return self.columns * self.tile_size

    @property
    def pixel_bottom(self) -> int:
        return self.bottom_row * self.tile_size

    def __len__(self) -> int:
        return len(self.tiles)
