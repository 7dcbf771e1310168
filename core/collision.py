"""core/collision.py — Low-level AABB primitives.

These live in ``core/`` (not ``logic/``) because the hero resolver,
hostile bounce, melee reach, and projectile culling all need them.

All rectangles are (x, y, w, h) with (x, y) the top-left corner, in
pixels.  Overlap is strict: boxes that share an edge do not overlap.
"""

from __future__ import annotations
from typing import NamedTuple


class Penetration(NamedTuple):
    """Overlap depth of a moving box into a fixed box, per side.

    ``left``   — how far the mover's right edge pushed past the tile's left
    ``right``  — how far the mover's left edge pushed past the tile's right
    ``top``    — how far the mover's bottom edge sank below the tile's top
    ``bottom`` — how far the mover's top edge rose above the tile's bottom
    """
    left: float
    right: float
    top: float
    bottom: float

    def minimum(self) -> float:
        return min(self.left, self.right, self.top, self.bottom)


def overlaps(ax: float, ay: float, aw: float, ah: float,
             bx: float, by: float, bw: float, bh: float) -> bool:
    """Return True if the two boxes intersect with positive area."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def penetration(ax: float, ay: float, aw: float, ah: float,
                bx: float, by: float, bw: float, bh: float) -> Penetration:
    """Directional overlap depths of box A into box B.

    Only meaningful when ``overlaps()`` is True for the same boxes.
    """
    return Penetration(
        left=(ax + aw) - bx,
        right=(bx + bw) - ax,
        top=(ay + ah) - by,
        bottom=(by + bh) - ay,
    )


def point_inside(px: float, py: float,
                 bx: float, by: float, bw: float, bh: float) -> bool:
    """Strict point-in-box test (points on the border are outside)."""
    return bx < px < bx + bw and by < py < by + bh
