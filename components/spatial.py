"""components.spatial — Position, movement, and collision boxes.

All coordinates and dimensions are in pixels.  ``Position`` is the
top-left corner of the entity's box, except for round things
(collectibles, projectiles) where it is the centre.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Position:
    x: float = 0.0        # px
    y: float = 0.0        # px


@dataclass
class Velocity:
    x: float = 0.0        # px/s
    y: float = 0.0        # px/s


@dataclass
class Body:
    """Axis-aligned collision box anchored at Position (top-left)."""
    width: float = 24.0   # px
    height: float = 32.0  # px
