"""logic/camera.py — Smoothed follow camera.

Targets the hero centred in the current viewport and eases toward it
with separate X/Y factors (X converges faster).  X never scrolls left
of the world origin; Y stays inside a fixed band.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from components import Hero, Position, Body, Camera, Viewport
from core.tuning import get as _tun

if TYPE_CHECKING:
    from core.ecs import World


def camera_target(pos: Position, body: Body, view: Viewport) -> tuple[float, float]:
    return (pos.x - view.width / 2 + body.width / 2,
            pos.y - view.height / 2 + body.height / 2)


def camera_system(world: "World") -> None:
    cam = world.res(Camera)
    res = world.query_one(Hero, Position, Body)
    if cam is None or res is None:
        return
    _, _, pos, body = res
    view = world.res(Viewport) or Viewport()

    tx, ty = camera_target(pos, body, view)
    cam.x += (tx - cam.x) * _tun("camera", "smooth_x", 0.1)
    cam.y += (ty - cam.y) * _tun("camera", "smooth_y", 0.05)

    cam.x = max(_tun("camera", "min_x", 0.0), cam.x)
    cam.y = max(_tun("camera", "min_y", -100.0),
                min(_tun("camera", "max_y", 200.0), cam.y))


def view_bounds(world: "World", margin: float) -> tuple[float, float, float, float]:
    """World-space ``(left, top, right, bottom)`` of the view grown by *margin*."""
    cam = world.res(Camera) or Camera()
    view = world.res(Viewport) or Viewport()
    return (cam.x - margin, cam.y - margin,
            cam.x + view.width + margin, cam.y + view.height + margin)
