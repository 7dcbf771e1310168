"""scenes/platform_draw.py — Paint a Frame with pygame.

Every function receives the data it needs as parameters.  Nothing here
reads the world; it only turns ``DrawCommand`` records into pixels.
"""

from __future__ import annotations
import math
import pygame
from scenes.frame import Frame, DrawCommand


# ── Background ─────────────────────────────────────────────────────

def draw_sky(surface: pygame.Surface, cmd: DrawCommand):
    top, bottom = cmd.extra["top"], cmd.extra["bottom"]
    h = max(1, int(cmd.h))
    for row in range(0, h, 4):
        t = row / h
        color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
        pygame.draw.rect(surface, color, (0, row, int(cmd.w), 4))


def draw_mountain(surface: pygame.Surface, cmd: DrawCommand):
    pygame.draw.polygon(surface, cmd.extra["color"], cmd.extra["points"])


# ── World ──────────────────────────────────────────────────────────

def draw_tile(surface: pygame.Surface, cmd: DrawCommand):
    rect = pygame.Rect(int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h))
    if cmd.extra.get("block") == "platform":
        pygame.draw.rect(surface, cmd.extra["color"], (rect.x, rect.y, rect.w, 8))
        return
    pygame.draw.rect(surface, cmd.extra["color"], rect)
    pygame.draw.rect(surface, (0, 0, 0), rect, 1)


def draw_collectible(surface: pygame.Surface, cmd: DrawCommand):
    centre = (int(cmd.x), int(cmd.y))
    r = max(1, int(cmd.w))
    _draw_circle_alpha(surface, (*cmd.extra["color"], 90), centre[0], centre[1], r * 2)
    pygame.draw.circle(surface, cmd.extra["color"], centre, r)
    pygame.draw.circle(surface, (255, 140, 0), centre, max(1, int(r * 0.6)))


def draw_projectile(surface: pygame.Surface, cmd: DrawCommand):
    centre = (int(cmd.x), int(cmd.y))
    pygame.draw.circle(surface, cmd.extra["color"], centre, max(1, int(cmd.w)))
    pygame.draw.circle(surface, (255, 56, 56), centre, max(1, int(cmd.w)), 2)


def draw_hostile(surface: pygame.Surface, cmd: DrawCommand):
    x, y, w, h = int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h)
    color = (255, 255, 255) if cmd.extra.get("flash") else cmd.extra["color"]
    pygame.draw.rect(surface, color, (x + 4, y + 4, w - 8, h - 8))

    bob = int(math.sin(cmd.extra.get("anim", 0.0)) * 2)
    pygame.draw.rect(surface, (255, 255, 255), (x + 8, y + 10 + bob, 5, 5))
    pygame.draw.rect(surface, (255, 255, 255), (x + w - 13, y + 10 + bob, 5, 5))

    if cmd.extra.get("show_health"):
        ratio = max(0.0, cmd.extra["health"])
        if ratio > 0.5:
            bar = (46, 204, 113)
        elif ratio > 0.25:
            bar = (243, 156, 18)
        else:
            bar = (231, 76, 60)
        pygame.draw.rect(surface, (40, 40, 40), (x, y - 8, w, 4))
        pygame.draw.rect(surface, bar, (x, y - 8, max(1, int(w * ratio)), 4))


def draw_hero(surface: pygame.Surface, cmd: DrawCommand):
    x, y, w, h = int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h)
    body = cmd.extra["color"]
    if cmd.extra.get("faded"):
        body = tuple(c // 2 for c in body)
    pygame.draw.rect(surface, body, (x + 4, y + 8, w - 8, h - 12))
    pygame.draw.rect(surface, (243, 156, 18), (x + 6, y + 2, w - 12, 10))

    eye = 2 if cmd.extra.get("facing_right") else -2
    pygame.draw.rect(surface, (0, 0, 0), (x + 10 + eye, y + 6, 2, 2))
    pygame.draw.rect(surface, (0, 0, 0), (x + w - 12 + eye, y + 6, 2, 2))

    leg = abs(int(cmd.extra.get("leg", 0.0)))
    pygame.draw.rect(surface, (44, 62, 80), (x + 8, y + h - 6, 4, 6 + leg))
    pygame.draw.rect(surface, (44, 62, 80), (x + w - 12, y + h - 6, 4, max(1, 6 - leg)))


def draw_trail(surface: pygame.Surface, cmd: DrawCommand):
    trail = pygame.Surface((int(cmd.w), int(cmd.h)), pygame.SRCALPHA)
    trail.fill((*cmd.extra["color"], 76))
    surface.blit(trail, (int(cmd.x), int(cmd.y)))


def draw_swing(surface: pygame.Surface, cmd: DrawCommand):
    angle = cmd.extra["angle"]
    direction = 1 if cmd.extra.get("facing_right") else -1
    ex = cmd.x + math.cos(angle) * cmd.w * direction
    ey = cmd.y + math.sin(angle) * cmd.w
    pygame.draw.line(surface, (236, 240, 241), (int(cmd.x), int(cmd.y)),
                     (int(ex), int(ey)), int(cmd.h))


def draw_particle(surface: pygame.Surface, cmd: DrawCommand):
    alpha = cmd.extra.get("alpha", 255)
    radius = max(1, int(cmd.w))
    if alpha >= 250:
        pygame.draw.circle(surface, cmd.extra["color"], (int(cmd.x), int(cmd.y)), radius)
    else:
        _draw_circle_alpha(surface, (*cmd.extra["color"], alpha),
                           int(cmd.x), int(cmd.y), radius)


# ── HUD ────────────────────────────────────────────────────────────

def draw_bar(surface: pygame.Surface, cmd: DrawCommand, fonts: dict):
    x, y, w, h = int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h)
    back = pygame.Surface((w, h), pygame.SRCALPHA)
    back.fill((0, 0, 0, 128))
    surface.blit(back, (x, y))
    fill = max(0.0, min(1.0, cmd.extra["fill"]))
    pygame.draw.rect(surface, cmd.extra["color"], (x + 2, y + 2, int((w - 4) * fill), h - 4))
    label = cmd.extra.get("label")
    if label:
        img = fonts["sm"].render(label, True, (255, 255, 255))
        surface.blit(img, (x + w + 10, y + 3))


def draw_text(surface: pygame.Surface, cmd: DrawCommand, fonts: dict):
    img = fonts["md"].render(cmd.extra["text"], True, cmd.extra.get("color", (255, 255, 255)))
    surface.blit(img, (int(cmd.x), int(cmd.y)))


def draw_banner(surface: pygame.Surface, cmd: DrawCommand, fonts: dict):
    x, y, w, h = int(cmd.x), int(cmd.y), int(cmd.w), int(cmd.h)
    shade = pygame.Surface((w, h), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 178))
    surface.blit(shade, (x, y))
    title = fonts["xl"].render(cmd.extra["title"], True, cmd.extra["color"])
    surface.blit(title, (x + (w - title.get_width()) // 2, y + 20))
    hint = fonts["lg"].render(cmd.extra["hint"], True, (255, 255, 255))
    surface.blit(hint, (x + (w - hint.get_width()) // 2, y + 62))


_PLAIN = {
    "sky": draw_sky,
    "mountain": draw_mountain,
    "tile": draw_tile,
    "collectible": draw_collectible,
    "projectile": draw_projectile,
    "hostile": draw_hostile,
    "trail": draw_trail,
    "hero": draw_hero,
    "swing": draw_swing,
    "particle": draw_particle,
}
_TEXT = {
    "bar": draw_bar,
    "text": draw_text,
    "banner": draw_banner,
}


def draw_frame(surface: pygame.Surface, frame: Frame, fonts: dict):
    """Paint every command in order.  Unknown kinds are ignored."""
    for cmd in frame.commands:
        fn = _PLAIN.get(cmd.kind)
        if fn is not None:
            fn(surface, cmd)
            continue
        fn = _TEXT.get(cmd.kind)
        if fn is not None:
            fn(surface, cmd, fonts)


def _draw_circle_alpha(surface: pygame.Surface, color: tuple, cx: int, cy: int, radius: int):
    d = radius * 2 + 2
    dot = pygame.Surface((d, d), pygame.SRCALPHA)
    pygame.draw.circle(dot, color, (d // 2, d // 2), radius)
    surface.blit(dot, (cx - d // 2, cy - d // 2))
