"""test_world.py — Level generation, tuning profiles, input, camera, frame.

Everything here is pygame-free except the key constants used by the
input bindings; no window is ever opened.

Run:  python test_world.py
"""
from __future__ import annotations
import sys, math, random, traceback

# ── Bootstrap ────────────────────────────────────────────────────────
import core.tuning as _tuning
_tuning.load()

import pygame
from core.ecs import World
from core.constants import (
    BLOCK_SURFACE, BLOCK_FILL, BLOCK_PLATFORM, DEFAULT_PLATFORMS,
    PHASE_START, PHASE_PLAYING, PHASE_GAME_OVER,
)
from components import (
    Hero, Hostile, Collectible, Position, Body, Camera, Viewport, Score,
    Session, Tile, TileMap, Rng,
)
from logic.camera import camera_system, camera_target
from logic.entity_factory import spawn_hero, spawn_hostile, spawn_collectible
from logic.input_manager import InputState, CONTROLS
from logic.session import initial_phase
from logic.worldgen import (
    ground_row, generate_tiles, collectible_positions, tiles_from_tuning,
    build_world,
)
from scenes.frame import build_frame


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label}: {detail}")


# ═══════════════════════════════════════════════════════════════════════
#  1. Terrain generation
# ═══════════════════════════════════════════════════════════════════════

def test_terrain_generation():
    print("\n── 1. Terrain generation ──")
    check(ground_row(0, 20.0, 2.0, 1.5) == 21, "1a: ground row at column 0",
          f"{ground_row(0, 20.0, 2.0, 1.5)}")
    check(all(ground_row(c, 20.0, 0.0, 0.0) == 20 for c in range(50)),
          "1b: zero amplitudes give flat ground")

    tm = generate_tiles(columns=3, base_height=20.0, bottom_row=23,
                        amp_sin=0.0, amp_cos=0.0, platforms=[])
    kinds = [t.block_type for t in tm.tiles]
    check(len(tm) == 9, "1c: 3 columns × 3 rows of ground", f"{len(tm)}")
    check(kinds.count(BLOCK_SURFACE) == 3 and kinds.count(BLOCK_FILL) == 6,
          "1d: one surface tile per column, rest fill")

    tm = generate_tiles()
    by_col: dict[int, list[Tile]] = {}
    for t in tm.tiles:
        if t.block_type != BLOCK_PLATFORM:
            by_col.setdefault(t.col, []).append(t)
    continuous = True
    for col in range(150):
        top = ground_row(col, 20.0, 2.0, 1.5)
        tiles = by_col.get(col, [])
        rows = sorted(t.row for t in tiles)
        surface = [t for t in tiles if t.block_type == BLOCK_SURFACE]
        if rows != list(range(top, 23)):
            continuous = False
            break
        if tiles and (len(surface) != 1 or surface[0].row != top):
            continuous = False
            break
    check(continuous,
          "1e: every column filled from its ground row to the bottom row")
    check(all(ground_row(c, 20.0, 2.0, 1.5) == 23 and c not in by_col for c in (4, 5))
          and 3 in by_col and 6 in by_col,
          "1e2: ground rows at the bottom row leave columns 4 and 5 empty")

    platforms = [t for t in tm.tiles if t.block_type == BLOCK_PLATFORM]
    check(len(platforms) == sum(p[2] for p in DEFAULT_PLATFORMS),
          "1f: one platform tile per descriptor cell", f"{len(platforms)}")
    first = sorted((t.col, t.row) for t in platforms if t.row == 16 and 8 <= t.col < 12)
    check(first == [(8, 16), (9, 16), (10, 16), (11, 16)],
          "1g: first platform spans columns 8–11 on row 16")

    keys = [(t.row, t.col) for t in tm.tiles]
    check(keys == sorted(keys), "1h: tiles stored row-major")

    again = generate_tiles()
    check(again.tiles == tm.tiles, "1i: generation is deterministic")


# ═══════════════════════════════════════════════════════════════════════
#  2. Collectible placement and world build
# ═══════════════════════════════════════════════════════════════════════

def test_world_build():
    print("\n── 2. World build ──")
    a = collectible_positions(Rng(random.Random(42)), 30)
    b = collectible_positions(Rng(random.Random(42)), 30)
    check(a == b, "2a: same seed, same coin trail")
    xs = [x for x, _ in a]
    check(all(x2 > x1 for x1, x2 in zip(xs, xs[1:])), "2b: coins progress rightward")
    check(all(200.0 <= y < 500.0 for _, y in a), "2c: coin y within its band")
    check(all(100.0 + i * 150.0 <= x < 150.0 + i * 150.0 for i, x in enumerate(xs)),
          "2d: coin x within its jitter slot")

    w = World()
    w.set_res(Rng(random.Random(5)))
    tm = build_world(w)
    check(w.res(TileMap) is tm, "2e: tile map stored as a resource")
    check(w.count(Collectible) == 30, "2f: 30 collectibles", f"{w.count(Collectible)}")
    check(w.count(Hostile) == 10, "2g: 10 hostiles", f"{w.count(Hostile)}")
    check(w.count(Hero) == 1, "2h: one hero")

    _, hero, pos = w.query_one(Hero, Position)
    check((pos.x, pos.y) == (100.0, 400.0), "2i: hero at spawn point")

    tanks = [(h, b) for _, h, b in w.query(Hostile, Body) if h.enemy_type == "tank"]
    check(tanks and all(b.width == 36 and h.health == 30 and h.patrol_range == 100
                        for h, b in tanks),
          "2j: tank stats: 36 px box, 30 health, 100 px range")
    ranged = [h for _, h in w.all_of(Hostile) if h.enemy_type == "ranged"]
    check(ranged and ranged[0].health == 15, "2k: ranged starts with 15 health")
    ground = [(h, b) for _, h, b in w.query(Hostile, Body) if h.enemy_type == "ground"]
    check(all(b.width == 28 and h.health == 10 for h, b in ground),
          "2l: ground stats: 28 px box, 10 health")


# ═══════════════════════════════════════════════════════════════════════
#  3. Tuning profiles
# ═══════════════════════════════════════════════════════════════════════

def test_profiles():
    print("\n── 3. Tuning profiles ──")
    try:
        _tuning.load(profile="classic")
        check(_tuning.get_profile() == "classic", "3a: profile reported")
        tm = tiles_from_tuning()
        surfaces = {t.row for t in tm.tiles if t.block_type == BLOCK_SURFACE}
        check(tm.tile_size == 24 and tm.columns == 100 and surfaces == {20},
              "3b: classic world is small, flat, 24 px tiles",
              f"size={tm.tile_size} cols={tm.columns} rows={surfaces}")
        check(initial_phase() == PHASE_PLAYING, "3c: classic has no start screen")
        check(_tuning.get("hero.attack", "enabled", True) is False,
              "3d: classic has no melee attack")
        check(len(_tuning.get("hostiles", "roster", [])) == 4, "3e: classic roster of 4")
        check(_tuning.get("hero", "jump_power", 0.0) == 420.0,
              "3f: untouched base values survive the overlay")

        _tuning.load(profile="latest")
        check(_tuning.get("world", "tile_size", 0) == 32 and initial_phase() == PHASE_START,
              "3g: latest profile is the canonical game")

        _tuning.load("does/not/exist.toml")
        check(_tuning.get("hero", "max_speed", 250.0) == 250.0
              and len(tiles_from_tuning().tiles) == len(generate_tiles().tiles),
              "3h: missing file falls back to call-site defaults")
        check(_tuning.section("hero") == {}, "3i: missing section is an empty dict")
    finally:
        _tuning.load()


# ═══════════════════════════════════════════════════════════════════════
#  4. Input state
# ═══════════════════════════════════════════════════════════════════════

def test_input_state():
    print("\n── 4. Input state ──")
    inp = InputState()
    check(not any(inp.held(c) for c in CONTROLS), "4a: nothing held at start")

    inp.press(pygame.K_a)
    check(inp.held("move_left") and not inp.held("move_right"), "4b: A is move_left")
    check(inp.held("move_left"), "4c: reading a control does not consume it")
    inp.release(pygame.K_a)
    check(not inp.held("move_left"), "4d: release clears it")

    used = inp.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    check(used and inp.held("jump") and not inp.held("start"),
          "4e: Space jumps but does not start the game")
    inp.feed(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
    check(not inp.held("jump"), "4f: KEYUP releases")

    for key, control in ((pygame.K_RIGHT, "move_right"), (pygame.K_UP, "jump"),
                         (pygame.K_LSHIFT, "dash"), (pygame.K_k, "attack"),
                         (pygame.K_RETURN, "start"), (pygame.K_r, "reset")):
        inp.press(key)
    check(all(inp.held(c) for c in ("move_right", "jump", "dash", "attack",
                                    "start", "reset")),
          "4g: alternate bindings all map")
    inp.clear()
    check(not inp.held_keys(), "4h: clear drops every key")


# ═══════════════════════════════════════════════════════════════════════
#  5. Camera
# ═══════════════════════════════════════════════════════════════════════

def _camera_world(x: float, y: float) -> tuple[World, Camera]:
    w = World()
    cam = Camera()
    w.set_res(cam)
    w.set_res(Viewport(1280, 720))
    eid = spawn_hero(w)
    pos = w.get(eid, Position)
    pos.x, pos.y = x, y
    return w, cam


def test_camera():
    print("\n── 5. Camera ──")
    w, cam = _camera_world(1000.0, 400.0)
    camera_system(w)
    check(math.isclose(cam.x, 37.2) and math.isclose(cam.y, 2.8),
          "5a: one step covers 10 % in x and 5 % in y",
          f"cam=({cam.x:.3f}, {cam.y:.3f})")

    for _ in range(400):
        camera_system(w)
    tx, ty = camera_target(Position(1000.0, 400.0), Body(), Viewport(1280, 720))
    check(abs(cam.x - tx) < 0.01 and abs(cam.y - ty) < 0.01,
          "5b: camera converges on the hero", f"cam=({cam.x:.3f}, {cam.y:.3f})")

    w, cam = _camera_world(10.0, 400.0)
    camera_system(w)
    check(cam.x == 0.0, "5c: no scrolling left of the origin", f"x={cam.x}")

    w, cam = _camera_world(1000.0, 5000.0)
    cam.y = 199.0
    camera_system(w)
    check(cam.y == 200.0, "5d: y clamped to the top of its band", f"y={cam.y}")

    w, cam = _camera_world(1000.0, -5000.0)
    cam.y = -99.0
    camera_system(w)
    check(cam.y == -100.0, "5e: y clamped to the bottom of its band", f"y={cam.y}")

    w, cam = _camera_world(1000.0, 400.0)
    w.res(Viewport).width = 640
    camera_system(w)
    check(math.isclose(cam.x, (1000.0 - 320.0 + 12.0) * 0.1),
          "5f: target follows a resized viewport", f"x={cam.x}")


# ═══════════════════════════════════════════════════════════════════════
#  6. Frame description
# ═══════════════════════════════════════════════════════════════════════

def _frame_world(phase: str) -> World:
    w = World()
    w.set_res(Viewport(800, 600))
    w.set_res(Camera(100.0, 0.0))
    w.set_res(Score(250))
    w.set_res(Session(phase=phase))
    w.set_res(TileMap(tiles=[Tile(col=5, row=18), Tile(col=100, row=18)],
                      tile_size=32, columns=120, bottom_row=23))
    eid = spawn_hero(w)
    pos = w.get(eid, Position)
    pos.x, pos.y = 300.0, 400.0

    spawn_hostile(w, {"x": 500.0, "y": 400.0, "pattern": "patrol", "type": "ground"})
    gone = spawn_hostile(w, {"x": 520.0, "y": 400.0, "pattern": "patrol", "type": "tank"})
    w.get(gone, Hostile).active = False

    spawn_collectible(w, 400.0, 300.0)
    taken = spawn_collectible(w, 450.0, 300.0)
    w.get(taken, Collectible).gathered = True
    return w


def test_frame():
    print("\n── 6. Frame description ──")
    frame = build_frame(_frame_world(PHASE_PLAYING))
    kinds = [c.kind for c in frame.commands]

    check(kinds[0] == "sky", "6a: sky is painted first")
    check(len(frame.of_kind("tile")) == 1, "6b: off-screen tile culled")
    check(len(frame.of_kind("hostile")) == 1, "6c: defeated hostile omitted")
    check(len(frame.of_kind("collectible")) == 1, "6d: gathered item omitted")

    hero = frame.of_kind("hero")
    check(len(hero) == 1 and hero[0].x == 200.0 and hero[0].y == 400.0,
          "6e: hero drawn in screen space", f"{hero}")
    tile = frame.of_kind("tile")[0]
    check(tile.x == 60.0, "6f: tiles shifted by the camera", f"x={tile.x}")

    last_tile = max(i for i, k in enumerate(kinds) if k == "tile")
    first_hostile = kinds.index("hostile")
    hero_at = kinds.index("hero")
    first_text = kinds.index("text")
    check(last_tile < first_hostile < hero_at < first_text,
          "6g: layers ordered tiles → hostiles → hero → HUD")

    texts = [c.extra["text"] for c in frame.of_kind("text")]
    check("Score: 250" in texts and "Health: 100" in texts,
          "6h: HUD shows score and health", f"{texts}")
    check(not frame.of_kind("banner"), "6i: no banner while playing")

    over = build_frame(_frame_world(PHASE_GAME_OVER)).of_kind("banner")
    check(len(over) == 1 and over[0].extra["title"] == "GAME OVER",
          "6j: game-over banner")
    start = build_frame(_frame_world(PHASE_START)).of_kind("banner")
    check(len(start) == 1 and "Start" in start[0].extra["hint"],
          "6k: start banner")

    mountains = frame.of_kind("mountain")
    check(len(mountains) == 10 and math.isclose(mountains[0].x, -30.0),
          "6l: mountains scroll at 0.3 × camera", f"x={mountains[0].x}")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Terrain generation", test_terrain_generation),
        ("World build", test_world_build),
        ("Tuning profiles", test_profiles),
        ("Input state", test_input_state),
        ("Camera", test_camera),
        ("Frame description", test_frame),
    ]

    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            print(f"  [ABORT] {name} — stopped at first failure")
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  World Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
