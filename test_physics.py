"""test_physics.py — Hero control, physics integration and terrain resolution.

Covers the box primitives, the control resolver (friction, clamp, jump,
dash, timers) and the greedy minimum-penetration terrain resolver on
small hand-built tile maps.

Run:  python test_physics.py
"""
from __future__ import annotations
import sys, math, random, traceback

# ── Bootstrap ────────────────────────────────────────────────────────
from core.tuning import load as _load_tuning
_load_tuning()

from core.ecs import World
from core.collision import overlaps, penetration, point_inside
from core.constants import BLOCK_SURFACE
from components import (
    Hero, Position, Velocity, Body, Tile, TileMap, Rng,
)
from logic.controls import hero_control_system, try_dash, advance_timers
from logic.movement import hero_physics_system, resolve_terrain
from logic.entity_factory import spawn_hero
from logic.input_manager import InputState


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

DT = 1.0 / 60.0


# ── Builders ─────────────────────────────────────────────────────────

def _floor(cols: range, row: int = 20, size: int = 32) -> list[Tile]:
    return [Tile(col=c, row=row, size=size, block_type=BLOCK_SURFACE) for c in cols]


def _world(tiles: list[Tile] | None = None) -> tuple[World, int]:
    w = World()
    w.set_res(Rng(random.Random(1)))
    w.set_res(TileMap(tiles=sorted(tiles or [], key=lambda t: (t.row, t.col)),
                      tile_size=32, columns=40, bottom_row=23))
    eid = spawn_hero(w)
    return w, eid


def _parts(w: World, eid: int):
    return w.get(eid, Hero), w.get(eid, Position), w.get(eid, Velocity), w.get(eid, Body)


# ═══════════════════════════════════════════════════════════════════════
#  1. Box primitives
# ═══════════════════════════════════════════════════════════════════════

def test_box_primitives():
    print("\n── 1. Box primitives ──")
    check(overlaps(0, 0, 10, 10, 5, 5, 10, 10), "1a: overlapping boxes overlap")
    check(not overlaps(0, 0, 10, 10, 10, 0, 10, 10),
          "1b: boxes sharing a vertical edge do not overlap")
    check(not overlaps(0, 0, 10, 10, 0, 10, 10, 10),
          "1c: boxes sharing a horizontal edge do not overlap")
    check(not overlaps(0, 0, 10, 10, 30, 30, 5, 5), "1d: distant boxes do not overlap")

    pen = penetration(0, 0, 10, 10, 8, 6, 10, 10)
    check(pen.left == 2 and pen.top == 4 and pen.right == 18 and pen.bottom == 16,
          "1e: penetration depths per side", f"{pen}")
    check(pen.minimum() == 2, "1f: minimum() picks the shallowest side")

    check(point_inside(5, 5, 0, 0, 10, 10), "1g: point inside box")
    check(not point_inside(10, 5, 0, 0, 10, 10), "1h: point on border is outside")


# ═══════════════════════════════════════════════════════════════════════
#  2. Horizontal control
# ═══════════════════════════════════════════════════════════════════════

def test_horizontal_control():
    print("\n── 2. Horizontal control ──")
    inp = InputState()

    # Friction never amplifies speed, grounded or airborne, either sign
    for grounded in (True, False):
        for start in (240.0, -240.0):
            w, eid = _world()
            hero, pos, vel, _ = _parts(w, eid)
            vel.x = start
            prev = abs(vel.x)
            monotonic = True
            for _ in range(120):
                hero.can_jump = grounded
                hero_control_system(w, DT, inp)
                if abs(vel.x) > prev:
                    monotonic = False
                    break
                prev = abs(vel.x)
            check(monotonic and abs(vel.x) < 1.0,
                  f"2a: friction decays |vx| from {start} (grounded={grounded})",
                  f"vx={vel.x:.4f}")

    # Speed clamp
    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    vel.x = 1000.0
    hero_control_system(w, DT, inp)
    check(vel.x == 250.0, "2b: vx clamped to +max_speed", f"vx={vel.x}")
    vel.x = -1000.0
    hero_control_system(w, DT, inp)
    check(vel.x == -250.0, "2c: vx clamped to -max_speed", f"vx={vel.x}")

    # Holding a direction accelerates toward it
    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    inp.hold("move_left")
    hero.can_jump = True
    hero_control_system(w, DT, inp)
    check(vel.x < 0 and not hero.facing_right, "2d: left input moves and faces left",
          f"vx={vel.x}")
    inp.clear()

    # Both directions held: right is applied second and wins the facing
    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    hero.facing_right = False
    inp.hold("move_left")
    inp.hold("move_right")
    hero_control_system(w, DT, inp)
    check(hero.facing_right, "2e: right wins facing when both held")
    check(abs(vel.x) < 1e-9, "2f: opposite inputs cancel", f"vx={vel.x}")
    inp.clear()


# ═══════════════════════════════════════════════════════════════════════
#  3. Jump and coyote window
# ═══════════════════════════════════════════════════════════════════════

def test_jump():
    print("\n── 3. Jump ──")
    inp = InputState()
    inp.hold("jump")

    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    hero.can_jump = True
    hero_control_system(w, DT, inp)
    check(vel.y == -420.0 and not hero.can_jump, "3a: grounded jump sets vy=-jump_power",
          f"vy={vel.y}")

    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    hero.can_jump = False
    hero.coyote = 0.05
    hero_control_system(w, DT, inp)
    check(vel.y == -420.0 and hero.coyote == 0.0,
          "3b: jump honoured inside coyote window, window consumed",
          f"vy={vel.y} coyote={hero.coyote}")

    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    hero.can_jump = False
    hero.coyote = 0.0
    vel.y = 50.0
    hero_control_system(w, DT, inp)
    check(vel.y == 50.0, "3c: no jump in the air without coyote time", f"vy={vel.y}")


# ═══════════════════════════════════════════════════════════════════════
#  4. Dash and energy
# ═══════════════════════════════════════════════════════════════════════

def test_dash():
    print("\n── 4. Dash ──")
    hero = Hero()
    vel = Velocity()
    check(try_dash(hero, vel), "4a: dash succeeds with full energy")
    check(hero.dash_cooldown == 1.0, "4b: cooldown is exactly 1.0 right after",
          f"cd={hero.dash_cooldown}")
    check(hero.dash_energy == 50.0, "4c: energy drops by exactly 50",
          f"energy={hero.dash_energy}")
    check(vel.x == 600.0, "4d: impulse in facing direction", f"vx={vel.x}")

    check(not try_dash(hero, vel), "4e: dash refused while cooling down")

    hero.dash_cooldown = 0.0
    hero.dash_energy = 49.9
    check(not try_dash(hero, vel), "4f: dash refused below 50 energy")

    hero.dash_energy = 50.0
    hero.facing_right = False
    vel.x = 0.0
    check(try_dash(hero, vel) and hero.dash_energy == 0.0 and vel.x == -600.0,
          "4g: dash at exactly 50 energy, facing left",
          f"energy={hero.dash_energy} vx={vel.x}")

    # Energy stays in [0, 100] however often dash is held
    w, eid = _world()
    hero, pos, vel, _ = _parts(w, eid)
    inp = InputState()
    inp.hold("dash")
    lo, hi = 100.0, 0.0
    for _ in range(600):
        hero_control_system(w, DT, inp)
        lo = min(lo, hero.dash_energy)
        hi = max(hi, hero.dash_energy)
    check(lo >= 0.0 and hi <= 100.0, "4h: energy bounded under held dash",
          f"min={lo:.3f} max={hi:.3f}")

    hero = Hero(dash_energy=99.0)
    advance_timers(hero, 1.0)
    check(hero.dash_energy == 100.0, "4i: regeneration caps at 100")


# ═══════════════════════════════════════════════════════════════════════
#  5. Timers
# ═══════════════════════════════════════════════════════════════════════

def test_timers():
    print("\n── 5. Timers ──")
    hero = Hero(dash_cooldown=0.01, attack_cooldown=0.01, invulnerable_time=0.01,
                coyote=0.01, is_attacking=True, attack_duration=0.01)
    advance_timers(hero, 0.5)
    check(hero.dash_cooldown == 0.0 and hero.attack_cooldown == 0.0
          and hero.invulnerable_time == 0.0 and hero.coyote == 0.0,
          "5a: timers floor at zero")
    check(not hero.is_attacking and hero.attack_duration == 0.0,
          "5b: swing ends when its duration runs out")


# ═══════════════════════════════════════════════════════════════════════
#  6. Physics and terrain
# ═══════════════════════════════════════════════════════════════════════

def test_terrain():
    print("\n── 6. Physics and terrain ──")

    # Falling onto a tile lands exactly on top the first tick it overlaps
    w, eid = _world(_floor(range(0, 10)))
    hero, pos, vel, body = _parts(w, eid)
    pos.x, pos.y = 100.0, 603.0
    vel.y = 300.0
    hero_physics_system(w, DT)
    check(pos.y == 640 - body.height, "6a: lands at tile.y - height",
          f"y={pos.y}")
    check(vel.y == 0.0 and hero.can_jump, "6b: vy zeroed and can_jump set",
          f"vy={vel.y} can_jump={hero.can_jump}")
    check(hero.coyote == 0.1, "6c: landing refills the coyote window",
          f"coyote={hero.coyote}")

    # Straddling a seam between two tiles: one landing, no sideways push
    w, eid = _world(_floor(range(0, 10)))
    hero, pos, vel, body = _parts(w, eid)
    pos.x, pos.y = 116.0, 603.0
    vel.y = 300.0
    hero_physics_system(w, DT)
    check(pos.x == 116.0 and pos.y == 608.0 and hero.can_jump,
          "6d: seam landing keeps x and lands flat", f"x={pos.x} y={pos.y}")

    # Resting on the floor stays grounded tick after tick
    grounded = True
    for _ in range(30):
        hero_physics_system(w, DT)
        grounded = grounded and hero.can_jump and pos.y == 608.0
    check(grounded, "6e: resting hero stays grounded", f"y={pos.y}")

    # can_jump is cleared at the start of every step
    w, eid = _world()
    hero, pos, vel, body = _parts(w, eid)
    hero.can_jump = True
    hero_physics_system(w, DT)
    check(not hero.can_jump, "6f: airborne step clears can_jump")

    # Terminal velocity
    vel.y = 590.0
    hero_physics_system(w, DT)
    check(vel.y == 600.0, "6g: vy clamped to terminal velocity", f"vy={vel.y}")

    # Running into a wall: pushed out on the left side, vx scaled to 0
    wall = [Tile(col=5, row=18, size=32)]
    w, eid = _world(wall)
    hero, pos, vel, body = _parts(w, eid)
    pos.x, pos.y = 135.0, 576.0
    vel.x = 250.0
    hero_physics_system(w, DT)
    check(pos.x == 160 - body.width and vel.x == 0.0,
          "6h: side contact pushes out and stops vx", f"x={pos.x} vx={vel.x}")
    check(not hero.can_jump, "6i: side contact is not a landing")

    # Rising into a ceiling: bonk, vy zeroed, not grounded
    ceiling = [Tile(col=3, row=10, size=32)]
    w, eid = _world(ceiling)
    hero, pos, vel, body = _parts(w, eid)
    pos.x, pos.y = 100.0, 354.0
    vel.y = -400.0
    hero_physics_system(w, DT)
    check(pos.y == 352.0 and vel.y == 0.0 and not hero.can_jump,
          "6j: head bonk resolves below the tile", f"y={pos.y} vy={vel.y}")

    # Resolution visits tiles in list order
    tm = TileMap(tiles=sorted(_floor(range(0, 4)) + _floor(range(0, 4), row=19),
                              key=lambda t: (t.row, t.col)))
    order = [(t.row, t.col) for t in tm.tiles]
    check(order == sorted(order), "6k: tile map is in row-major order")
    pos, vel, body = Position(36.0, 620.0), Velocity(0.0, 100.0), Body()
    landed = resolve_terrain(tm, pos, vel, body)
    check(landed and pos.x == 36.0 and pos.y == 608.0 and vel.y == 0.0,
          "6l: row-major pass lands on the lower row's top",
          f"x={pos.x} y={pos.y}")

    flipped = TileMap(tiles=list(reversed(tm.tiles)))
    pos, vel = Position(36.0, 620.0), Velocity(0.0, 100.0)
    resolve_terrain(flipped, pos, vel, body)
    check(pos.x == 32.0, "6m: a different tile order gives a different result",
          f"x={pos.x}")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Box primitives", test_box_primitives),
        ("Horizontal control", test_horizontal_control),
        ("Jump", test_jump),
        ("Dash", test_dash),
        ("Timers", test_timers),
        ("Terrain", test_terrain),
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
    print(f"  Physics Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
