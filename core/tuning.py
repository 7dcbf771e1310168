"""core/tuning.py — Data-driven tuning constants.

All gameplay numbers live in ``data/tuning.toml`` and are loaded once
at startup.  Any system can read a value with::

    from core.tuning import get
    accel = get("hero", "move_accel", 1200.0)

Every call site carries its own default, so the game runs with the
canonical numbers even when the file is missing.

Profiles
--------
Earlier revisions of the game are reproduced as *profiles*: a
``[profiles.<name>]`` table in the same file whose sub-tables are
deep-merged over the base tables.  ``load(profile="classic")`` gives
the small flat-ground scene with no attack and no start screen.

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F5.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib


_data: dict = {}
_path: Path | None = None
_profile: str | None = None


def load(path: str | Path | None = None, profile: str | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).  *profile* names a
    ``[profiles.<name>]`` table to overlay on the base values.
    """
    global _data, _path, _profile

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "tuning.toml"
    else:
        path = Path(path)

    _path = path
    _profile = profile

    if not path.exists():
        print(f"[TUNING] {path} not found, using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        raw = tomllib.load(f)

    profiles = raw.pop("profiles", {})
    if profile is not None:
        overlay = profiles.get(profile)
        if overlay is None:
            print(f"[TUNING] unknown profile {profile!r}, using base values")
        else:
            raw = _merge(raw, overlay)

    _data = raw
    count = _count_leaves(_data)
    tag = f" (profile {profile})" if profile else ""
    print(f"[TUNING] Loaded {count} values from {path}{tag}")


def reload() -> None:
    """Re-read the tuning file from disk (hot-reload)."""
    load(_path, _profile)


def reset() -> None:
    """Forget every loaded value so only call-site defaults apply."""
    global _data, _path, _profile
    _data = {}
    _path = None
    _profile = None


def get_profile() -> str | None:
    return _profile


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"hostiles.tank"`` looks up ``[hostiles.tank]``.

    >>> get("hero", "jump_power", 420.0)
    420.0
    """
    node = _data
    for part in section.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return default
        if node is None:
            return default
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _data
    for part in section_path.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return {}
        if node is None:
            return {}
    if isinstance(node, dict):
        return dict(node)
    return {}


def _merge(base: dict, overlay: dict) -> dict:
    out = dict(base)
    for k, v in overlay.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
