"""components.dev_log — Structured gameplay event log.

A ring-buffer resource that records timestamped gameplay milestones:
hostile defeats, hero damage, pickups, phase changes.  The scene's
event handlers fill it; tests read it back to check that an event
happened exactly once.

Usage:
    log = world.res(DevLog)
    log.record(eid, "combat", "tank defeated", t=clock.time,
               details={"score": 150})

Each entry is a dict:
    {"t": float, "eid": int, "cat": str, "msg": str,
     "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring-buffer of gameplay events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500

    # If non-empty, only entries whose ``cat`` is in the set are kept.
    cat_filter: set[str] = field(default_factory=set)

    def record(self, eid: int, cat: str, msg: str, *,
               t: float = 0.0,
               details: dict | None = None) -> None:
        if self.cat_filter and cat not in self.cat_filter:
            return
        self.entries.append({
            "t": t,
            "eid": eid,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def clear(self):
        self.entries.clear()

    def recent(self, n: int = 50) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_eid(self, eid: int, n: int = 30) -> list[dict]:
        """Return last *n* entries for a specific entity."""
        return [e for e in self.entries if e["eid"] == eid][-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]
