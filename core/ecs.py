"""
core/ecs.py — Entity-Component-System

The World *is* the game's state record: every system receives it by
reference and mutates the components it owns.  Entities are ints,
components are dataclasses stored by type, singletons are resources.

    w = World()
    e = w.spawn()
    w.add(e, Position(100.0, 400.0))
    w.add(e, Velocity())

    for eid, pos, vel in w.query(Position, Velocity):
        pos.x += vel.x * dt

Iteration order is insertion order, so systems that walk a query see
entities in the order they were spawned.  Collision passes rely on it.
"""

from __future__ import annotations
from typing import Any, Iterator


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._dead: set[int] = set()

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    def kill(self, eid: int):
        """Mark *eid* for removal.  Storage is freed on ``purge()``."""
        self._dead.add(eid)

    def alive(self, eid: int) -> bool:
        return eid not in self._dead

    def purge(self):
        """Remove dead entities from all stores. Call once per tick."""
        for store in self._stores.values():
            for eid in self._dead:
                store.pop(eid, None)
        self._dead.clear()

    # -- Components --

    def add(self, eid: int, comp: Any):
        t = type(comp)
        if t not in self._stores:
            self._stores[t] = {}
        self._stores[t][eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return eid in self._stores.get(comp_type, {})

    def remove(self, eid: int, comp_type: type):
        store = self._stores.get(comp_type)
        if store and eid in store:
            del store[eid]

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for entities that have ALL types.

        Walks the first type's store so the order is that store's
        insertion order.
        """
        if not types:
            return
        first = self._stores.get(types[0], {})
        others = [self._stores.get(t, {}) for t in types[1:]]
        for eid in list(first):
            if eid in self._dead or eid not in first:
                continue
            if all(eid in s for s in others):
                yield (eid, first[eid], *(s[eid] for s in others))

    def query_one(self, *types: type) -> tuple | None:
        """Return first match or None."""
        for result in self.query(*types):
            return result
        return None

    def all_of(self, comp_type: type) -> Iterator[tuple[int, Any]]:
        """Yield (eid, component) for every entity with this type."""
        for eid, comp in list(self._stores.get(comp_type, {}).items()):
            if eid not in self._dead and eid >= 0:
                yield eid, comp

    def count(self, comp_type: type) -> int:
        return sum(1 for _ in self.all_of(comp_type))

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        t = type(resource)
        if t not in self._stores:
            self._stores[t] = {}
        self._stores[t][-1] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(-1)
