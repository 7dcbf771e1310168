"""logic/combat — Combat subpackage.

Modules
-------
attacks      — hero melee swing: start_attack, attack_rect
damage       — damage_hostile / defeat_hostile / damage_hero pipeline

Public symbols are re-exported here for ``from logic.combat import X``.
"""

# ── attacks ──────────────────────────────────────────────────────────
from logic.combat.attacks import attack_rect, start_attack  # noqa: F401

# ── damage + defeat ──────────────────────────────────────────────────
from logic.combat.damage import (                           # noqa: F401
    damage_hostile,
    defeat_hostile,
    damage_hero,
)
