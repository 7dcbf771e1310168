"""logic — Game systems package.

Subpackages
-----------
combat/     — melee swing, damage and defeat pipeline

Top-level modules
-----------------
tick            — per-frame system orchestrator (+ clock, flash, sparkle)
entity_factory  — entity creation from tuning descriptors
worldgen        — tile grid, collectible placement, roster spawning
input_manager   — held-key set → logical controls
controls        — hero control resolution
movement        — hero physics / terrain resolution
hostiles        — hostile movement patterns
projectiles     — enemy shot lifecycle
interactions    — pickups, stomps, contact and shot damage
camera          — smoothed follow camera
session         — start / playing / game_over phases and reset
particles       — VFX particle simulation
"""
