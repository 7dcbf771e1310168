"""scenes — Playable screens.

platformer_scene  — the game scene (world setup, tick, draw)
frame             — pygame-free description of one frame
platform_draw     — paints a frame with pygame
"""
