"""Layout and color constants for the skirmish example."""
from __future__ import annotations

MAP_W = 12
MAP_H = 10
TILE_SIZE = 56

GRID_W = MAP_W * TILE_SIZE
GRID_H = MAP_H * TILE_SIZE
STATUS_H = 36

SCREEN_W = GRID_W
SCREEN_H = GRID_H + STATUS_H
FPS = 30

CHEAP_COLOR = (96, 160, 80)
COSTLY_COLOR = (120, 84, 52)
OVER_CAP_COLOR = (220, 40, 40)
MOVE_COLOR = (0, 200, 220)
ATTACK_COLOR = (220, 60, 60)
SELECTED_COLOR = (60, 90, 255)
HOVER_COLOR = (255, 230, 0)

TEAM_COLORS = {
    "blue": (70, 120, 255),
    "red": (235, 80, 70),
}
