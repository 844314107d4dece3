"""Tile, highlight and unit rendering."""
from __future__ import annotations

import pygame

from grid_tactics import Grid, TacticsConfig, Unit
from grid_tactics.types import Coord

from game.setup import Team
from ui.constants import (
    ATTACK_COLOR, CHEAP_COLOR, COSTLY_COLOR, GRID_H, GRID_W, HOVER_COLOR,
    MAP_H, MAP_W, MOVE_COLOR, OVER_CAP_COLOR, SCREEN_W, SELECTED_COLOR,
    STATUS_H, TEAM_COLORS, TILE_SIZE,
)


def _lerp(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def terrain_color(cost: int, config: TacticsConfig) -> tuple[int, int, int]:
    span = max(1, config.max_move_cost - config.min_move_cost)
    return _lerp(CHEAP_COLOR, COSTLY_COLOR, (cost - config.min_move_cost) / span)


def draw_grid(
    surface: pygame.Surface,
    grid: Grid,
    highlights: dict[Coord, str],
) -> None:
    """Draw terrain, then move/attack highlights on top."""
    for tile in grid:
        rect = pygame.Rect(tile.x * TILE_SIZE, tile.y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, terrain_color(tile.move_cost, grid.config), rect)
        mark = highlights.get(tile.coord)
        if mark is not None:
            overlay = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
            color = MOVE_COLOR if mark == "move" else ATTACK_COLOR
            overlay.fill((*color, 110))
            surface.blit(overlay, rect.topleft)
        if tile.over_cap:
            pygame.draw.rect(surface, OVER_CAP_COLOR, rect.inflate(-6, -6), 2)

    for x in range(MAP_W + 1):
        pygame.draw.line(surface, (30, 30, 30), (x * TILE_SIZE, 0), (x * TILE_SIZE, GRID_H))
    for y in range(MAP_H + 1):
        pygame.draw.line(surface, (30, 30, 30), (0, y * TILE_SIZE), (GRID_W, y * TILE_SIZE))


def draw_units(
    surface: pygame.Surface,
    teams: dict[str, Team],
    selected: Unit | None,
) -> None:
    """Draw units as team-colored discs with a health bar."""
    for team in teams.values():
        color = TEAM_COLORS.get(team.name, (200, 200, 200))
        for unit in team.units:
            if not unit.alive:
                continue
            x, y = unit.position
            center = (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)
            pygame.draw.circle(surface, color, center, TILE_SIZE // 3)
            if unit is selected:
                pygame.draw.circle(surface, SELECTED_COLOR, center, TILE_SIZE // 3 + 3, 3)

            bar = pygame.Rect(x * TILE_SIZE + 6, y * TILE_SIZE + TILE_SIZE - 9, TILE_SIZE - 12, 4)
            pygame.draw.rect(surface, (40, 40, 40), bar)
            filled = bar.copy()
            filled.width = int(bar.width * unit.health / unit.max_health)
            pygame.draw.rect(surface, (90, 230, 90), filled)


def draw_hover(surface: pygame.Surface, mx: int, my: int) -> None:
    if 0 <= mx < MAP_W and 0 <= my < MAP_H:
        rect = pygame.Rect(mx * TILE_SIZE, my * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, HOVER_COLOR, rect, 2)


def draw_status(
    surface: pygame.Surface,
    font: pygame.font.Font,
    turn: str,
    message: str,
    color: tuple[int, int, int],
) -> None:
    """Strip under the map: whose turn it is, then the latest message."""
    pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, GRID_H, SCREEN_W, STATUS_H))
    team_color = TEAM_COLORS.get(turn, (230, 230, 230))
    label = font.render(f"{turn} team", True, team_color)
    surface.blit(label, (8, GRID_H + 10))
    if message:
        surface.blit(font.render(message, True, color), (label.get_width() + 20, GRID_H + 10))
