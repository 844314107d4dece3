"""Skirmish - two-team hot-seat tactics on a weighted grid, with pygame."""
from __future__ import annotations

import logging
import sys

import pygame

from grid_tactics import EngagementKind, Unit
from grid_tactics.signals import RANGE_CHANGED, UNIT_ATTACKED, UNIT_DEFEATED, UNIT_MOVED
from grid_tactics.types import Coord

from game.setup import Team, build_battlefield
from ui.constants import FPS, MAP_H, MAP_W, SCREEN_H, SCREEN_W, TILE_SIZE
from ui.renderer import draw_grid, draw_hover, draw_status, draw_units

MESSAGE_COLOR = (200, 200, 200)
WARN_COLOR = (255, 80, 80)


class GameState:
    """Holds the battlefield, whose turn it is, and what the screen shows."""

    def __init__(self) -> None:
        self.field, self.teams = build_battlefield()
        self.order = list(self.teams)
        self.turn = 0
        self.message = ""
        self.message_color = MESSAGE_COLOR
        self.highlights: dict[Coord, str] = {}

        bus = self.field.bus
        bus.subscribe(RANGE_CHANGED, self._on_range_changed)
        bus.subscribe(UNIT_MOVED, self._on_unit_moved)
        bus.subscribe(UNIT_ATTACKED, self._on_unit_attacked)
        bus.subscribe(UNIT_DEFEATED, self._on_unit_defeated)

    @property
    def active_team(self) -> Team:
        return self.teams[self.order[self.turn]]

    def owner(self, unit: Unit) -> Team:
        for team in self.teams.values():
            if unit in team.units:
                return team
        raise KeyError(unit.name)

    def say(self, message: str, color: tuple[int, int, int] = MESSAGE_COLOR) -> None:
        self.message = message
        self.message_color = color

    # --- Signal handlers ---

    def _on_range_changed(self, signal: str, data: dict) -> None:
        for coord, mark in data["diff"].items():
            if mark is None:
                self.highlights.pop(coord, None)
            else:
                self.highlights[coord] = mark

    def _on_unit_moved(self, signal: str, data: dict) -> None:
        unit = data["unit"]
        self.say(f"{unit.name} moved to {unit.position} (cost {data['cost']})")

    def _on_unit_attacked(self, signal: str, data: dict) -> None:
        self.say(
            f"{data['attacker'].name} hits {data['target'].name} for {data['damage']}",
            (255, 180, 80),
        )

    def _on_unit_defeated(self, signal: str, data: dict) -> None:
        self.say(f"{data['unit'].name} is defeated", WARN_COLOR)

    # --- Input ---

    def click(self, coord: Coord) -> None:
        clicked = self.field.unit_at(coord)
        selected = self.field.selected

        if clicked is not None and self.owner(clicked) is self.active_team:
            self.field.select(clicked)
            self.say(
                f"{clicked.name}: move {clicked.movement_left}, "
                f"attacks {clicked.attacks_left}, hp {clicked.health}/{clicked.max_health}"
            )
            return

        if selected is None:
            return

        if clicked is not None:
            plan = self.field.engage(selected, clicked)
            if plan.kind is EngagementKind.OUT_OF_RANGE:
                self.say(f"{clicked.name} is out of range", WARN_COLOR)
            elif plan.kind is EngagementKind.IDLE:
                self.say(f"{selected.name} has no attacks left", WARN_COLOR)
            return

        if self.field.move(selected, coord) is None:
            self.field.select(None)

    def end_turn(self) -> None:
        self.field.select(None)
        self.field.end_turn(self.active_team.units)
        self.turn = (self.turn + 1) % len(self.order)
        self.say(f"{self.active_team.name} to move")

    def winner(self) -> Team | None:
        standing = [team for team in self.teams.values() if team.alive()]
        return standing[0] if len(standing) == 1 else None


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Skirmish")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    state = GameState()
    state.say("Click a unit to select it, SPACE ends the turn")

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE and state.winner() is None:
                    state.end_turn()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos[0] // TILE_SIZE, event.pos[1] // TILE_SIZE
                if 0 <= mx < MAP_W and 0 <= my < MAP_H and state.winner() is None:
                    state.click((mx, my))

        state.field.bus.flush()
        winner = state.winner()
        if winner is not None:
            state.say(f"{winner.name} wins", (120, 255, 120))

        # --- Render ---
        screen.fill((20, 20, 30))
        draw_grid(screen, state.field.grid, state.highlights)
        draw_units(screen, state.teams, state.field.selected)
        mouse_x, mouse_y = pygame.mouse.get_pos()
        draw_hover(screen, mouse_x // TILE_SIZE, mouse_y // TILE_SIZE)
        draw_status(screen, font, state.active_team.name, state.message, state.message_color)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
