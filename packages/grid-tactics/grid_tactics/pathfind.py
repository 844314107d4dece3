"""A* pathfinding over a Grid."""
from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING, Iterable

from grid_tactics.types import Coord, Tile

if TYPE_CHECKING:
    from grid_tactics.config import TacticsConfig
    from grid_tactics.grid import Grid

logger = logging.getLogger(__name__)


def find_path(
    grid: Grid,
    start: Coord,
    end: Coord,
    config: TacticsConfig | None = None,
) -> list[Tile] | None:
    """Cheapest route from ``start`` to ``end`` over 8 neighbors.

    The open set is ordered by f = g + h with the Manhattan heuristic, ties
    going to the lower h and then to insertion order. Stepping onto a tile
    costs its ``move_cost`` (plus ``path_diagonal_surcharge`` on diagonals,
    zero by default). Occupied tiles are never entered, so an occupied
    ``end`` is unreachable.

    Manhattan distance over-estimates once diagonals are allowed, so popping
    the goal does not end the search. A tile whose g improves is reopened,
    and expansion stops only when no open tile can still undercut the goal:
    ``g + chebyshev(tile, goal) * cheapest_tile_cost`` is a lower bound on
    any route through it.

    Returns the tiles after ``start`` up to and including ``end``; an empty
    list when start and end coincide; None when no route exists.
    """
    cfg = config or grid.config
    start = grid.get_tile(start).coord
    goal = grid.get_tile(end).coord
    cheapest = min(tile.move_cost for tile in grid)

    g_score: dict[Coord, int] = {start: 0}
    came_from: dict[Coord, Coord] = {}
    h0 = grid.heuristic(start, goal)
    open_set: list[tuple[int, int, int, int, Coord]] = [(h0, h0, 0, 0, start)]
    counter = 1
    expanded = 0

    while open_set:
        _, _, _, g, current = heapq.heappop(open_set)
        if g > g_score[current] or current == goal:
            continue
        if goal in g_score:
            remaining = max(abs(current[0] - goal[0]), abs(current[1] - goal[1]))
            if g + remaining * cheapest >= g_score[goal]:
                continue
        expanded += 1

        for neighbor in grid.neighbors(current, include_diagonals=True):
            if neighbor.occupied:
                continue
            coord = neighbor.coord
            step = neighbor.move_cost
            if grid.is_diagonal(current, coord):
                step += cfg.path_diagonal_surcharge
            tentative = g + step
            if tentative < g_score.get(coord, float("inf")):
                came_from[coord] = current
                g_score[coord] = tentative
                h = grid.heuristic(coord, goal)
                heapq.heappush(open_set, (tentative + h, h, counter, tentative, coord))
                counter += 1

    if goal not in g_score:
        logger.debug("no path %s -> %s (%d expanded)", start, goal, expanded)
        return None

    path: list[Tile] = []
    current = goal
    while current != start:
        path.append(grid.get_tile(current))
        current = came_from[current]
    path.reverse()
    logger.debug(
        "path %s -> %s: %d steps, cost %d (%d expanded)",
        start, goal, len(path), g_score[goal], expanded,
    )
    return path


def path_cost(path: Iterable[Tile] | None) -> int:
    """Movement a walker pays along ``path``: the sum of tile costs."""
    if not path:
        return 0
    return sum(tile.move_cost for tile in path)
