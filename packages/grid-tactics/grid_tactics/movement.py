"""Applying a found path to a unit."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from grid_tactics.grid import Grid
    from grid_tactics.types import Tile, Unit

logger = logging.getLogger(__name__)


def move_unit(grid: Grid, unit: Unit, path: Sequence[Tile] | None) -> int:
    """Walk ``unit`` along ``path`` and return the movement spent.

    The departure tile is freed and the final tile occupied before any step
    is taken. Each step deducts that tile's ``move_cost`` from
    ``movement_left``, never going below zero. An empty or missing path
    does nothing.
    """
    if not path:
        return 0
    grid.get_tile(unit.position).occupied = False
    path[-1].occupied = True

    spent = 0
    for tile in path:
        unit.position = tile.coord
        unit.movement_left = max(0, unit.movement_left - tile.move_cost)
        spent += tile.move_cost
    logger.debug("%s moved to %s for %d", unit.name, unit.position, spent)
    return spent
