"""Movement and attack range queries."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grid_tactics.types import Coord

if TYPE_CHECKING:
    from grid_tactics.config import TacticsConfig
    from grid_tactics.grid import Grid

logger = logging.getLogger(__name__)

MOVE = "move"
ATTACK = "attack"


@dataclass(frozen=True)
class RangeResult:
    """Footprint of one range query.

    Attributes:
        origin: Tile the query started from. It belongs to neither partition.
        move_costs: Reachable tiles mapped to their cheapest cost, in the
            order they were first reached.
        attack_hops: Tiles under threat mapped to the cardinal hop count from
            the nearest other standing tile. May overlap ``move_costs``.
    """

    origin: Coord
    move_costs: dict[Coord, int] = field(default_factory=dict)
    attack_hops: dict[Coord, int] = field(default_factory=dict)

    def in_move_range(self, coord: Coord) -> bool:
        return coord in self.move_costs

    def in_attack_range(self, coord: Coord) -> bool:
        return coord in self.attack_hops

    def coords(self) -> list[Coord]:
        """Movement tiles then attack tiles, without duplicates."""
        result = list(self.move_costs)
        result.extend(c for c in self.attack_hops if c not in self.move_costs)
        return result

    def highlight(self, coord: Coord) -> str | None:
        if coord in self.move_costs:
            return MOVE
        if coord in self.attack_hops:
            return ATTACK
        return None

    def changed(self, previous: RangeResult | None) -> dict[Coord, str | None]:
        """Coordinates whose highlight differs from ``previous``, with the new value."""
        before = set(previous.coords()) if previous is not None else set()
        diff: dict[Coord, str | None] = {}
        for coord in before.union(self.coords()):
            now = self.highlight(coord)
            was = previous.highlight(coord) if previous is not None else None
            if now != was:
                diff[coord] = now
        return diff


def _movement_costs(
    grid: Grid, origin: Coord, budget: int, surcharge: int
) -> dict[Coord, int]:
    cost_so_far: dict[Coord, int] = {origin: 0}
    reached: dict[Coord, int] = {}
    edge: deque[Coord] = deque([origin])

    while edge:
        current = edge.popleft()
        current_cost = cost_so_far[current]
        for neighbor in grid.neighbors(current, include_diagonals=True):
            coord = neighbor.coord
            step = neighbor.move_cost
            if grid.is_diagonal(current, coord):
                step += surcharge
            new_cost = current_cost + step
            if new_cost > budget or neighbor.occupied:
                continue
            if coord in cost_so_far and new_cost >= cost_so_far[coord]:
                continue
            cost_so_far[coord] = new_cost
            edge.append(coord)
            if coord != origin:
                reached[coord] = new_cost
    return reached


def _attack_hops(
    grid: Grid, sources: list[Coord], budget: int, origin: Coord
) -> dict[Coord, int]:
    hops: dict[Coord, int] = {}
    # Each source floods on its own; a tile keeps its best hop count.
    for source in sources:
        visited = {source}
        queue: deque[tuple[Coord, int]] = deque([(source, 0)])
        while queue:
            coord, distance = queue.popleft()
            if distance + 1 > budget:
                continue
            for neighbor in grid.neighbors(coord, include_diagonals=False):
                ncoord = neighbor.coord
                if ncoord in visited:
                    continue
                visited.add(ncoord)
                queue.append((ncoord, distance + 1))
                if ncoord == origin:
                    continue
                best = hops.get(ncoord)
                if best is None or distance + 1 < best:
                    hops[ncoord] = distance + 1
    return hops


def compute_range(
    grid: Grid,
    origin: Coord,
    move_budget: int,
    attack_budget: int,
    config: TacticsConfig | None = None,
) -> RangeResult:
    """Tiles reachable within ``move_budget`` and tiles threatened from them.

    Movement is a cost-bounded flood fill over 8 neighbors: stepping onto a
    tile costs its ``move_cost`` plus the diagonal surcharge for diagonal
    steps, and occupied tiles are never entered. Threat spreads up to
    ``attack_budget`` cardinal hops from the origin and every movement tile,
    ignoring occupancy. Non-positive budgets give empty partitions.
    """
    cfg = config or grid.config
    origin = grid.get_tile(origin).coord

    move_costs: dict[Coord, int] = {}
    if move_budget > 0:
        move_costs = _movement_costs(grid, origin, move_budget, cfg.diagonal_surcharge)

    attack_hops: dict[Coord, int] = {}
    if attack_budget > 0:
        sources = list(move_costs)
        sources.append(origin)
        attack_hops = _attack_hops(grid, sources, attack_budget, origin)

    logger.debug(
        "range from %s (move=%d, attack=%d): %d move tiles, %d attack tiles",
        origin, move_budget, attack_budget, len(move_costs), len(attack_hops),
    )
    return RangeResult(origin=origin, move_costs=move_costs, attack_hops=attack_hops)
