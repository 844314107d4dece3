"""Attack staging, engagement planning and attack resolution."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from grid_tactics.pathfind import find_path
from grid_tactics.ranges import RangeResult, compute_range

if TYPE_CHECKING:
    from grid_tactics.config import TacticsConfig
    from grid_tactics.grid import Grid
    from grid_tactics.types import Tile, Unit

logger = logging.getLogger(__name__)


class EngagementKind(Enum):
    """What an attacker should do about a target."""

    ATTACK = "attack"
    MOVE_THEN_ATTACK = "move_then_attack"
    MOVE = "move"
    OUT_OF_RANGE = "out_of_range"
    IDLE = "idle"


@dataclass(frozen=True)
class Engagement:
    kind: EngagementKind
    staging: Tile | None = None
    path: list[Tile] = field(default_factory=list)


def closest_staging_tile(
    grid: Grid, footprint: RangeResult, target: Unit, attacker: Unit
) -> Tile | None:
    """Free movement tile nearest the attacker that is within strike distance.

    Candidates are unoccupied tiles of ``footprint``'s movement partition
    whose Manhattan distance to the target is strictly below the attacker's
    ``attack_range``. The winner minimises Manhattan distance to the
    attacker; ties go to the first candidate in grid scan order.
    """
    target_coord = grid.get_tile(target.position).coord
    attacker_coord = grid.get_tile(attacker.position).coord

    best: Tile | None = None
    best_distance = float("inf")
    for tile in grid:
        if tile.occupied or not footprint.in_move_range(tile.coord):
            continue
        if grid.heuristic(target_coord, tile.coord) >= attacker.attack_range:
            continue
        distance = grid.heuristic(attacker_coord, tile.coord)
        if distance < best_distance:
            best = tile
            best_distance = distance
    return best


def plan_engagement(
    grid: Grid,
    attacker: Unit,
    target: Unit,
    footprint: RangeResult | None = None,
    config: TacticsConfig | None = None,
) -> Engagement:
    """Decide between attacking in place, closing in first, or doing nothing.

    ``footprint`` defaults to the attacker's current range.
    """
    attacker_tile = grid.get_tile(attacker.position)
    target_tile = grid.get_tile(target.position)
    if grid.heuristic(attacker_tile.coord, target_tile.coord) > attacker.attack_range:
        return Engagement(EngagementKind.OUT_OF_RANGE)

    if footprint is None:
        footprint = compute_range(
            grid, attacker_tile.coord, attacker.movement_left,
            attacker.attack_range, config,
        )
    in_place = EngagementKind.ATTACK if attacker.attacks_left > 0 else EngagementKind.IDLE

    staging = closest_staging_tile(grid, footprint, target, attacker)
    if staging is None:
        return Engagement(in_place)

    path = find_path(grid, attacker_tile.coord, staging.coord, config)
    if not path:
        return Engagement(in_place, staging=staging)
    if attacker.attacks_left > 0:
        return Engagement(EngagementKind.MOVE_THEN_ATTACK, staging=staging, path=path)
    return Engagement(EngagementKind.MOVE, staging=staging, path=path)


def resolve_attack(grid: Grid, attacker: Unit, target: Unit) -> int:
    """Strike ``target`` if it is within ``attack_range``; return damage dealt.

    A defeated target's tile is freed.
    """
    if attacker.attacks_left <= 0 or not target.alive:
        return 0
    attacker_coord = grid.get_tile(attacker.position).coord
    target_coord = grid.get_tile(target.position).coord
    if grid.heuristic(attacker_coord, target_coord) > attacker.attack_range:
        return 0

    attacker.attacks_left -= 1
    before = target.health
    target.take_damage(attacker.attack_damage)
    if not target.alive:
        grid.get_tile(target_coord).occupied = False
        logger.debug("%s defeated %s at %s", attacker.name, target.name, target_coord)
    return before - target.health
