"""grid-tactics - Tile-grid movement, threat and pathfinding queries."""
from __future__ import annotations

from grid_tactics.battlefield import Battlefield
from grid_tactics.combat import (
    Engagement,
    EngagementKind,
    closest_staging_tile,
    plan_engagement,
    resolve_attack,
)
from grid_tactics.config import DEFAULT_CONFIG, TacticsConfig
from grid_tactics.grid import Grid
from grid_tactics.movement import move_unit
from grid_tactics.pathfind import find_path, path_cost
from grid_tactics.ranges import RangeResult, compute_range
from grid_tactics.signals import SignalBus
from grid_tactics.types import Coord, Tile, Unit

__all__ = [
    "Coord",
    "Tile",
    "Unit",
    "TacticsConfig",
    "DEFAULT_CONFIG",
    "Grid",
    "RangeResult",
    "compute_range",
    "find_path",
    "path_cost",
    "Engagement",
    "EngagementKind",
    "closest_staging_tile",
    "plan_engagement",
    "resolve_attack",
    "move_unit",
    "SignalBus",
    "Battlefield",
]
