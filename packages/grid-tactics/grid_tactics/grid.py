"""Grid - fixed-size 2D tile grid with clamped lookup and 8-way neighbors."""
from __future__ import annotations

import logging
import math
from typing import Iterator, Sequence

from grid_tactics.config import DEFAULT_CONFIG, TacticsConfig
from grid_tactics.types import Coord, Tile

logger = logging.getLogger(__name__)

_DIRS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class Grid:
    """W x H tiles created once; costs and occupancy change in place.

    Lookups through ``get_tile`` never fail: out-of-range coordinates are
    clamped onto the nearest edge tile. Use ``tile_at`` when a bad
    coordinate should be an error instead.
    """

    def __init__(
        self, width: int, height: int, config: TacticsConfig | None = None
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._config = config or DEFAULT_CONFIG
        cost = self._config.default_move_cost
        self._tiles: list[list[Tile]] = [
            [Tile(x, y, move_cost=cost) for y in range(height)]
            for x in range(width)
        ]

    @classmethod
    def from_value_map(
        cls,
        width: int,
        height: int,
        value_map: str | None,
        config: TacticsConfig | None = None,
    ) -> Grid:
        """Build a grid from a row-major digit string (index ``y * width + x``).

        Tiles past the end of the string keep the default cost.
        """
        grid = cls(width, height, config)
        if value_map:
            for y in range(height):
                for x in range(width):
                    index = y * width + x
                    if index >= len(value_map):
                        continue
                    grid.set_cost((x, y), ord(value_map[index]) - ord("0"))
        return grid

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], config: TacticsConfig | None = None
    ) -> Grid:
        """Build a grid from rows of costs; ``rows[y][x]`` is tile (x, y)."""
        if not rows or not rows[0]:
            raise ValueError("rows must be a non-empty rectangle")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
        grid = cls(width, len(rows), config)
        for y, row in enumerate(rows):
            for x, cost in enumerate(row):
                grid.set_cost((x, y), cost)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def config(self) -> TacticsConfig:
        return self._config

    def __len__(self) -> int:
        return self._width * self._height

    def __iter__(self) -> Iterator[Tile]:
        """Yield every tile, x outer and y inner."""
        for column in self._tiles:
            yield from column

    # --- Lookup ---

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self._width}x{self._height} grid"
            )

    def tile_at(self, x: int, y: int) -> Tile:
        """Strict lookup. Raises ValueError for coordinates off the grid."""
        self._check_bounds(x, y)
        return self._tiles[x][y]

    def get_tile(self, coord: Coord) -> Tile:
        """Clamp each axis into range and return that tile."""
        x = _clamp(coord[0], 0, self._width - 1)
        y = _clamp(coord[1], 0, self._height - 1)
        return self._tiles[x][y]

    def tile_at_world(self, position: Sequence[float]) -> Tile:
        """Map a continuous position onto the grid centred at the origin.

        ``(x, y)`` uses both axes; ``(x, y, z)`` treats ``(x, z)`` as the
        ground plane.
        """
        if len(position) == 3:
            px, py = position[0], position[2]
        else:
            px, py = position[0], position[1]
        x = math.floor(px + self._width / 2)
        y = math.floor(py + self._height / 2)
        return self.get_tile((x, y))

    def world_position(self, coord: Coord) -> tuple[float, float, float]:
        """Ground-plane position of a tile's corner, inverse of tile_at_world."""
        x, y = coord
        return (x - self._width / 2, 0.0, y - self._height / 2)

    # --- Mutation ---

    def set_cost(self, coord: Coord, raw_cost: int) -> Tile:
        """Set a tile's cost, clamped into the configured range."""
        tile = self.tile_at(*coord)
        cfg = self._config
        tile.raw_cost = raw_cost
        tile.move_cost = _clamp(raw_cost, cfg.min_move_cost, cfg.max_move_cost)
        if tile.over_cap:
            logger.debug("tile %s cost %d clamped to %d", coord, raw_cost, tile.move_cost)
        return tile

    def set_occupied(self, coord: Coord, occupied: bool = True) -> Tile:
        tile = self.tile_at(*coord)
        tile.occupied = occupied
        return tile

    # --- Topology ---

    def neighbors(self, coord: Coord, include_diagonals: bool = True) -> list[Tile]:
        """Tiles in the surrounding 3x3 block, minus pure diagonals if asked."""
        x, y = coord
        result: list[Tile] = []
        for dx, dy in _DIRS:
            if not include_diagonals and dx != 0 and dy != 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._width and 0 <= ny < self._height:
                result.append(self._tiles[nx][ny])
        return result

    @staticmethod
    def is_diagonal(a: Coord, b: Coord) -> bool:
        return abs(a[0] - b[0]) == 1 and abs(a[1] - b[1]) == 1

    @staticmethod
    def heuristic(a: Coord, b: Coord) -> int:
        """Manhattan distance."""
        return abs(a[0] - b[0]) + abs(a[1] - b[1])
