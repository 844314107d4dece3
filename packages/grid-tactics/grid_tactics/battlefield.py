"""Battlefield - units on a grid, with queries wired to a signal bus."""
from __future__ import annotations

import logging
from typing import Iterable

from grid_tactics.combat import Engagement, EngagementKind, plan_engagement, resolve_attack
from grid_tactics.config import TacticsConfig
from grid_tactics.grid import Grid
from grid_tactics.movement import move_unit
from grid_tactics.pathfind import find_path
from grid_tactics.ranges import RangeResult, compute_range
from grid_tactics.signals import SignalBus
from grid_tactics.types import Coord, Tile, Unit

logger = logging.getLogger(__name__)


class Battlefield:
    """Owns unit placement and turns engine results into signals.

    Published signals (delivered on ``bus.flush()``):

    - ``range_changed``: ``origin``, ``diff`` (coord -> "move"/"attack"/None)
    - ``unit_moved``: ``unit``, ``path``, ``cost``
    - ``unit_attacked``: ``attacker``, ``target``, ``damage``
    - ``unit_defeated``: ``unit``, ``coord``
    """

    def __init__(
        self,
        grid: Grid,
        config: TacticsConfig | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._grid = grid
        self._config = config or grid.config
        self._bus = bus if bus is not None else SignalBus()
        self._units: dict[str, Unit] = {}
        self._shown: RangeResult | None = None
        self.selected: Unit | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def shown_range(self) -> RangeResult | None:
        return self._shown

    # --- Units ---

    def add_unit(self, unit: Unit) -> None:
        if unit.name in self._units:
            raise ValueError(f"Unit '{unit.name}' is already on the battlefield")
        tile = self._grid.tile_at(*unit.position)
        if tile.occupied:
            raise ValueError(f"Tile {tile.coord} is already occupied")
        tile.occupied = True
        self._units[unit.name] = unit

    def remove_unit(self, unit: Unit) -> None:
        if self._units.pop(unit.name, None) is None:
            raise KeyError(f"Unit '{unit.name}' is not on the battlefield")
        self._grid.get_tile(unit.position).occupied = False
        if self.selected is unit:
            self.select(None)
        elif self.selected is not None:
            self.show_range(self.selected)

    def unit(self, name: str) -> Unit:
        return self._units[name]

    def units(self) -> list[Unit]:
        return list(self._units.values())

    def unit_at(self, coord: Coord) -> Unit | None:
        for unit in self._units.values():
            if unit.position == coord:
                return unit
        return None

    # --- Range display ---

    def select(self, unit: Unit | None) -> RangeResult | None:
        """Make ``unit`` the selection and show its range; None clears both."""
        self.selected = unit
        if unit is None:
            self.clear_range()
            return None
        return self.show_range(unit)

    def show_range(self, unit: Unit) -> RangeResult:
        result = compute_range(
            self._grid, unit.position, unit.movement_left, unit.attack_range,
            self._config,
        )
        self._publish_range(result)
        return result

    def clear_range(self) -> None:
        if self._shown is None:
            return
        self._publish_range(RangeResult(origin=self._shown.origin))
        self._shown = None

    def _publish_range(self, result: RangeResult) -> None:
        diff = result.changed(self._shown)
        self._shown = result
        if diff:
            self._bus.range_changed(result.origin, diff)

    # --- Actions ---

    def move(self, unit: Unit, dest: Coord) -> list[Tile] | None:
        """Move ``unit`` to ``dest`` if it lies in its movement range."""
        footprint = compute_range(
            self._grid, unit.position, unit.movement_left, 0, self._config
        )
        if not footprint.in_move_range(dest):
            return None
        path = find_path(self._grid, unit.position, dest, self._config)
        if path:
            self._walk(unit, path)
        return path

    def engage(self, attacker: Unit, target: Unit) -> Engagement:
        """Plan and carry out ``attacker``'s response to ``target``."""
        plan = plan_engagement(self._grid, attacker, target, config=self._config)
        if plan.kind in (EngagementKind.MOVE, EngagementKind.MOVE_THEN_ATTACK):
            self._walk(attacker, plan.path)
        if plan.kind in (EngagementKind.ATTACK, EngagementKind.MOVE_THEN_ATTACK):
            self._strike(attacker, target)
        logger.debug("%s engages %s: %s", attacker.name, target.name, plan.kind.value)
        return plan

    def end_turn(self, units: Iterable[Unit] | None = None) -> None:
        for unit in (self._units.values() if units is None else units):
            unit.reset_turn(self._config.attacks_per_turn)
        if self.selected is not None:
            self.show_range(self.selected)

    def _walk(self, unit: Unit, path: list[Tile]) -> None:
        cost = move_unit(self._grid, unit, path)
        self._bus.unit_moved(unit, path, cost)
        if unit is self.selected:
            self.show_range(unit)

    def _strike(self, attacker: Unit, target: Unit) -> None:
        damage = resolve_attack(self._grid, attacker, target)
        self._bus.unit_attacked(attacker, target, damage)
        if not target.alive and target.name in self._units:
            del self._units[target.name]
            if self.selected is target:
                self.select(None)
            self._bus.unit_defeated(target, target.position)
            if self.selected is not None:
                self.show_range(self.selected)

