"""Shared types for grid-tactics."""
from __future__ import annotations

from dataclasses import dataclass

Coord = tuple[int, int]


@dataclass(eq=False)
class Tile:
    """One cell of the battle grid.

    Attributes:
        x: Column, fixed for the tile's lifetime.
        y: Row, fixed for the tile's lifetime.
        move_cost: Cost paid to step onto this tile (already clamped).
        occupied: True while a unit stands here.
        raw_cost: Cost as authored, before clamping.
    """

    x: int
    y: int
    move_cost: int = 1
    occupied: bool = False
    raw_cost: int | None = None

    def __post_init__(self) -> None:
        if self.raw_cost is None:
            self.raw_cost = self.move_cost

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    @property
    def over_cap(self) -> bool:
        """True when the authored cost was clamped down to the cap."""
        return self.raw_cost > self.move_cost

    def __repr__(self) -> str:
        flag = " occupied" if self.occupied else ""
        return f"Tile({self.x}, {self.y}, cost={self.move_cost}{flag})"


@dataclass
class Unit:
    """Per-unit query parameters and combat stats.

    The engine only reads ``position``, ``movement_left`` and
    ``attack_range``; the movement and combat helpers update the rest.
    """

    name: str
    position: Coord
    movement_range: int = 3
    attack_range: int = 1
    attack_damage: int = 1
    max_health: int = 1
    movement_left: int | None = None
    attacks_left: int = 1
    health: int | None = None

    def __post_init__(self) -> None:
        if self.movement_range < 0:
            raise ValueError(f"movement_range must be >= 0, got {self.movement_range}")
        if self.attack_range < 0:
            raise ValueError(f"attack_range must be >= 0, got {self.attack_range}")
        if self.attack_damage < 0:
            raise ValueError(f"attack_damage must be >= 0, got {self.attack_damage}")
        if self.max_health < 1:
            raise ValueError(f"max_health must be >= 1, got {self.max_health}")
        if self.attacks_left < 0:
            raise ValueError(f"attacks_left must be >= 0, got {self.attacks_left}")
        if self.movement_left is None:
            self.movement_left = self.movement_range
        if self.health is None:
            self.health = self.max_health

    @property
    def alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)

    def heal(self, amount: int) -> None:
        self.health = min(self.max_health, self.health + amount)

    def reset_turn(self, attacks: int = 1) -> None:
        """Refill movement and attacks for a new turn."""
        self.movement_left = self.movement_range
        self.attacks_left = attacks
