"""Map and roster for the skirmish example."""
from __future__ import annotations

from dataclasses import dataclass, field

from grid_tactics import Battlefield, Grid, Unit

from ui.constants import MAP_H, MAP_W

# Row-major digits, one per tile; 9s are over the cost cap and show flagged.
VALUE_MAP = (
    "111111111111"
    "112211113311"
    "112221133311"
    "111111111111"
    "111449111111"
    "111449111221"
    "111111111221"
    "113331111111"
    "111331111111"
    "111111111111"
)


@dataclass
class Team:
    name: str
    units: list[Unit] = field(default_factory=list)

    def alive(self) -> list[Unit]:
        return [u for u in self.units if u.alive]


def build_battlefield() -> tuple[Battlefield, dict[str, Team]]:
    grid = Grid.from_value_map(MAP_W, MAP_H, VALUE_MAP)
    field_ = Battlefield(grid)
    teams = {
        "blue": Team("blue", [
            Unit("blue-knight", (1, 2), movement_range=4, attack_range=1,
                 attack_damage=4, max_health=10),
            Unit("blue-archer", (1, 5), movement_range=3, attack_range=3,
                 attack_damage=2, max_health=6),
            Unit("blue-scout", (2, 8), movement_range=6, attack_range=1,
                 attack_damage=2, max_health=5),
        ]),
        "red": Team("red", [
            Unit("red-brute", (10, 1), movement_range=3, attack_range=1,
                 attack_damage=5, max_health=12),
            Unit("red-slinger", (10, 4), movement_range=3, attack_range=2,
                 attack_damage=2, max_health=6),
            Unit("red-raider", (9, 8), movement_range=5, attack_range=1,
                 attack_damage=3, max_health=6),
        ]),
    }
    for team in teams.values():
        for unit in team.units:
            field_.add_unit(unit)
    return field_, teams
