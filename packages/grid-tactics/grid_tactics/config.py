"""Engine configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TacticsConfig:
    """Immutable tuning for grid construction and searches.

    Attributes:
        max_move_cost: Highest traversable tile cost; authored costs above
            it are clamped down and flagged.
        min_move_cost: Lowest tile cost after clamping.
        default_move_cost: Cost for tiles the value map does not cover.
        diagonal_surcharge: Extra cost per diagonal step in the movement
            range flood fill.
        path_diagonal_surcharge: Extra cost per diagonal step in A*.
            Zero by default, so paths and ranges price diagonals differently.
        attacks_per_turn: Attacks granted by ``Unit.reset_turn``.
    """

    max_move_cost: int = 5
    min_move_cost: int = 1
    default_move_cost: int = 1
    diagonal_surcharge: int = 1
    path_diagonal_surcharge: int = 0
    attacks_per_turn: int = 1

    def __post_init__(self) -> None:
        if self.min_move_cost < 1:
            raise ValueError(f"min_move_cost must be >= 1, got {self.min_move_cost}")
        if self.max_move_cost < self.min_move_cost:
            raise ValueError(
                f"max_move_cost must be >= min_move_cost, got "
                f"{self.max_move_cost} < {self.min_move_cost}"
            )
        if not self.min_move_cost <= self.default_move_cost <= self.max_move_cost:
            raise ValueError(
                f"default_move_cost must lie in [{self.min_move_cost}, "
                f"{self.max_move_cost}], got {self.default_move_cost}"
            )
        if self.diagonal_surcharge < 0:
            raise ValueError(
                f"diagonal_surcharge must be >= 0, got {self.diagonal_surcharge}"
            )
        if self.path_diagonal_surcharge < 0:
            raise ValueError(
                f"path_diagonal_surcharge must be >= 0, got {self.path_diagonal_surcharge}"
            )
        if self.attacks_per_turn < 0:
            raise ValueError(f"attacks_per_turn must be >= 0, got {self.attacks_per_turn}")


DEFAULT_CONFIG = TacticsConfig()
