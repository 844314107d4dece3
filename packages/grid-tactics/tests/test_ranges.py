"""
Test suite for movement and attack range queries.

Tests cover:
- Cost-bounded flood fill with diagonal surcharge
- Occupied tiles as dead ends
- Relaxation when a cheaper route turns up later
- Cardinal threat spread from every standing tile
- Degenerate budgets
- Highlight lookups and render diffs
- Agreement with a brute-force Dijkstra reference
"""

import heapq

import pytest
from grid_tactics import Grid, RangeResult, TacticsConfig, compute_range


def reference_costs(grid, origin, surcharge=1):
    """Plain Dijkstra over unoccupied tiles, for comparison."""
    dist = {origin: 0}
    heap = [(0, origin)]
    while heap:
        d, coord = heapq.heappop(heap)
        if d > dist[coord]:
            continue
        for tile in grid.neighbors(coord):
            if tile.occupied:
                continue
            step = tile.move_cost + (surcharge if Grid.is_diagonal(coord, tile.coord) else 0)
            if d + step < dist.get(tile.coord, float("inf")):
                dist[tile.coord] = d + step
                heapq.heappush(heap, (d + step, tile.coord))
    return dist


class TestMovementRange:
    def test_uniform_grid_budget_two(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (0, 0), 2, 0)

        assert result.move_costs == {
            (0, 1): 1,
            (1, 0): 1,
            (1, 1): 2,
            (0, 2): 2,
            (2, 0): 2,
        }
        assert not result.in_move_range((2, 2))
        assert not result.in_move_range((2, 1))

    def test_diagonal_costs_surcharge(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (2, 2), 1, 0)
        assert set(result.move_costs) == {(1, 2), (3, 2), (2, 1), (2, 3)}

    def test_surcharge_is_configurable(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (2, 2), 1, 0, TacticsConfig(diagonal_surcharge=0))
        assert len(result.move_costs) == 8

    def test_origin_excluded(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (2, 2), 3, 2)
        assert not result.in_move_range((2, 2))
        assert not result.in_attack_range((2, 2))
        assert result.highlight((2, 2)) is None

    def test_occupied_tiles_never_entered(self):
        grid = Grid(5, 5)
        grid.set_occupied((1, 0))

        result = compute_range(grid, (0, 0), 3, 0)
        assert not result.in_move_range((1, 0))
        assert not result.in_move_range((2, 0))

        result = compute_range(grid, (0, 0), 4, 0)
        assert result.move_costs[(2, 0)] == 4

    def test_occupied_tile_blocks_corridor(self):
        grid = Grid(5, 1)
        grid.set_occupied((2, 0))
        result = compute_range(grid, (0, 0), 10, 0)
        assert set(result.move_costs) == {(1, 0)}

    def test_weighted_terrain(self):
        grid = Grid.from_rows([
            [1, 3, 1],
            [1, 1, 1],
        ])
        result = compute_range(grid, (0, 0), 3, 0)
        assert result.move_costs == {(0, 1): 1, (1, 0): 3, (1, 1): 2, (2, 1): 3}

    def test_cheaper_route_found_later_replaces_cost(self):
        grid = Grid.from_rows([
            [1, 5, 1],
            [1, 1, 1],
        ])
        result = compute_range(grid, (0, 0), 6, 0)
        # First reached through the cost-5 tile at 6, then via (1, 1) at 4.
        assert result.move_costs[(2, 0)] == 4
        assert list(result.move_costs).index((2, 0)) < list(result.move_costs).index((2, 1))

    def test_every_cost_within_budget(self):
        grid = Grid.from_value_map(6, 6, "123451234512345123451234512345123451")
        result = compute_range(grid, (3, 3), 5, 0)
        assert result.move_costs
        assert all(cost <= 5 for cost in result.move_costs.values())

    @pytest.mark.parametrize("origin", [(0, 0), (2, 3), (5, 5)])
    @pytest.mark.parametrize("budget", [1, 3, 6])
    def test_matches_dijkstra_reference(self, origin, budget):
        grid = Grid.from_value_map(6, 6, "121131211312113121131211312113121131")
        for coord in [(1, 2), (4, 1), (3, 4)]:
            grid.set_occupied(coord)

        result = compute_range(grid, origin, budget, 0)
        expected = {
            coord: cost
            for coord, cost in reference_costs(grid, origin).items()
            if coord != origin and cost <= budget
        }
        assert result.move_costs == expected


class TestAttackRange:
    def test_attack_only_from_origin(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (2, 2), 0, 1)
        assert result.move_costs == {}
        assert result.attack_hops == {(1, 2): 1, (3, 2): 1, (2, 1): 1, (2, 3): 1}

    def test_attack_diamond(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (2, 2), 0, 2)
        assert len(result.attack_hops) == 12
        assert result.attack_hops[(2, 0)] == 2
        assert result.attack_hops[(1, 1)] == 2

    def test_attack_spreads_from_movement_tiles(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (0, 0), 1, 1)
        assert set(result.move_costs) == {(0, 1), (1, 0)}
        assert set(result.attack_hops) == {(0, 1), (1, 0), (1, 1), (2, 0), (0, 2)}

    def test_attack_ignores_occupancy(self):
        grid = Grid(5, 1)
        grid.set_occupied((1, 0))
        result = compute_range(grid, (0, 0), 0, 3)
        assert set(result.attack_hops) == {(1, 0), (2, 0), (3, 0)}

    def test_partitions_may_overlap(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (2, 2), 2, 1)
        overlap = set(result.move_costs) & set(result.attack_hops)
        assert overlap
        for coord in overlap:
            assert result.highlight(coord) == "move"

    @pytest.mark.parametrize("attack_budget", [1, 2, 3])
    def test_hops_bounded_by_nearest_source(self, attack_budget):
        grid = Grid.from_value_map(6, 6, "131213121312131213121312131213121312")
        grid.set_occupied((2, 2))
        origin = (1, 1)
        result = compute_range(grid, origin, 3, attack_budget)
        sources = set(result.move_costs) | {origin}

        for tile in grid:
            coord = tile.coord
            nearest = min(
                (Grid.heuristic(coord, s) for s in sources if s != coord),
                default=None,
            )
            expected = coord != origin and nearest is not None and nearest <= attack_budget
            assert result.in_attack_range(coord) == expected
            if expected:
                assert result.attack_hops[coord] == nearest


class TestDegenerateBudgets:
    @pytest.mark.parametrize("move_budget,attack_budget", [(0, 0), (-1, 0), (0, -3), (-2, -2)])
    def test_non_positive_budgets_give_empty_range(self, move_budget, attack_budget):
        grid = Grid(4, 4)
        result = compute_range(grid, (1, 1), move_budget, attack_budget)
        assert result.move_costs == {}
        assert result.attack_hops == {}
        assert result.coords() == []

    def test_out_of_bounds_origin_is_clamped(self):
        grid = Grid(4, 4)
        result = compute_range(grid, (-5, 9), 1, 0)
        assert result.origin == (0, 3)


class TestRangeResult:
    def test_coords_union_without_duplicates(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (0, 0), 1, 1)
        coords = result.coords()
        assert len(coords) == len(set(coords))
        assert coords[:2] == list(result.move_costs)
        assert set(coords) == set(result.move_costs) | set(result.attack_hops)

    def test_highlight(self):
        grid = Grid(5, 5)
        result = compute_range(grid, (0, 0), 1, 1)
        assert result.highlight((1, 0)) == "move"
        assert result.highlight((2, 0)) == "attack"
        assert result.highlight((4, 4)) is None

    def test_changed_from_nothing(self):
        grid = Grid(3, 3)
        result = compute_range(grid, (0, 0), 1, 0)
        assert result.changed(None) == {(0, 1): "move", (1, 0): "move"}

    def test_changed_to_empty(self):
        grid = Grid(3, 3)
        result = compute_range(grid, (0, 0), 1, 0)
        empty = RangeResult(origin=(0, 0))
        assert empty.changed(result) == {(0, 1): None, (1, 0): None}

    def test_changed_between_origins(self):
        grid = Grid(4, 1)
        first = compute_range(grid, (0, 0), 1, 0)
        second = compute_range(grid, (3, 0), 1, 0)
        assert second.changed(first) == {(1, 0): None, (2, 0): "move"}

    def test_identical_results_have_no_diff(self):
        grid = Grid(4, 4)
        a = compute_range(grid, (1, 1), 2, 1)
        b = compute_range(grid, (1, 1), 2, 1)
        assert b.changed(a) == {}
