"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_duel.config import GameConfig
from snake_duel.grid import Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.cell_size == 20
        assert grid.extent == 600
        assert grid.tile_count == 30

    def test_from_config(self):
        grid = Grid.from_config(GameConfig(cell_size=10, board_extent=200))
        assert grid.tile_count == 20

    def test_extent_must_be_multiple(self):
        with pytest.raises(ValueError, match="multiple"):
            Grid(cell_size=20, extent=590)


class TestWrap:
    def test_in_range_unchanged(self):
        grid = Grid()
        assert grid.wrap(0) == 0
        assert grid.wrap(300) == 300
        assert grid.wrap(580) == 580

    def test_past_far_edge_wraps_to_zero(self):
        grid = Grid()
        assert grid.wrap(600) == 0
        assert grid.wrap(620) == 0

    def test_past_near_edge_wraps_to_last_cell(self):
        grid = Grid()
        assert grid.wrap(-20) == 580
        assert grid.wrap(-1000) == 580

    @pytest.mark.parametrize("coordinate", range(-1300, 1301, 7))
    def test_idempotent_and_in_range(self, coordinate):
        grid = Grid()
        wrapped = grid.wrap(coordinate)
        assert 0 <= wrapped < grid.extent
        assert grid.wrap(wrapped) == wrapped

    def test_wrap_position(self):
        grid = Grid()
        assert grid.wrap_position((600, -20)) == (0, 580)


class TestLattice:
    def test_position_cell_conversion(self):
        grid = Grid()
        assert grid.to_position(3, 2) == (60, 40)
        assert grid.to_cell((60, 40)) == (2, 3)

    def test_random_position_on_lattice(self):
        grid = Grid()
        rng = np.random.default_rng(42)
        for _ in range(200):
            x, y = grid.random_position(rng)
            assert x % 20 == 0 and y % 20 == 0
            assert grid.in_bounds((x, y))

    def test_occupancy_mask(self):
        grid = Grid(cell_size=20, extent=80)
        mask = grid.occupancy_mask([(0, 0), (60, 20)])
        assert mask.shape == (4, 4)
        assert mask[0, 0]
        assert mask[1, 3]
        assert mask.sum() == 2

    def test_free_positions_row_major(self):
        grid = Grid(cell_size=20, extent=80)
        free = grid.free_positions([(0, 0), (20, 0)])
        assert len(free) == 14
        assert free[0] == (40, 0)
        assert free[2] == (0, 20)
