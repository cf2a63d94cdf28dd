"""Board geometry: lattice positions and the wrap-around transform."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from snake_duel.config import GameConfig

# (x, y) in board units; both coordinates are multiples of the cell size.
Position = tuple[int, int]


class Grid:
    """Square toroidal board measured in board units.

    Positions are ``(x, y)`` pairs on a lattice of ``cell_size`` spacing.
    Occupancy masks are NumPy arrays indexed ``[row, col]``, i.e.
    ``[y // cell_size, x // cell_size]``.
    """

    def __init__(self, cell_size: int = 20, extent: int = 600) -> None:
        if cell_size < 1 or extent % cell_size != 0:
            raise ValueError("extent must be a positive multiple of cell_size.")
        self.cell_size = cell_size
        self.extent = extent

    @classmethod
    def from_config(cls, config: GameConfig) -> Grid:
        return cls(cell_size=config.cell_size, extent=config.board_extent)

    @property
    def tile_count(self) -> int:
        return self.extent // self.cell_size

    def wrap(self, coordinate: int) -> int:
        """Map a coordinate that stepped off the board back onto it.

        Leaving past the far edge lands on 0; leaving past the near edge
        lands on the last cell.
        """
        if coordinate >= self.extent:
            return 0
        if coordinate < 0:
            return self.extent - self.cell_size
        return coordinate

    def wrap_position(self, position: Position) -> Position:
        x, y = position
        return self.wrap(x), self.wrap(y)

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.extent and 0 <= y < self.extent

    def to_position(self, col: int, row: int) -> Position:
        """Convert a (col, row) cell index to a board position."""
        return col * self.cell_size, row * self.cell_size

    def to_cell(self, position: Position) -> tuple[int, int]:
        """Convert a board position to its (row, col) mask index."""
        x, y = position
        return y // self.cell_size, x // self.cell_size

    def random_position(self, rng: np.random.Generator) -> Position:
        """Sample a lattice position uniformly at random."""
        col, row = rng.integers(0, self.tile_count, size=2)
        return self.to_position(int(col), int(row))

    def occupancy_mask(self, positions: Iterable[Position]) -> np.ndarray:
        """Return a boolean mask with ``True`` at every given position."""
        mask = np.zeros((self.tile_count, self.tile_count), dtype=bool)
        for pos in positions:
            if self.in_bounds(pos):
                mask[self.to_cell(pos)] = True
        return mask

    def free_positions(self, occupied: Iterable[Position]) -> list[Position]:
        """Return every unoccupied position in row-major scan order."""
        rows, cols = np.nonzero(~self.occupancy_mask(occupied))
        return [
            self.to_position(c, r)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]
