"""Apple spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_duel.grid import Grid, Position
    from snake_duel.state import GameState

logger = logging.getLogger(__name__)


class AppleSpawner:
    """Places apples on cells not covered by a snake or another apple.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Random sampling is capped at ``max_attempts`` draws, after which the
    board is scanned in row-major order for the first free cell.
    """

    def __init__(
        self,
        grid: Grid,
        max_attempts: int = 1000,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()

    def place_one(self, state: GameState) -> Position | None:
        """Add one apple to ``state.apples`` and return its position.

        Returns ``None`` when every cell is occupied.
        """
        occupied = state.occupied_positions()

        for _ in range(self.max_attempts):
            pos = self.grid.random_position(self.rng)
            if pos not in occupied:
                state.apples.append(pos)
                return pos

        free = self.grid.free_positions(occupied)
        if not free:
            logger.warning("No free cells available for apple placement.")
            return None

        pos = free[0]
        logger.debug(
            "Random apple placement exhausted %d attempts; using %s.",
            self.max_attempts,
            pos,
        )
        state.apples.append(pos)
        return pos

    def seed(self, state: GameState, count: int) -> list[Position]:
        """Place up to *count* apples, returning the placed positions."""
        placed: list[Position] = []
        for _ in range(count):
            pos = self.place_one(state)
            if pos is None:
                break
            placed.append(pos)
        return placed
