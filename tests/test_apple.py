"""Tests for the AppleSpawner module."""

import numpy as np
import pytest

from snake_duel.apple import AppleSpawner
from snake_duel.config import GameConfig
from snake_duel.grid import Grid
from snake_duel.snake import spawn_snake
from snake_duel.state import GameState


def _small_state() -> GameState:
    """A 4×4 board with both snakes spawned: rows 0 and 3 are full."""
    state = GameState(GameConfig(board_extent=80, initial_snake_length=4))
    for pid in (1, 2):
        state.players[pid].snake = spawn_snake(pid, state.config)
    return state


class _StuckRng:
    """Generator stand-in that always samples cell (0, 0)."""

    def integers(self, low, high, size=None):
        return np.zeros(size, dtype=np.int64)


class TestAppleSpawnerInit:
    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            AppleSpawner(Grid(), max_attempts=0)


class TestPlaceOne:
    def test_places_on_lattice(self):
        state = GameState()
        spawner = AppleSpawner(Grid(), rng=np.random.default_rng(42))
        pos = spawner.place_one(state)
        assert pos is not None
        assert state.apples == [pos]
        assert pos[0] % 20 == 0 and pos[1] % 20 == 0

    def test_avoids_snakes_and_apples(self):
        state = _small_state()
        spawner = AppleSpawner(Grid(20, 80), rng=np.random.default_rng(7))
        placed = spawner.seed(state, 8)
        assert len(placed) == 8
        assert len(set(placed)) == 8
        bodies = set(state.players[1].snake.body) | set(state.players[2].snake.body)
        assert not bodies & set(placed)

    def test_full_board_returns_none(self):
        state = _small_state()
        spawner = AppleSpawner(Grid(20, 80), rng=np.random.default_rng(7))
        spawner.seed(state, 8)
        assert spawner.place_one(state) is None
        assert len(state.apples) == 8

    def test_fallback_scan_after_exhausted_attempts(self):
        state = _small_state()
        spawner = AppleSpawner(Grid(20, 80), max_attempts=5, rng=_StuckRng())
        # (0, 0) is player 1's tail, so sampling never succeeds.
        assert spawner.place_one(state) == (0, 20)
        assert spawner.place_one(state) == (20, 20)

    def test_deterministic(self):
        """Same seed produces same apple positions."""
        assert self._seed_with(42) == self._seed_with(42)

    def test_different_seeds(self):
        assert self._seed_with(1) != self._seed_with(2)

    @staticmethod
    def _seed_with(seed: int) -> list[tuple[int, int]]:
        state = GameState()
        spawner = AppleSpawner(Grid(), rng=np.random.default_rng(seed))
        return spawner.seed(state, 3)
