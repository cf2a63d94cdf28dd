"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Constants governing board geometry, pacing, and scoring.

    The defaults are the reference values: a 600-unit board of 20-unit
    cells, a 150 ms tick, three apples worth 10 points each, and snakes
    that spawn with four segments.
    """

    cell_size: int = 20
    board_extent: int = 600
    tick_interval_ms: int = 150
    initial_apples: int = 3
    apple_reward: int = 10
    initial_snake_length: int = 4
    max_spawn_attempts: int = 1000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.board_extent % self.cell_size != 0:
            raise ValueError("board_extent must be a multiple of cell_size.")
        if self.tile_count < 4:
            raise ValueError("board_extent must span at least 4 cells.")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be at least 1.")
        if self.initial_apples < 1:
            raise ValueError("initial_apples must be at least 1.")
        if self.apple_reward < 0:
            raise ValueError("apple_reward must be non-negative.")
        if self.initial_snake_length < 1:
            raise ValueError("initial_snake_length must be at least 1.")
        if self.initial_snake_length > self.tile_count:
            raise ValueError(
                "initial_snake_length does not fit on one board row; "
                "increase board_extent or reduce the length."
            )
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")

    @property
    def tile_count(self) -> int:
        """Number of cells along each side of the square board."""
        return self.board_extent // self.cell_size

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0
