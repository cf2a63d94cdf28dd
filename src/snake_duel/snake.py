"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from snake_duel.config import GameConfig
from snake_duel.grid import Grid, Position


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) cell deltas.

    The y axis grows downwards, so ``UP`` decreases y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def label(self) -> str:
        """Lowercase wire name."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: object) -> Direction | None:
        """Return the direction named by *value*, or ``None``."""
        if not isinstance(value, str):
            return None
        return _BY_LABEL.get(value)


_BY_LABEL: dict[str, Direction] = {d.label: d for d in Direction}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. An idle snake has
    an empty body until the game is started.
    """

    def __init__(
        self,
        body: Iterable[Position] = (),
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[Position] = deque(body)
        self.direction = direction

    @classmethod
    def spawn(
        cls,
        head: Position,
        direction: Direction,
        length: int,
        cell_size: int,
    ) -> Snake:
        """Build a straight snake whose body trails behind *head*."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        x, y = head
        body = [
            (x - dx * cell_size * i, y - dy * cell_size * i)
            for i in range(length)
        ]
        return cls(body, direction)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, grid: Grid) -> Position:
        """Compute the wrapped next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return grid.wrap_position(
            (x + dx * grid.cell_size, y + dy * grid.cell_size),
        )

    def occupies(self, position: Position) -> bool:
        return position in self.body

    def to_list(self) -> list[dict]:
        """Serialize the body as a list of ``{"x", "y"}`` objects."""
        return [{"x": x, "y": y} for x, y in self.body]


def spawn_snake(player_id: int, config: GameConfig) -> Snake:
    """Return the fixed starting snake for *player_id*.

    Player 1 starts on the top row at the left edge heading right; player 2
    mirrors it on the bottom row at the right edge heading left.
    """
    cell = config.cell_size
    length = config.initial_snake_length
    if player_id == 1:
        head = ((length - 1) * cell, 0)
        direction = Direction.RIGHT
    elif player_id == 2:
        head = (config.board_extent - length * cell, config.board_extent - cell)
        direction = Direction.LEFT
    else:
        raise ValueError(f"player_id {player_id} must be 1 or 2.")
    return Snake.spawn(head, direction, length, cell)


def default_direction(player_id: int) -> Direction:
    """Return the heading *player_id* starts with."""
    return Direction.RIGHT if player_id == 1 else Direction.LEFT
