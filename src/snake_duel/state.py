"""The single mutable aggregate holding all game state."""

from __future__ import annotations

from snake_duel.config import GameConfig
from snake_duel.grid import Position
from snake_duel.snake import Snake, default_direction, spawn_snake

PLAYER_IDS: tuple[int, ...] = (1, 2)


class PlayerState:
    """Tracks one player's snake and score."""

    __slots__ = ("player_id", "snake", "score")

    def __init__(self, player_id: int, snake: Snake | None = None) -> None:
        self.player_id = player_id
        self.snake = snake if snake is not None else Snake(
            direction=default_direction(player_id),
        )
        self.score = 0


class GameState:
    """Authoritative state for the one game hosted by the server.

    Components receive the instance they operate on; none of them keeps its
    own copy. ``detection_active`` is a client-side mode toggle that the
    game logic carries but never interprets.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.players: dict[int, PlayerState] = {
            pid: PlayerState(pid) for pid in PLAYER_IDS
        }
        self.apples: list[Position] = []
        self.running = False
        self.detection_active = False
        self.tick = 0

    def opponent_of(self, player_id: int) -> PlayerState:
        other = 2 if player_id == 1 else 1
        return self.players[other]

    def respawn_player(self, player_id: int) -> None:
        """Put a player's snake back at its spawn layout with zero score."""
        player = self.players[player_id]
        player.snake = spawn_snake(player_id, self.config)
        player.score = 0

    def occupied_positions(self) -> set[Position]:
        """Every cell covered by a snake or an apple."""
        occupied: set[Position] = set(self.apples)
        for player in self.players.values():
            occupied.update(player.snake.body)
        return occupied

    def to_dict(self) -> dict:
        """Return a full, serializable snapshot.

        Every call builds fresh containers, so the result is unaffected by
        later mutation.
        """
        return {
            "snakes": {
                str(pid): p.snake.to_list() for pid, p in self.players.items()
            },
            "apples": [{"x": x, "y": y} for x, y in self.apples],
            "scores": {str(pid): p.score for pid, p in self.players.items()},
            "directions": {
                str(pid): p.snake.direction.label
                for pid, p in self.players.items()
            },
            "gameRunning": self.running,
            "detectionRunning": self.detection_active,
            "tick": self.tick,
        }
