"""Step-based game engine composing state, movement, collision, and apples."""

from __future__ import annotations

import logging

import numpy as np

from snake_duel.apple import AppleSpawner
from snake_duel.collision import CollisionResolver
from snake_duel.config import GameConfig
from snake_duel.grid import Grid
from snake_duel.snake import Direction, spawn_snake
from snake_duel.state import PLAYER_IDS, GameState

logger = logging.getLogger(__name__)


class GameEngine:
    """Two-player, step-based game engine.

    The engine owns the :class:`GameState` and applies commands and ticks
    to it. It never publishes anything; callers take :meth:`get_state`
    snapshots when they need to broadcast.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.grid = Grid.from_config(self.config)
        self.rng = np.random.default_rng(self.config.seed)
        self.state = GameState(self.config)
        self.apple_spawner = AppleSpawner(
            self.grid, max_attempts=self.config.max_spawn_attempts, rng=self.rng,
        )
        self.collisions = CollisionResolver(apple_reward=self.config.apple_reward)
        # Replacement apples that could not be placed on a full board.
        self._pending_apples = 0

    # -- commands ---------------------------------------------------------

    def init_game(self) -> None:
        """Respawn both snakes, reseed apples, and start running."""
        state = self.state
        for pid in PLAYER_IDS:
            state.players[pid].snake = spawn_snake(pid, self.config)
            state.players[pid].score = 0
        state.tick = 0
        state.apples.clear()
        placed = self.apple_spawner.seed(state, self.config.initial_apples)
        self._pending_apples = self.config.initial_apples - len(placed)
        state.running = True
        logger.info("Game started with %d apples.", len(placed))

    def reset_game(self) -> None:
        """Stop the game and detection, leaving bodies and scores as they are."""
        self.state.running = False
        self.state.detection_active = False
        logger.info("Game reset.")

    def set_detection(self, active: bool) -> None:
        self.state.detection_active = active

    def set_direction(self, player_id: object, direction: object) -> bool:
        """Set a player's heading. Returns False if the command was ignored.

        Reversing straight into the neck is allowed.
        """
        if not self.state.running:
            return False
        if isinstance(player_id, bool) or player_id not in PLAYER_IDS:
            return False
        if isinstance(direction, Direction):
            heading = direction
        else:
            heading = Direction.parse(direction)
        if heading is None:
            return False
        self.state.players[player_id].snake.direction = heading
        return True

    # -- ticking ----------------------------------------------------------

    def step(self) -> dict:
        """Advance the game by one tick.

        Does nothing while the game is not running. Returns the full game
        state as a serializable dict.
        """
        if not self.state.running:
            return self.get_state()

        self._replenish_apples()
        for pid in PLAYER_IDS:
            try:
                self._advance_player(pid)
            except Exception:
                logger.exception("Failed to advance player %d.", pid)

        self.state.tick += 1
        return self.get_state()

    def _advance_player(self, player_id: int) -> None:
        """Move one player: new head, collision, insert head, apple or tail."""
        state = self.state
        snake = state.players[player_id].snake
        if not snake.body:
            return

        new_head = snake.next_head(self.grid)

        if self.collisions.resolve(player_id, new_head, state).collided:
            return

        snake.body.appendleft(new_head)

        if self.collisions.consume_apple(player_id, new_head, state):
            if self.apple_spawner.place_one(state) is None:
                self._pending_apples += 1
        else:
            snake.body.pop()

    def _replenish_apples(self) -> None:
        """Retry placements deferred because the board was full."""
        while self._pending_apples > 0:
            if self.apple_spawner.place_one(self.state) is None:
                return
            self._pending_apples -= 1

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return self.state.to_dict()
