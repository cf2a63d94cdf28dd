"""Collision detection and apple consumption for a single player."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from snake_duel.grid import Position
from snake_duel.state import GameState

logger = logging.getLogger(__name__)


class CollisionKind(enum.Enum):
    """What a moving head ran into."""

    NONE = "none"
    SELF = "self"
    OPPONENT = "opponent"


@dataclass(frozen=True)
class CollisionResult:
    """Outcome of checking one player's next head."""

    kind: CollisionKind = CollisionKind.NONE

    @property
    def collided(self) -> bool:
        return self.kind is not CollisionKind.NONE


class CollisionResolver:
    """Resolves one player's move against the current board.

    Players are resolved one at a time, so the opponent's body is whatever
    it is at the moment of the check: pre-move for player 1, already
    advanced for player 2.
    """

    def __init__(self, apple_reward: int = 10) -> None:
        self.apple_reward = apple_reward

    @staticmethod
    def detect(
        player_id: int, new_head: Position, state: GameState,
    ) -> CollisionResult:
        """Classify *new_head* against both bodies without mutating anything."""
        body = state.players[player_id].snake.body
        # Index 0 is the current head, which the new head is about to replace.
        if any(seg == new_head for seg in list(body)[1:]):
            return CollisionResult(CollisionKind.SELF)
        if state.opponent_of(player_id).snake.occupies(new_head):
            return CollisionResult(CollisionKind.OPPONENT)
        return CollisionResult()

    def resolve(
        self, player_id: int, new_head: Position, state: GameState,
    ) -> CollisionResult:
        """Detect a collision and, if there is one, respawn the player.

        Only the colliding player is reset; its opponent keeps its body
        and score.
        """
        result = self.detect(player_id, new_head, state)
        if result.collided:
            score = state.players[player_id].score
            state.respawn_player(player_id)
            logger.info(
                "Player %d hit %s at %s; reset from score %d.",
                player_id,
                "itself" if result.kind is CollisionKind.SELF else "opponent",
                new_head,
                score,
            )
        return result

    def consume_apple(
        self, player_id: int, head: Position, state: GameState,
    ) -> bool:
        """Eat the apple at *head*, if any. Returns True when one was eaten."""
        try:
            state.apples.remove(head)
        except ValueError:
            return False
        state.players[player_id].score += self.apple_reward
        return True
