"""Snake Duel — authoritative two-player snake game core."""

from snake_duel.apple import AppleSpawner
from snake_duel.collision import CollisionKind, CollisionResolver, CollisionResult
from snake_duel.config import GameConfig
from snake_duel.engine import GameEngine
from snake_duel.grid import Grid, Position
from snake_duel.snake import Direction, Snake
from snake_duel.state import GameState, PlayerState

__all__ = [
    "AppleSpawner",
    "CollisionKind",
    "CollisionResolver",
    "CollisionResult",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "PlayerState",
    "Position",
    "Snake",
]
