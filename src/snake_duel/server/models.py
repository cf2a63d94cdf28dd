"""Pydantic models for the push channel and REST schemas."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, StrictInt, StrictStr


class ClientEvent(str, enum.Enum):
    """Events a subscriber may send."""

    START_DETECTION = "start-detection"
    STOP_DETECTION = "stop-detection"
    START_GAME = "start-game"
    RESET_GAME = "reset-game"
    UPDATE_DIRECTION = "update-direction"


class ServerEvent(str, enum.Enum):
    """Events pushed to subscribers."""

    GAME_STATE = "game-state"
    SPECTATOR_COUNT = "spectator-count"


class ClientMessage(BaseModel):
    """Inbound frame envelope: ``{"event": ..., "data": ...}``."""

    event: StrictStr
    data: Any = None


class DirectionUpdate(BaseModel):
    """Payload of ``update-direction``."""

    player: StrictInt
    direction: StrictStr


class SpectatorCount(BaseModel):
    """Response for GET /spectators."""

    count: int
