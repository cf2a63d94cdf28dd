"""WebSocket push channel for viewers and controllers."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from snake_duel.server.hub import GameHub
from snake_duel.server.models import ClientMessage

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_hub(ws: WebSocket) -> GameHub:
    return ws.app.state.hub


def parse_message(raw: str) -> ClientMessage | None:
    """Decode an inbound frame, or return ``None`` if it is not one."""
    try:
        return ClientMessage.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError):
        return None


@ws_router.websocket("/ws")
async def subscribe(websocket: WebSocket) -> None:
    """Receive game state every tick; send game commands."""
    hub = _get_hub(websocket)
    await websocket.accept()
    connection_id = await hub.connect(websocket)

    try:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", 1000))
            raw = frame.get("text")
            if raw is None:
                continue
            message = parse_message(raw)
            if message is None:
                continue
            await hub.handle_command(message.event, message.data)
    except WebSocketDisconnect:
        logger.debug("Connection %s disconnected by peer.", connection_id)
    finally:
        await hub.disconnect(connection_id)
