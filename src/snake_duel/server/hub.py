"""Subscriber registry, command dispatch, and the async tick loop."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from typing import Any

from pydantic import ValidationError
from starlette.websockets import WebSocket, WebSocketState

from snake_duel.config import GameConfig
from snake_duel.engine import GameEngine
from snake_duel.server.models import ClientEvent, DirectionUpdate, ServerEvent

logger = logging.getLogger(__name__)


def encode_event(event: ServerEvent, data: Any) -> str:
    """Serialize an outbound frame."""
    return json.dumps({"event": event.value, "data": data}, separators=(",", ":"))


class GameHub:
    """Owns the game engine and everyone watching it.

    Every mutation (ticks and commands) and every connect-time snapshot runs
    under :attr:`lock`, so observers only ever see whole ticks. Frames are
    encoded under the lock and sent after releasing it.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        engine: GameEngine | None = None,
    ) -> None:
        self.engine = engine if engine is not None else GameEngine(config)
        self.config = self.engine.config
        self.lock = asyncio.Lock()
        self.subscribers: dict[str, WebSocket] = {}
        self._task: asyncio.Task | None = None

    @property
    def spectator_count(self) -> int:
        return len(self.subscribers)

    # -- tick loop --------------------------------------------------------

    def start(self) -> None:
        """Start the tick loop on the running event loop."""
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.create_task(self._tick_loop())
        logger.info(
            "Tick loop started (interval=%d ms).", self.config.tick_interval_ms,
        )

    async def _tick_loop(self) -> None:
        """Fire :meth:`tick` every interval until cancelled."""
        interval = self.config.tick_interval
        try:
            while True:
                await asyncio.sleep(interval)
                try:
                    await self.tick()
                except Exception:
                    logger.exception("Tick failed.")
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled.")

    async def tick(self) -> bool:
        """Run one tick and publish it. Returns False while not running."""
        async with self.lock:
            if not self.engine.state.running:
                return False
            payload = encode_event(ServerEvent.GAME_STATE, self.engine.step())
        await self._broadcast(payload)
        return True

    # -- subscribers ------------------------------------------------------

    async def connect(self, websocket: WebSocket) -> str:
        """Register an accepted socket and bring it up to date.

        The new subscriber gets one snapshot of its own, then everyone gets
        the new spectator count.
        """
        connection_id = uuid.uuid4().hex[:8]
        async with self.lock:
            snapshot = encode_event(ServerEvent.GAME_STATE, self.engine.get_state())
            self.subscribers[connection_id] = websocket
        logger.info("Connection %s opened.", connection_id)
        await self._send(connection_id, websocket, snapshot)
        await self.publish_spectator_count()
        return connection_id

    async def disconnect(self, connection_id: str) -> None:
        # The socket may already be gone if a broadcast to it failed.
        self.subscribers.pop(connection_id, None)
        logger.info("Connection %s closed.", connection_id)
        await self.publish_spectator_count()

    async def publish_spectator_count(self) -> None:
        await self._broadcast(
            encode_event(ServerEvent.SPECTATOR_COUNT, self.spectator_count),
        )

    # -- commands ---------------------------------------------------------

    async def handle_command(self, event: str, data: Any = None) -> bool:
        """Apply an inbound command. Returns False if it was ignored."""
        try:
            command = ClientEvent(event)
        except ValueError:
            logger.debug("Ignoring unknown event %r.", event)
            return False

        if command is ClientEvent.UPDATE_DIRECTION:
            try:
                update = DirectionUpdate.model_validate(data)
            except ValidationError:
                logger.debug("Ignoring malformed direction update %r.", data)
                return False
            async with self.lock:
                return self.engine.set_direction(update.player, update.direction)

        async with self.lock:
            if command is ClientEvent.START_DETECTION:
                self.engine.set_detection(True)
            elif command is ClientEvent.STOP_DETECTION:
                self.engine.set_detection(False)
            elif command is ClientEvent.START_GAME:
                self.engine.init_game()
            elif command is ClientEvent.RESET_GAME:
                self.engine.reset_game()
            payload = encode_event(ServerEvent.GAME_STATE, self.engine.get_state())
        await self._broadcast(payload)
        return True

    # -- transport --------------------------------------------------------

    async def _send(
        self, connection_id: str, websocket: WebSocket, payload: str,
    ) -> bool:
        try:
            if websocket.client_state == WebSocketState.CONNECTED:
                await websocket.send_text(payload)
            return True
        except Exception:
            logger.warning(
                "Failed sending to connection %s; dropping it.", connection_id,
            )
            self.subscribers.pop(connection_id, None)
            return False

    async def _broadcast(self, payload: str) -> None:
        """Send a frame to every subscriber."""
        # Iterate over a snapshot so connect/disconnect handlers can mutate
        # the live registry without affecting this send loop.
        for connection_id, websocket in list(self.subscribers.items()):
            await self._send(connection_id, websocket, payload)

    async def cleanup(self) -> None:
        """Cancel the tick loop."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        logger.info("GameHub cleanup complete.")
