"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from snake_duel.server.hub import GameHub
from snake_duel.server.routes import router
from snake_duel.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    app.state.hub.start()
    yield
    await app.state.hub.cleanup()


def create_app(hub: GameHub | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Snake Duel", version="0.1.0", lifespan=_lifespan,
    )
    app.state.hub = hub if hub is not None else GameHub()
    app.include_router(router)
    app.include_router(ws_router)
    return app
