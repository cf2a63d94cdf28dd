"""Read-only REST routes for polling clients."""

from __future__ import annotations

from fastapi import APIRouter, Request

from snake_duel.server.models import SpectatorCount

router = APIRouter(tags=["game"])


def _get_hub(request: Request):
    return request.app.state.hub


@router.get("/state")
async def get_state(request: Request) -> dict:
    """Return a full snapshot of the game."""
    hub = _get_hub(request)
    async with hub.lock:
        return hub.engine.get_state()


@router.get("/spectators")
async def get_spectators(request: Request) -> SpectatorCount:
    """Return the number of open push-channel connections."""
    return SpectatorCount(count=_get_hub(request).spectator_count)
