"""Ping utility used by the API health-check."""

from smartsave.config import APP_VERSION
from smartsave.schemas.ping import PingResponse


def get_ping() -> PingResponse:
    """Return the static ping payload with the running version."""
    return PingResponse(message="pong", version=APP_VERSION)
