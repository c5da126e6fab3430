"""Request-scoped dependencies."""

import httpx
from fastapi import Request


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the pooled Spotify client opened by the lifespan.

    Routes depend on this instead of reaching into ``app.state`` so tests can
    hand in a mock through ``app.dependency_overrides``.

    Raises:
        RuntimeError: If called outside the lifespan (no client on app.state).
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)
    if client is None:
        raise RuntimeError("Spotify HTTP client is not open; was the app started without its lifespan?")
    return client
