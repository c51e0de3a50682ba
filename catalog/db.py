"""Redis client construction and per-app registration.

One client (and so one connection pool) is shared by every request of an app.
redis-py pools are thread-safe, so no per-request setup is needed.
"""

from __future__ import annotations

from flask import Flask, current_app
from redis import Redis


def create_redis_client(
    redis_url: str,
    *,
    socket_timeout: float | None = None,
    connect_timeout: float | None = None,
) -> Redis:
    """Build a Redis client from a ``redis://`` URL."""

    return Redis.from_url(
        redis_url,
        socket_timeout=socket_timeout,
        socket_connect_timeout=connect_timeout,
    )


def init_redis(app: Flask, client: Redis | None = None) -> None:
    """Attach a Redis client to the app.

    The connection is opened lazily on first command, so an unreachable
    store does not prevent the app from starting.
    """

    if client is None:
        client = create_redis_client(
            str(app.config["REDIS_URL"]),
            socket_timeout=app.config.get("REDIS_SOCKET_TIMEOUT"),
            connect_timeout=app.config.get("REDIS_CONNECT_TIMEOUT"),
        )

    app.extensions["redis"] = client


def get_redis() -> Redis:
    """Get the current app's Redis client."""

    client: Redis | None = current_app.extensions.get("redis")
    if client is None:
        raise RuntimeError("Redis client not initialized")
    return client
