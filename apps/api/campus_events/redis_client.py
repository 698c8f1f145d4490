from __future__ import annotations

from redis import Redis
from redis.connection import ConnectionPool

from campus_events.core.config import settings

_pool: ConnectionPool | None = None


def get_redis() -> Redis:
    global _pool
    if _pool is None:
        # Short timeouts: callers treat Redis as optional and fail open
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            decode_responses=True,
            socket_timeout=settings.redis_socket_timeout,
            socket_connect_timeout=settings.redis_socket_timeout,
        )
    return Redis(connection_pool=_pool)
