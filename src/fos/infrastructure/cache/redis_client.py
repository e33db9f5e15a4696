from __future__ import annotations

from functools import lru_cache

import redis

HEALTH_CHECK_INTERVAL_SECONDS = 30


@lru_cache(maxsize=4)
def _connection_pool(redis_url: str, timeout_seconds: float) -> redis.ConnectionPool:
    return redis.ConnectionPool.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=timeout_seconds,
        socket_timeout=timeout_seconds,
        health_check_interval=HEALTH_CHECK_INTERVAL_SECONDS,
    )


def get_redis_client(redis_url: str, timeout_seconds: float = 1.0) -> redis.Redis:
    """One pool per URL; clients are cheap views over it."""
    return redis.Redis(connection_pool=_connection_pool(redis_url, timeout_seconds))


def ping_redis(client: redis.Redis) -> bool:
    try:
        return bool(client.ping())
    except redis.RedisError:
        return False
