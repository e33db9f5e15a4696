from __future__ import annotations

import redis

from fos.application.ports.cache import CacheStore

CATALOG_KEY_PREFIX = "fos:"


class RedisCacheStore(CacheStore):
    """Catalog cache backed by a client built with ``decode_responses=True``."""

    def __init__(self, client: redis.Redis, prefix: str = CATALOG_KEY_PREFIX) -> None:
        self._client = client
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> str | None:
        value = self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._client.set(self._key(key), value, ex=ttl_seconds)


class NullCacheStore(CacheStore):
    """Used when no REDIS_URL is configured; every read is a miss."""

    def get(self, key: str) -> str | None:
        return None

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        return None
