"""Redis-backed cache adapter."""

from __future__ import annotations

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from soms.application.ports import Cache
from soms.domain.exceptions import DependencyError

logger = logging.getLogger(__name__)


class RedisCache(Cache):

    def __init__(self, client: aioredis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> RedisCache:
        return cls(aioredis.from_url(url, decode_responses=True))

    async def remove(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except RedisError as exc:
            raise DependencyError(f"Cache removal of {key!r} failed: {exc}") from exc
        logger.debug("Removed cache key %s", key)

    async def close(self) -> None:
        await self._client.aclose()
