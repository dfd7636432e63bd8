"""Redis implementation of DictionaryCachePort.

Stores serialized dictionary entries as plain string values:
- Key: ``sonaveeb:word:<word>`` (word used exactly as given)
- Value: DictionaryEntry JSON
- No TTL; entries live until overwritten
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from domain.model.errors import CacheError

logger = logging.getLogger(__name__)

KEY_PREFIX = 'sonaveeb:word:'


class RedisDictionaryCache:
    def __init__(self, url: str, prefix: str = KEY_PREFIX, client: redis.Redis | None = None):
        self.url = url
        self.prefix = prefix
        self._client = client

    def _get_client(self) -> redis.Redis:
        """Create the client lazily; redis-py pools and reconnects on its own."""
        if self._client is None:
            self._client = redis.from_url(
                self.url,
                decode_responses=True,
                socket_connect_timeout=5,
            )
        return self._client

    def _key(self, key: str) -> str:
        return f'{self.prefix}{key}'

    # ── DictionaryCachePort implementation ───────────────────

    async def get(self, key: str) -> str | None:
        try:
            return await self._get_client().get(self._key(key))
        except (RedisError, ValueError, OSError) as e:
            logger.error("[REDIS] Failed to read dictionary cache", extra={"key": key, "error": str(e)})
            raise CacheError("Dictionary cache read failed", cause=e) from e

    async def set(self, key: str, value: str) -> None:
        try:
            await self._get_client().set(self._key(key), value)
        except (RedisError, ValueError, OSError) as e:
            logger.error("[REDIS] Failed to write dictionary cache", extra={"key": key, "error": str(e)})
            raise CacheError("Dictionary cache write failed", cause=e) from e

    async def ping(self) -> bool:
        try:
            return bool(await self._get_client().ping())
        except (RedisError, ValueError, OSError) as e:
            logger.warning("[REDIS] Ping failed", extra={"error": str(e)[:200]})
            return False
