"""
Redis Storage Adapter - Redis-backed key/value storage.
"""

from typing import Optional
from itero_session.domain.errors import StorageError
from itero_session.ports.storage_port import StoragePort


class RedisStorageAdapter(StoragePort):
    """
    Redis-backed storage.

    Values are plain strings under a key prefix, without expiration;
    the server decides when a session credential stops being valid.
    Lets several processes on different hosts share one session.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: Optional[str] = None,
        prefix: str = "itero:",
    ):
        """
        Initialize Redis storage adapter.

        Args:
            redis_client: Redis client instance (redis.Redis)
            redis_url: URL used to build a client when none is given
            prefix: Key prefix
        """
        self._redis = redis_client
        self._url = redis_url or "redis://localhost:6379/0"
        self._prefix = prefix

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            try:
                import redis
            except ImportError:
                raise ImportError("redis package required: pip install redis")
            self._redis = redis.Redis.from_url(self._url, decode_responses=True)
        return self._redis

    def _key(self, key: str) -> str:
        """Generate Redis key."""
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        from redis.exceptions import RedisError

        try:
            value = self._get_redis().get(self._key(key))
        except RedisError as e:
            raise StorageError(f"Redis read failed: {e}") from e

        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        from redis.exceptions import RedisError

        try:
            self._get_redis().set(self._key(key), value)
        except RedisError as e:
            raise StorageError(f"Redis write failed: {e}") from e

    def remove(self, key: str) -> None:
        from redis.exceptions import RedisError

        try:
            # DEL on a missing key returns 0
            self._get_redis().delete(self._key(key))
        except RedisError as e:
            raise StorageError(f"Redis delete failed: {e}") from e
