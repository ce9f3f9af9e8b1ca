"""
Redis-backed key-value store
"""

from typing import Optional

from redis import Redis
from redis.exceptions import RedisError

from lead_intel.core.exceptions import StorageError
from lead_intel.core.logging import get_logger

from .base import IKeyValueStore

logger = get_logger(__name__)


class RedisKeyValueStore(IKeyValueStore):
    """Synchronous redis-py store; values are stored as plain strings"""

    def __init__(self, client: Redis):
        self._client = client

    @classmethod
    def from_settings(cls, storage_settings) -> "RedisKeyValueStore":
        """Build a client from the StorageSettings section"""
        redis_config = {
            "host": storage_settings.REDIS_HOST,
            "port": storage_settings.REDIS_PORT,
            "db": storage_settings.REDIS_DB,
            "password": storage_settings.REDIS_PASSWORD or None,
            "decode_responses": True,
            "socket_connect_timeout": 5,
            "socket_timeout": 5,
        }
        # TLS only makes sense off-box
        if storage_settings.REDIS_TLS and storage_settings.REDIS_HOST != "localhost":
            redis_config["ssl"] = True
            redis_config["ssl_cert_reqs"] = None

        logger.info(
            "Creating Redis key-value store",
            host=storage_settings.REDIS_HOST,
            port=storage_settings.REDIS_PORT,
            db=storage_settings.REDIS_DB,
        )
        return cls(Redis(**redis_config))

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._client.get(key)
        except RedisError as e:
            raise StorageError(
                "Redis read failed", key=key, operation="get", cause=e
            ) from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except RedisError as e:
            raise StorageError(
                "Redis write failed", key=key, operation="set", cause=e
            ) from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except RedisError as e:
            raise StorageError(
                "Redis delete failed", key=key, operation="delete", cause=e
            ) from e
