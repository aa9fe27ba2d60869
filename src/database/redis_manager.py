import logging
from typing import Any, Dict, Optional

import redis

from database.base import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class RedisManager(KeyValueStore):

    def __init__(self, host: str = 'localhost', port: int = 6379, db: int = 0,
                 password: Optional[str] = None, decode_responses: bool = True,
                 client: Optional[redis.Redis] = None):
        self.client = client or redis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            decode_responses=decode_responses
        )
        self._test_connection()

    def _test_connection(self):
        try:
            self.client.ping()
        except redis.RedisError as e:
            logger.error(f"Redis unreachable: {e}")
            raise StorageError(f"Redis unreachable: {e}") from e

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except redis.RedisError as e:
            raise StorageError(f"Redis GET {key!r} failed: {e}") from e
        if isinstance(value, bytes):
            return value.decode('utf-8')
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except redis.RedisError as e:
            raise StorageError(f"Redis SET {key!r} failed: {e}") from e

    def health_check(self) -> Dict[str, Any]:
        info = self.client.info()
        return {
            "status": "healthy",
            "connected_clients": info.get('connected_clients', 0),
            "used_memory": info.get('used_memory_human', 'unknown'),
            "total_keys": self.client.dbsize(),
        }

    def close(self):
        self.client.close()
