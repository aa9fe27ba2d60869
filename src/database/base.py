from abc import ABC, abstractmethod
from typing import Dict, Optional


class StorageError(Exception):
    """Raised when a key-value backend cannot complete a read or write."""


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> "KeyValueStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryKeyValueStore(KeyValueStore):
    """Dict backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})
        self.writes = 0
        self.fail_writes = False

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError(f"write to {key!r} rejected")
        self.data[key] = value
        self.writes += 1
