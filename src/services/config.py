from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from database.base import KeyValueStore, MemoryKeyValueStore
from database.file_manager import FileManager
from database.redis_manager import RedisManager
from services.clip_store import DEFAULT_STORAGE_KEY
from services.copy_tracker import DEFAULT_COPIED_SECONDS

BACKENDS = ("file", "redis", "memory")


def _to_bool(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RedisConfig:
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    decode_responses: bool = True

    @classmethod
    def from_env(cls) -> "RedisConfig":
        uri = os.getenv("REDIS_URI")
        if uri:
            return cls.from_uri(uri)

        host = os.getenv("REDIS_HOST", cls.host)
        port_raw = os.getenv("REDIS_PORT")
        db_raw = os.getenv("REDIS_DB")
        password = os.getenv("REDIS_PASSWORD") or None
        decode = _to_bool(os.getenv("REDIS_DECODE_RESPONSES"), default=True)

        port = int(port_raw) if port_raw else cls.port
        db = int(db_raw) if db_raw else cls.db

        return cls(host=host, port=port, db=db, password=password, decode_responses=decode)

    @classmethod
    def from_uri(cls, uri: str) -> "RedisConfig":
        parsed = urlparse(uri)
        if parsed.scheme not in {"redis", "rediss"}:
            raise ValueError(
                f"Unsupported Redis URI scheme: {parsed.scheme!r}")

        host = parsed.hostname or cls.host
        port = parsed.port or cls.port
        password = parsed.password or None
        db_fragment = parsed.path.lstrip("/")
        db = int(db_fragment) if db_fragment else cls.db

        decode = _to_bool(os.getenv("REDIS_DECODE_RESPONSES"), default=True)

        return cls(host=host, port=port, db=db, password=password, decode_responses=decode)

    def create_manager(self) -> RedisManager:
        return RedisManager(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            decode_responses=self.decode_responses,
        )


@dataclass(frozen=True)
class AppConfig:
    backend: str = "file"
    data_dir: Path = field(default_factory=lambda: Path.home() / ".myclipboard")
    storage_key: str = DEFAULT_STORAGE_KEY
    copied_seconds: float = DEFAULT_COPIED_SECONDS
    redis: RedisConfig = field(default_factory=RedisConfig)

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unknown storage backend {self.backend!r}, expected one of {', '.join(BACKENDS)}")
        if self.copied_seconds <= 0:
            raise ValueError("copied_seconds must be positive")

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "AppConfig":
        load_dotenv(env_path)

        data_dir = os.getenv("MYCLIPBOARD_DATA_DIR")
        seconds = os.getenv("MYCLIPBOARD_COPIED_SECONDS")

        return cls(
            backend=os.getenv("MYCLIPBOARD_BACKEND", "file").strip().lower(),
            data_dir=Path(data_dir).expanduser() if data_dir else Path.home() / ".myclipboard",
            storage_key=os.getenv("MYCLIPBOARD_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
            copied_seconds=float(seconds) if seconds else DEFAULT_COPIED_SECONDS,
            redis=RedisConfig.from_env(),
        )

    def create_storage(self) -> KeyValueStore:
        if self.backend == "memory":
            return MemoryKeyValueStore()
        if self.backend == "redis":
            return self.redis.create_manager()
        return FileManager(self.data_dir)
