from pathlib import Path

import pytest

from database import FileManager, MemoryKeyValueStore
from services.config import AppConfig, RedisConfig

ENV_VARS = [
    "MYCLIPBOARD_BACKEND",
    "MYCLIPBOARD_DATA_DIR",
    "MYCLIPBOARD_STORAGE_KEY",
    "MYCLIPBOARD_COPIED_SECONDS",
    "REDIS_URI",
    "REDIS_HOST",
    "REDIS_PORT",
    "REDIS_DB",
    "REDIS_PASSWORD",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # set first so monkeypatch removes anything a .env file adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / "missing.env"


def test_defaults(clean_env):
    config = AppConfig.from_env(env_path=clean_env)
    assert config.backend == "file"
    assert config.data_dir == Path.home() / ".myclipboard"
    assert config.storage_key == "my_clipboard_items_v1"
    assert config.copied_seconds == 3.0
    assert config.redis == RedisConfig()


def test_environment_overrides(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("MYCLIPBOARD_BACKEND", "Memory")
    monkeypatch.setenv("MYCLIPBOARD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MYCLIPBOARD_STORAGE_KEY", "custom")
    monkeypatch.setenv("MYCLIPBOARD_COPIED_SECONDS", "0.5")

    config = AppConfig.from_env(env_path=clean_env)

    assert config.backend == "memory"
    assert config.data_dir == tmp_path
    assert config.storage_key == "custom"
    assert config.copied_seconds == 0.5
    assert isinstance(config.create_storage(), MemoryKeyValueStore)


def test_dotenv_file_is_read(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MYCLIPBOARD_STORAGE_KEY=from_file\n", encoding="utf-8")
    assert AppConfig.from_env(env_path=env_file).storage_key == "from_file"


def test_file_backend_uses_data_dir(tmp_path):
    storage = AppConfig(data_dir=tmp_path / "clips").create_storage()
    assert isinstance(storage, FileManager)
    assert storage.base_dir == tmp_path / "clips"


@pytest.mark.parametrize("kwargs", [{"backend": "sqlite"}, {"copied_seconds": 0}])
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        AppConfig(**kwargs)


def test_redis_from_uri(clean_env, monkeypatch):
    monkeypatch.setenv("REDIS_URI", "redis://:secret@cache.local:6380/2")
    assert RedisConfig.from_env() == RedisConfig(
        host="cache.local", port=6380, db=2, password="secret")


def test_redis_from_fields(clean_env, monkeypatch):
    monkeypatch.setenv("REDIS_HOST", "10.0.0.5")
    monkeypatch.setenv("REDIS_PORT", "7000")
    assert RedisConfig.from_env() == RedisConfig(host="10.0.0.5", port=7000)


def test_redis_rejects_other_schemes():
    with pytest.raises(ValueError):
        RedisConfig.from_uri("http://localhost")
