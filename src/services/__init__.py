"""Service layer for My Clipboard."""

from services.app import ClipboardApp
from services.clip_store import ClipStore
from services.config import AppConfig, RedisConfig
from services.copy_tracker import CopyStateTracker

__all__ = ["AppConfig", "ClipStore", "ClipboardApp", "CopyStateTracker", "RedisConfig"]
