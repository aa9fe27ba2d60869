"""
Storage backends for My Clipboard.

Every backend is a plain string key-value store.
"""

from database.base import KeyValueStore, MemoryKeyValueStore, StorageError
from database.codec import decode_items, encode_items
from database.file_manager import FileManager
from database.redis_manager import RedisManager

__all__ = [
    'FileManager',
    'KeyValueStore',
    'MemoryKeyValueStore',
    'RedisManager',
    'StorageError',
    'decode_items',
    'encode_items',
]
