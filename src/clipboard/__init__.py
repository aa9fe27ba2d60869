from clipboard.base import ClipboardWriter
from clipboard.factory import get_clipboard
from clipboard.memory import MemoryClipboard

__all__ = [
    'ClipboardWriter',
    'MemoryClipboard',
    'get_clipboard',
]
