import logging
from typing import Optional

from clipboard import ClipboardWriter, get_clipboard
from database.base import KeyValueStore
from services.clip_store import ClipStore
from services.config import AppConfig
from services.copy_tracker import CopyStateTracker

logger = logging.getLogger(__name__)


class ClipboardApp:
    """Wires storage, clipboard, copy tracker and store together."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        storage: Optional[KeyValueStore] = None,
        clipboard: Optional[ClipboardWriter] = None,
        tracker: Optional[CopyStateTracker] = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self.storage = storage or self.config.create_storage()
        self.clipboard = clipboard or get_clipboard()
        self.tracker = tracker or CopyStateTracker(
            self.clipboard, expiry_seconds=self.config.copied_seconds)
        self.store = ClipStore(
            self.storage, tracker=self.tracker, storage_key=self.config.storage_key)
        self._started = False

    def start(self) -> "ClipboardApp":
        if not self._started:
            logger.info(f"Starting with {self.config.backend} storage")
            self.store.load()
            self._started = True
        return self

    def close(self) -> None:
        self.tracker.shutdown()
        self.storage.close()

    def __enter__(self) -> "ClipboardApp":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
