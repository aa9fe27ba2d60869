import logging
from typing import Iterator, List, Optional, Tuple

from database.base import KeyValueStore
from database.codec import decode_items, encode_items
from models.clipitem import ClipItem, clean_text, new_item_id
from services.copy_tracker import CopyStateTracker

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "my_clipboard_items_v1"


class ClipStore:
    """Ordered, persisted collection of clip items.

    Newest items sit at index 0. Every successful mutation writes a full
    snapshot under ``storage_key``. Invalid input is a no-op; a failed write
    raises ``StorageError`` but leaves the in-memory change in place.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        tracker: Optional[CopyStateTracker] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self.storage = storage
        self.tracker = tracker
        self.storage_key = storage_key
        self._items: List[ClipItem] = []

    @property
    def items(self) -> Tuple[ClipItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ClipItem]:
        return iter(self.items)

    def get(self, item_id: str) -> Optional[ClipItem]:
        index = self.index_of(item_id)
        return None if index is None else self._items[index]

    def index_of(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def load(self) -> List[ClipItem]:
        raw = self.storage.get(self.storage_key)
        if raw is None:
            logger.info("No saved items, starting empty")
            self._items = []
            return []

        try:
            items = decode_items(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable saved items: {e}")
            self._items = []
            return []

        self._items = items
        logger.info(f"Loaded {len(items)} items")
        return list(items)

    def persist(self) -> None:
        self.storage.set(self.storage_key, encode_items(self._items))

    def create(self, text: str) -> Optional[ClipItem]:
        text = clean_text(text)
        if not text:
            return None

        item = ClipItem(id=new_item_id({i.id for i in self._items}), text=text)
        self._items.insert(0, item)
        logger.info(f"Created item {item.id}")
        self.persist()
        return item

    def update(self, item_id: str, text: str) -> bool:
        text = clean_text(text)
        index = self.index_of(item_id)
        if not text or index is None:
            return False

        self._items[index] = self._items[index].with_text(text)
        logger.info(f"Updated item {item_id}")
        self.persist()
        return True

    def delete(self, item_id: str) -> bool:
        if self.tracker is not None:
            self.tracker.evict(item_id)

        index = self.index_of(item_id)
        if index is None:
            return False

        del self._items[index]
        logger.info(f"Deleted item {item_id}")
        self.persist()
        return True

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move the item at ``from_index`` to the drop slot ``to_index``.

        Both indices refer to the list before the item is lifted out, so
        ``to_index`` may equal ``len(self)`` (drop after the last item).
        A drop slot past the source is shifted down by one to account for the
        removal.
        """
        count = len(self._items)
        if not (0 <= from_index < count and 0 <= to_index <= count):
            return False

        if to_index > from_index:
            to_index -= 1
        if to_index == from_index:
            return False

        item = self._items.pop(from_index)
        self._items.insert(to_index, item)
        logger.info(f"Moved item {item.id} from {from_index} to {to_index}")
        self.persist()
        return True

    def copy(self, item_id: str) -> bool:
        item = self.get(item_id)
        if item is None or self.tracker is None:
            return False
        return self.tracker.mark_copied(item)

    def is_copied(self, item_id: str) -> bool:
        return self.tracker is not None and self.tracker.is_copied(item_id)
