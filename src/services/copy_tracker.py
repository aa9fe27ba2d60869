import logging
import threading
from typing import Callable, Dict, List, Set, Tuple

from clipboard import ClipboardWriter
from models.clipitem import ClipItem

logger = logging.getLogger(__name__)

DEFAULT_COPIED_SECONDS = 3.0

CopyListener = Callable[[str, bool], None]


def _daemon_timer(interval: float, function: Callable[..., None], args=()) -> threading.Timer:
    timer = threading.Timer(interval, function, args=args)
    timer.daemon = True
    return timer


class CopyStateTracker:
    """Transient "recently copied" markers with timed expiry.

    Each copied id owns exactly one pending timer. Copying the same id again
    cancels the old timer and starts a fresh window, so the marker never
    drops out early. Nothing here is ever persisted.
    """

    def __init__(
        self,
        clipboard: ClipboardWriter,
        expiry_seconds: float = DEFAULT_COPIED_SECONDS,
        timer_factory: Callable[..., threading.Timer] = _daemon_timer,
    ) -> None:
        self.clipboard = clipboard
        self.expiry_seconds = expiry_seconds
        self._timer_factory = timer_factory
        self._lock = threading.RLock()
        # id -> (generation, timer); the generation lets a timer that fired
        # after being replaced recognise itself as stale.
        self._pending: Dict[str, Tuple[int, threading.Timer]] = {}
        self._generation = 0
        self._listeners: List[CopyListener] = []
        self._closed = False

    def mark_copied(self, item: ClipItem) -> bool:
        """Put ``item.text`` on the clipboard and mark the item as copied.

        Returns whether the clipboard write succeeded. The marker is set
        either way.
        """
        ok = self.clipboard.set_text(item.text)

        with self._lock:
            if self._closed:
                return ok
            was_copied = self._cancel(item.id)
            self._generation += 1
            generation = self._generation
            timer = self._timer_factory(
                self.expiry_seconds, self._expire, args=(item.id, generation))
            self._pending[item.id] = (generation, timer)
            timer.start()

        logger.debug(f"Marked {item.id} copied for {self.expiry_seconds}s")
        if not was_copied:
            self._notify(item.id, True)
        return ok

    def _expire(self, item_id: str, generation: int) -> None:
        with self._lock:
            if self._closed:
                return
            entry = self._pending.get(item_id)
            if entry is None or entry[0] != generation:
                return
            del self._pending[item_id]
        self._notify(item_id, False)

    def is_copied(self, item_id: str) -> bool:
        with self._lock:
            return item_id in self._pending

    def copied_ids(self) -> Set[str]:
        with self._lock:
            return set(self._pending)

    def evict(self, item_id: str) -> None:
        with self._lock:
            removed = self._cancel(item_id)
        if removed:
            self._notify(item_id, False)

    def _cancel(self, item_id: str) -> bool:
        entry = self._pending.pop(item_id, None)
        if entry is None:
            return False
        entry[1].cancel()
        return True

    def subscribe(self, listener: CopyListener) -> Callable[[], None]:
        """Register ``listener(item_id, copied)``; returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, item_id: str, copied: bool) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(item_id, copied)
            except Exception as e:
                logger.error(f"Copy-state listener failed: {e}")

    def shutdown(self) -> None:
        with self._lock:
            self._closed = True
            pending = list(self._pending.values())
            self._pending.clear()
            self._listeners.clear()
        for _, timer in pending:
            timer.cancel()

    def __enter__(self) -> "CopyStateTracker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
