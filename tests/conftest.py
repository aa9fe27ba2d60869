import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Make src importable
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))

from clipboard import MemoryClipboard  # noqa: E402
from database.base import MemoryKeyValueStore  # noqa: E402
from services.clip_store import ClipStore  # noqa: E402
from services.copy_tracker import CopyStateTracker  # noqa: E402


class ManualTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval: float, function: Callable, args=()):
        self.interval = interval
        self.function = function
        self.args = args
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # threading.Timer skips the callback once cancelled
        if not self.cancelled:
            self.function(*self.args)


class ManualTimers:

    def __init__(self):
        self.created: List[ManualTimer] = []

    def __call__(self, interval, function, args=()):
        timer = ManualTimer(interval, function, args)
        self.created.append(timer)
        return timer

    @property
    def live(self) -> List[ManualTimer]:
        return [t for t in self.created if t.started and not t.cancelled]

    def fire_all(self) -> None:
        for timer in list(self.created):
            timer.fire()


@pytest.fixture
def storage():
    return MemoryKeyValueStore()


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def timers():
    return ManualTimers()


@pytest.fixture
def tracker(clipboard, timers):
    tracker = CopyStateTracker(clipboard, expiry_seconds=3.0, timer_factory=timers)
    yield tracker
    tracker.shutdown()


@pytest.fixture
def store(storage, tracker):
    return ClipStore(storage, tracker=tracker)
