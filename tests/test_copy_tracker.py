import time

from clipboard import MemoryClipboard
from models.clipitem import ClipItem
from services.copy_tracker import CopyStateTracker

ITEM = ClipItem(id="c_1", text="hello")
OTHER = ClipItem(id="c_2", text="world")


def test_mark_copied_writes_clipboard_and_sets_marker(tracker, clipboard, timers):
    assert tracker.mark_copied(ITEM) is True
    assert clipboard.text == "hello"
    assert tracker.is_copied(ITEM.id)
    assert len(timers.live) == 1
    assert timers.live[0].interval == 3.0


def test_marker_clears_when_timer_fires(tracker, timers):
    tracker.mark_copied(ITEM)
    timers.fire_all()
    assert not tracker.is_copied(ITEM.id)
    assert tracker.copied_ids() == set()


def test_repeated_copy_restarts_window(tracker, timers):
    tracker.mark_copied(ITEM)
    first = timers.created[0]
    tracker.mark_copied(ITEM)
    second = timers.created[1]

    assert first.cancelled
    assert timers.live == [second]

    # the replaced timer already ran before it could be cancelled
    first.function(*first.args)
    assert tracker.is_copied(ITEM.id)

    second.fire()
    assert not tracker.is_copied(ITEM.id)


def test_each_item_has_its_own_timer(tracker, timers):
    tracker.mark_copied(ITEM)
    tracker.mark_copied(OTHER)
    assert tracker.copied_ids() == {ITEM.id, OTHER.id}

    timers.created[0].fire()
    assert tracker.copied_ids() == {OTHER.id}


def test_evict_cancels_timer(tracker, timers):
    tracker.mark_copied(ITEM)
    tracker.evict(ITEM.id)
    assert not tracker.is_copied(ITEM.id)
    assert timers.created[0].cancelled


def test_evict_unknown_id_is_harmless(tracker):
    tracker.evict("missing")
    assert tracker.copied_ids() == set()


def test_clipboard_failure_still_marks_copied(timers):
    tracker = CopyStateTracker(MemoryClipboard(fail=True), timer_factory=timers)
    assert tracker.mark_copied(ITEM) is False
    assert tracker.is_copied(ITEM.id)


def test_listeners_see_transitions_only(tracker, timers):
    events = []
    unsubscribe = tracker.subscribe(lambda item_id, copied: events.append((item_id, copied)))

    tracker.mark_copied(ITEM)
    tracker.mark_copied(ITEM)
    timers.created[-1].fire()
    tracker.mark_copied(OTHER)
    tracker.evict(OTHER.id)
    unsubscribe()
    tracker.mark_copied(ITEM)

    assert events == [
        (ITEM.id, True),
        (ITEM.id, False),
        (OTHER.id, True),
        (OTHER.id, False),
    ]


def test_failing_listener_does_not_break_tracking(tracker):
    def broken(item_id, copied):
        raise RuntimeError("boom")

    tracker.subscribe(broken)
    tracker.mark_copied(ITEM)
    assert tracker.is_copied(ITEM.id)


def test_timer_firing_after_shutdown_is_a_noop(tracker, timers):
    tracker.mark_copied(ITEM)
    timer = timers.created[0]
    tracker.shutdown()

    assert timer.cancelled
    timer.function(*timer.args)
    assert not tracker.is_copied(ITEM.id)


def test_real_timer_expires_marker(clipboard):
    tracker = CopyStateTracker(clipboard, expiry_seconds=0.05)
    try:
        tracker.mark_copied(ITEM)
        assert tracker.is_copied(ITEM.id)

        deadline = time.monotonic() + 2.0
        while tracker.is_copied(ITEM.id) and time.monotonic() < deadline:
            time.sleep(0.01)
        assert not tracker.is_copied(ITEM.id)
    finally:
        tracker.shutdown()
