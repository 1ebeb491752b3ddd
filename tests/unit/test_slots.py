"""Unit tests for voice slot management (LRU eviction over the account)."""

import threading
from unittest.mock import patch

import pytest
import requests

from eleven_client.errors import VoiceSlotLimitError
from eleven_client.slots import NEVER_USED, SlotStatus, UsageTracker, VoiceSlotManager
from fakes import FakeAccountVoices, FakeClock, FakeLibrary, FakeUser


@pytest.fixture(autouse=True)
def quiet_logger():
    with patch("eleven_client.slots.Logger"):
        yield


def make_manager(voice_ids=(), limit=10, clock=None, library_fails=False):
    account = FakeAccountVoices(voice_ids)
    library = FakeLibrary(account, fail=library_fails)
    manager = VoiceSlotManager(account, library, FakeUser(limit), clock=clock or FakeClock())
    return manager, account, library


class TestUsageTracker:
    def test_untracked_voice_has_never_used_timestamp(self):
        assert UsageTracker(FakeClock()).last_used("unknown") == NEVER_USED

    def test_touch_refreshes_timestamp(self):
        clock = FakeClock(1.0)
        tracker = UsageTracker(clock)
        tracker.touch("a")
        clock.now = 9.0
        tracker.touch("a")
        assert tracker.last_used("a") == 9.0
        assert len(tracker) == 1

    def test_concurrent_touches_do_not_lose_entries(self):
        tracker = UsageTracker()
        threads = [threading.Thread(target=tracker.touch, args=(f"voice{i}",)) for i in range(50)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(tracker) == 50

    def test_discard_and_clear(self):
        tracker = UsageTracker(FakeClock())
        tracker.touch("a")
        tracker.touch("b")
        tracker.discard("a")
        tracker.discard("missing")
        assert "a" not in tracker
        assert tracker.snapshot() == {"b": 100.0}
        tracker.clear()
        assert len(tracker) == 0


class TestLeastRecentlyUsed:
    def test_untracked_voices_come_first(self):
        clock = FakeClock()
        manager, _, _ = make_manager(["A", "B", "C"], clock=clock)
        clock.now = 1.0
        manager.track_usage("A")
        clock.now = 5.0
        manager.track_usage("C")

        assert manager.least_recently_used().voice_id == "B"
        assert [v.voice_id for v in manager.voices_by_usage()] == ["B", "A", "C"]

    def test_eviction_order_follows_usage(self):
        clock = FakeClock()
        manager, account, _ = make_manager(["A", "B", "C"], clock=clock)
        clock.now = 1.0
        manager.track_usage("A")
        clock.now = 5.0
        manager.track_usage("C")

        assert manager.remove_lru().voice_id == "B"
        assert manager.least_recently_used().voice_id == "A"
        assert account.destroyed == ["B"]

    def test_ties_keep_listing_order(self):
        manager, _, _ = make_manager(["X", "Y", "Z"])
        assert [v.voice_id for v in manager.voices_by_usage()] == ["X", "Y", "Z"]

    def test_empty_account_has_no_lru(self):
        manager, _, _ = make_manager([])
        assert manager.least_recently_used() is None

    def test_remove_lru_on_empty_account_raises(self):
        manager, account, _ = make_manager([])
        with pytest.raises(VoiceSlotLimitError, match="No voices available to remove"):
            manager.remove_lru()
        assert account.destroyed == []

    def test_remove_lru_drops_usage_entry(self):
        manager, _, _ = make_manager(["A"])
        manager.track_usage("A")
        manager.remove_lru()
        assert "A" not in manager.tracker


class TestEnsureAvailable:
    def test_voice_already_in_account_makes_no_writes(self):
        clock = FakeClock(42.0)
        manager, account, library = make_manager(["A", "B"], limit=2, clock=clock)

        voice = manager.ensure_available(public_user_id="owner", voice_id="A", name="Alpha")

        assert voice.voice_id == "A"
        assert account.destroyed == []
        assert library.added == []
        assert manager.tracker.last_used("A") == 42.0

    def test_adds_without_eviction_when_slots_free(self):
        manager, account, library = make_manager(["A"], limit=3)

        voice = manager.ensure_available(public_user_id="owner", voice_id="N", name="New")

        assert voice.voice_id == "N"
        assert account.destroyed == []
        assert library.added == [("owner", "N", "New")]
        assert "N" in manager.tracker

    def test_full_account_evicts_exactly_one_then_adds(self):
        clock = FakeClock()
        manager, account, library = make_manager(["A", "B"], limit=2, clock=clock)
        clock.now = 1.0
        manager.track_usage("A")
        clock.now = 2.0
        manager.track_usage("B")
        clock.now = 3.0

        manager.ensure_available(public_user_id="owner", voice_id="N", name="New")

        assert account.destroyed == ["A"]
        assert library.added == [("owner", "N", "New")]
        assert "A" not in manager.tracker
        assert manager.tracker.last_used("N") == 3.0
        assert manager.status() == SlotStatus(used=2, limit=2, available=0, full=True)

    def test_full_account_without_voices_raises(self):
        manager, _, library = make_manager([], limit=0)

        with pytest.raises(VoiceSlotLimitError):
            manager.ensure_available(public_user_id="owner", voice_id="N", name="New")

        assert library.added == []

    def test_failed_add_leaves_evicted_slot_empty(self):
        manager, account, _ = make_manager(["A"], limit=1, library_fails=True)

        with pytest.raises(requests.ConnectionError):
            manager.ensure_available(public_user_id="owner", voice_id="N", name="New")

        assert account.destroyed == ["A"]
        assert manager.status().used == 0

    def test_prepare_voices_stops_at_first_failure(self):
        manager, _, library = make_manager([], limit=5)
        calls = []
        original_add = library.add

        def flaky_add(public_user_id, voice_id, name):
            calls.append(voice_id)
            if voice_id == "two":
                raise requests.ConnectionError("boom")
            return original_add(public_user_id, voice_id, name)

        library.add = flaky_add

        with pytest.raises(requests.ConnectionError):
            manager.prepare_voices([
                {"public_user_id": "o", "voice_id": "one", "name": "One"},
                {"public_user_id": "o", "voice_id": "two", "name": "Two"},
                {"public_user_id": "o", "voice_id": "three", "name": "Three"},
            ])

        assert calls == ["one", "two"]
        assert manager.in_account("one")

    def test_prepare_voices_returns_voices_in_order(self):
        manager, _, _ = make_manager(["one"], limit=5)

        voices = manager.prepare_voices([
            {"public_user_id": "o", "voice_id": "one", "name": "One"},
            {"public_user_id": "o", "voice_id": "two", "name": "Two"},
        ])

        assert [v.voice_id for v in voices] == ["one", "two"]


class TestStatus:
    def test_status_math(self):
        manager, _, _ = make_manager(["A", "B", "C"], limit=10)
        status = manager.status()
        assert status == SlotStatus(used=3, limit=10, available=7, full=False)
        assert status.to_dict() == {"used": 3, "limit": 10, "available": 7, "full": False}

    def test_over_limit_reports_negative_availability(self):
        manager, _, _ = make_manager(["A", "B", "C"], limit=2)
        assert manager.available_slots() == -1
        assert manager.full() is True

    def test_missing_limit_is_never_full(self):
        manager, _, _ = make_manager(["A"], limit=None)
        assert manager.status() == SlotStatus(used=1, limit=None, available=-1, full=False)

    def test_status_is_read_fresh_each_time(self):
        manager, account, _ = make_manager(["A"], limit=5)
        manager.status()
        manager.status()
        assert account.list_calls == 2
        assert manager.current_count() == 1


class TestRemove:
    def test_successful_remove_drops_usage(self):
        manager, _, _ = make_manager(["A"])
        manager.track_usage("A")
        assert manager.remove("A") is True
        assert "A" not in manager.tracker

    def test_unconfirmed_remove_keeps_usage(self):
        manager, _, _ = make_manager(["A"])
        manager.track_usage("Z")
        assert manager.remove("Z") is False
        assert "Z" in manager.tracker

    def test_reset_tracking(self):
        manager, _, _ = make_manager(["A"])
        manager.track_usage("A")
        manager.reset_tracking()
        assert len(manager.tracker) == 0

    def test_find_in_account(self):
        manager, _, _ = make_manager(["A", "B"])
        assert manager.find_in_account("B").voice_id == "B"
        assert manager.find_in_account("Q") is None
        assert manager.in_account("A")
