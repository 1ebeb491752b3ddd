"""Voice slot management.

An ElevenLabs account holds a limited number of voices (its "slots"), set by
the subscription tier. :class:`VoiceSlotManager` keeps the voices you need in
those slots: when a library voice is requested and the account is full, the
least recently used account voice is removed to make room.

The store being evicted from is the remote account itself, so every
eviction and add is a real, billable API call. Usage timestamps live only in
process memory and are lost on restart; voices that were never used in this
process are evicted first.

Two concurrent ``ensure_available`` calls against a nearly full account can
both decide to evict. Nothing here prevents that. Callers that run this from
several threads against one account must serialize the calls themselves,
e.g. with one lock per account around ``ensure_available``.

Example:
    ```python
    manager = client.voice_slots
    voice = manager.ensure_available(
        public_user_id="owner123", voice_id="voice456", name="Spanish Voice"
    )
    status = manager.status()
    print(f"{status.used}/{status.limit} slots used")
    ```
"""

import threading
import time
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

from eleven_client.errors import VoiceSlotLimitError
from eleven_client.logger import Logger
from eleven_client.objects import Subscription, Voice
from eleven_client.utils.performance_profiler import Timer

# Timestamp given to voices with no recorded use, so they sort first.
NEVER_USED = 0.0


class AccountVoices(Protocol):
    """The capacity-limited account collection."""

    def list(self) -> Sequence[Voice]:
        ...

    def destroy(self, voice_id: str) -> bool:
        ...


class VoiceSource(Protocol):
    """Where voices missing from the account are added from."""

    def add(self, public_user_id: str, voice_id: str, name: str) -> Voice:
        ...


class SubscriptionSource(Protocol):
    """Reports the account's voice limit."""

    def subscription(self) -> Subscription:
        ...


@dataclass(frozen=True)
class SlotStatus:
    """Slot usage at the moment it was read.

    Attributes:
        used: Voices currently in the account
        limit: Voice limit, None if the subscription reports none
        available: ``limit - used`` (``-used`` without a limit); may be negative
        full: True when a limit exists and ``used >= limit``
    """

    used: int
    limit: Optional[int]
    available: int
    full: bool

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


class UsageTracker:
    """Last-used timestamps per voice id, guarded by a lock."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last_used: Dict[str, float] = {}
        self._lock = threading.Lock()

    def touch(self, voice_id: str) -> float:
        """Record ``voice_id`` as used now and return the timestamp."""
        now = self._clock()
        with self._lock:
            self._last_used[voice_id] = now
        return now

    def last_used(self, voice_id: str) -> float:
        with self._lock:
            return self._last_used.get(voice_id, NEVER_USED)

    def discard(self, voice_id: str) -> None:
        with self._lock:
            self._last_used.pop(voice_id, None)

    def clear(self) -> None:
        with self._lock:
            self._last_used.clear()

    def snapshot(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._last_used)

    def __contains__(self, voice_id: str) -> bool:
        with self._lock:
            return voice_id in self._last_used

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_used)


class VoiceSlotManager:
    """Keeps requested library voices present in the account, evicting LRU voices.

    Args:
        voices: Account collection (list/destroy)
        library: Source to add voices from (add)
        user: Subscription source for the voice limit
        clock: Time source for usage timestamps
    """

    def __init__(self, voices: AccountVoices, library: VoiceSource, user: SubscriptionSource,
                 clock: Callable[[], float] = time.time):
        self.voices = voices
        self.library = library
        self.user = user
        self.tracker = UsageTracker(clock)

    def ensure_available(self, public_user_id: str, voice_id: str, name: str) -> Voice:
        """Make sure ``voice_id`` is in the account and return it.

        1. If the voice is already in the account, mark it used and return
           it. No write call is made.
        2. Otherwise, if the account is full, remove the least recently
           used voice.
        3. Add the voice from the library and mark it used.

        This is not transactional: if the add fails after an eviction, the
        freed slot stays empty. Re-read :meth:`status` after a failure.

        Raises:
            VoiceSlotLimitError: If the account reports full but has no voice to remove
        """
        with Timer("voice_slots.ensure_available"):
            existing = self.find_in_account(voice_id)
            if existing is not None:
                self.track_usage(existing.voice_id)
                return existing

            self._make_room_if_needed()

            voice = self.library.add(public_user_id=public_user_id, voice_id=voice_id, name=name)
            self.track_usage(voice.voice_id)
        Logger.print_debug(f"Voice {voice.voice_id} ({name}) added to account")
        return voice

    def prepare_voices(self, voices: Iterable[Mapping[str, str]]) -> List[Voice]:
        """Ensure each voice in turn.

        Args:
            voices: Mappings with ``public_user_id``, ``voice_id`` and ``name``

        Stops at the first failure; voices already prepared stay prepared.
        """
        return [self.ensure_available(**params) for params in voices]

    def status(self) -> SlotStatus:
        """Read current slot usage. Always two fresh remote reads, never cached."""
        limit = self.user.subscription().voice_limit
        used = self.current_count()
        return SlotStatus(
            used=used,
            limit=limit,
            available=(limit or 0) - used,
            full=used >= limit if limit is not None else False,
        )

    def current_count(self) -> int:
        return len(self.voices.list())

    def available_slots(self) -> int:
        return self.status().available

    def full(self) -> bool:
        return self.status().full

    def track_usage(self, voice_id: str) -> float:
        """Record ``voice_id`` as used now. Repeated calls refresh the timestamp."""
        return self.tracker.touch(voice_id)

    def reset_tracking(self) -> None:
        """Forget all usage timestamps."""
        self.tracker.clear()

    def voices_by_usage(self) -> List[Voice]:
        """Account voices, least recently used first.

        Ties keep the order the account listing returned.
        """
        return sorted(self.voices.list(), key=lambda v: self.tracker.last_used(v.voice_id))

    def least_recently_used(self) -> Optional[Voice]:
        ordered = self.voices_by_usage()
        return ordered[0] if ordered else None

    def remove_lru(self) -> Voice:
        """Remove the least recently used voice from the account.

        Returns:
            Voice: The removed voice

        Raises:
            VoiceSlotLimitError: If the account has no voices
        """
        lru_voice = self.least_recently_used()
        if lru_voice is None:
            raise VoiceSlotLimitError("No voices available to remove")

        self.voices.destroy(lru_voice.voice_id)
        self.tracker.discard(lru_voice.voice_id)
        Logger.print_info(f"Evicted least recently used voice {lru_voice.voice_id} ({lru_voice.name})")
        return lru_voice

    def remove(self, voice_id: str) -> bool:
        """Remove a voice. Its usage entry is dropped only if the API confirms."""
        removed = self.voices.destroy(voice_id)
        if removed:
            self.tracker.discard(voice_id)
        return removed

    def in_account(self, voice_id: str) -> bool:
        return self.find_in_account(voice_id) is not None

    def find_in_account(self, voice_id: str) -> Optional[Voice]:
        return next((v for v in self.voices.list() if v.voice_id == voice_id), None)

    def _make_room_if_needed(self) -> None:
        if self.full():
            self.remove_lru()
