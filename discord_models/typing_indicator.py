"""Per-channel typing state with timed eviction.

Users enter the set on TYPING_START and leave it TYPING_TTL seconds after the
last one. Every (re)insertion is stamped with a fresh token; eviction only
removes a user if the expiring heap entry still carries that user's current
token, so a refresh or an explicit remove silently invalidates older timers.

The reaper thread runs only while timers are pending. It exits once the heap
drains, the indicator is closed, or the indicator is garbage-collected, and
the next ``add`` starts a new one.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
import weakref
from collections.abc import Callable, Hashable
from typing import NamedTuple

from discord_models.constants import TYPING_TTL
from discord_models.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    token: int
    deadline: float


def _wake(wakeup: threading.Condition) -> None:
    with wakeup:
        wakeup.notify_all()


def _run_reaper(
    ref: weakref.ref[TypingIndicator], wakeup: threading.Condition, name: str
) -> None:
    """
    Reaper loop. Holds the indicator only through ``ref`` while waiting, so
    a dropped indicator can be collected; its finalizer wakes this thread.
    """
    logger.debug("Typing[%s]: reaper started", name)
    while True:
        indicator = ref()
        if indicator is None:
            break
        with wakeup:
            delay = indicator._next_delay()
            if delay is None:
                break
            if delay > 0:
                del indicator
                # Dropped while we held it; the finalizer has already fired
                if ref() is None:
                    break
                wakeup.wait(delay)
                continue
        indicator.reap()
        del indicator
    logger.debug("Typing[%s]: reaper stopped", name)


class TypingIndicator:
    """
    Thread-safe set of users currently typing in one channel.

    All mutations (including timer eviction) run under the write side of a
    single writer-preferring lock guarding both the membership map and the
    deadline heap. Reads share the read side.
    """

    def __init__(
        self,
        ttl: float = TYPING_TTL,
        clock: Callable[[], float] = time.monotonic,
        start_reaper: bool = True,
        name: str = "",
    ):
        """
        Initialize an empty typing set.

        Args:
            ttl: Seconds a user stays present after the last add
            clock: Monotonic time source in seconds (injectable for tests)
            start_reaper: Run a background thread that evicts expired users.
                When False, expired users are still reported absent and
                ``reap()`` can be called to drop them.
            name: Label used in the reaper thread name and log lines
        """
        self._ttl = ttl
        self._clock = clock
        self._start_reaper = start_reaper
        self._name = name
        self._lock = ReadWriteLock()
        self._entries: dict[Hashable, _Entry] = {}
        self._heap: list[tuple[float, int, Hashable]] = []
        self._tokens = itertools.count(1)
        self._closed = False
        # Reentrant: the finalizer may fire on the reaper thread while it holds this
        self._wakeup = threading.Condition(threading.RLock())
        self._reaper: threading.Thread | None = None
        weakref.finalize(self, _wake, self._wakeup)

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, user_id: Hashable) -> None:
        """Insert or refresh a user; (re)starts its expiry timer."""
        with self._lock.write():
            if self._closed:
                logger.debug("Typing[%s]: ignoring add of %s after close", self._name, user_id)
                return
            token = next(self._tokens)
            deadline = self._clock() + self._ttl
            self._entries[user_id] = _Entry(token, deadline)
            heapq.heappush(self._heap, (deadline, token, user_id))
            if self._start_reaper and self._reaper is None:
                self._reaper = threading.Thread(
                    target=_run_reaper,
                    args=(weakref.ref(self), self._wakeup, self._name),
                    name=f"typing-reaper-{self._name or id(self)}",
                    daemon=True,
                )
                self._reaper.start()
        with self._wakeup:
            self._wakeup.notify()

    def remove(self, user_id: Hashable) -> None:
        """Remove a user and cancel its timer. No-op if absent."""
        with self._lock.write():
            if self._closed:
                return
            # The heap entry stays behind; its token no longer matches
            self._entries.pop(user_id, None)

    def contains(self, user_id: Hashable) -> bool:
        now = self._clock()
        with self._lock.read():
            entry = self._entries.get(user_id)
            return entry is not None and entry.deadline > now

    def __contains__(self, user_id: object) -> bool:
        return self.contains(user_id)  # type: ignore[arg-type]

    def snapshot(self) -> frozenset[Hashable]:
        """Point-in-time copy of the users currently typing."""
        now = self._clock()
        with self._lock.read():
            return frozenset(
                user_id for user_id, entry in self._entries.items() if entry.deadline > now
            )

    def __len__(self) -> int:
        return len(self.snapshot())

    def reap(self, now: float | None = None) -> int:
        """
        Evict users whose timer has fired.

        Returns:
            Number of users removed
        """
        if now is None:
            now = self._clock()
        removed = 0
        with self._lock.write():
            while self._heap and self._heap[0][0] <= now:
                _, token, user_id = heapq.heappop(self._heap)
                entry = self._entries.get(user_id)
                if entry is None or entry.token != token:
                    continue  # stale timer: refreshed or removed since
                del self._entries[user_id]
                removed += 1
        if removed:
            logger.debug("Typing[%s]: evicted %d user(s)", self._name, removed)
        return removed

    def close(self) -> None:
        """Cancel all timers, stop the reaper, and refuse further mutations."""
        with self._lock.write():
            if self._closed:
                return
            self._closed = True
            self._entries.clear()
            self._heap.clear()
            reaper = self._reaper
        with self._wakeup:
            self._wakeup.notify_all()
        if reaper is not None and reaper is not threading.current_thread():
            reaper.join(timeout=1.0)
        logger.debug("Typing[%s]: closed", self._name)

    def __enter__(self) -> TypingIndicator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _next_delay(self) -> float | None:
        """Seconds until the next timer fires, or None when the reaper should exit."""
        with self._lock.write():
            if self._closed or not self._heap:
                # Cleared under the same lock add() checks, so a new add restarts it
                self._reaper = None
                return None
            return self._heap[0][0] - self._clock()
