"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Maps keys to byte strings and drops entries older than ``interval`` seconds.

    A background thread reaps stale entries once per interval until
    :meth:`close` is called.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._reap_loop, daemon=True)
        self._thread.start()

    @property
    def interval(self) -> float:
        return self._interval

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(time.time(), bytes(value))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self, now: float, last: float) -> None:
        """Remove entries created more than ``last`` seconds before ``now``."""
        cutoff = now - last
        with self._lock:
            stale = [key for key, entry in self._entries.items() if entry.created_at < cutoff]
            for key in stale:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self.reap(time.time(), self._interval)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()