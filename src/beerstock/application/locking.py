"""Per-record exclusive locks for read-modify-write handlers.

Every handler that reads a beer and then writes it back does so inside
``RecordLocks.hold(key)``. Two calls touching the same key run one after
the other; calls on different keys never wait on each other. All
handlers of one process must share a single ``RecordLocks`` instance
(the composition root owns it).
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager

# Key for operations that must see a stable set of names (create, and
# replace when it may rename a record).
NAMES = ("names",)


def beer_key(beer_id: int) -> tuple[str, int]:
    return ("beer", beer_id)


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class RecordLocks:
    """Registry of exclusive locks keyed by record.

    An entry exists only while some caller holds or waits for its key, so
    the registry stays as small as the number of records in use.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: dict[Hashable, _Entry] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    @contextmanager
    def hold(self, *keys: Hashable) -> Iterator[None]:
        """Hold the exclusive lock of every key until the block exits.

        Keys are acquired in the order given; callers always pass a beer
        key before ``NAMES`` so no two handlers can wait on each other.
        """
        entries = [self._checkout(key) for key in keys]
        acquired: list[threading.Lock] = []
        try:
            for entry in entries:
                entry.lock.acquire()
                acquired.append(entry.lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()
            for key in keys:
                self._checkin(key)

    def _checkout(self, key: Hashable) -> _Entry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.users += 1
            return entry

    def _checkin(self, key: Hashable) -> None:
        with self._guard:
            entry = self._entries[key]
            entry.users -= 1
            if entry.users == 0:
                del self._entries[key]
