"""Process-local locks that serialize read-modify-write commands.

Cart mutations for one user run one at a time, and order numbers are drawn
under a single lock. Locks wrap the whole ``domain.process()`` call so the
unit of work commits before the next writer reads.
"""

import threading
from collections import defaultdict
from contextlib import contextmanager


class KeyedLocks:
    """A lazily populated registry of one re-entrant lock per key."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = defaultdict(threading.RLock)

    def lock_for(self, key: str) -> threading.RLock:
        with self._guard:
            return self._locks[str(key)]

    @contextmanager
    def hold(self, key: str):
        lock = self.lock_for(key)
        with lock:
            yield


user_locks = KeyedLocks()

# Guards the order number sequence across all users
order_number_lock = threading.RLock()
