"""In-process per-policy locks.

Sync endpoints run on a threadpool, so every create, grant and read
holds the lock of the policy it addresses for the whole call.
Entries are weak: a lock lives only while some hold() is using it.
Can be replaced with a database advisory lock when running several workers.
"""
import threading
import weakref
from contextlib import contextmanager


class PolicyLockRegistry:
    def __init__(self):
        self._registry_lock = threading.Lock()
        self._locks = weakref.WeakValueDictionary()

    def _lock_for(self, policy_id: int) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(policy_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[policy_id] = lock
            return lock

    def __len__(self) -> int:
        return len(self._locks)

    @contextmanager
    def hold(self, policy_id: int):
        lock = self._lock_for(policy_id)
        with lock:
            yield


POLICY_LOCKS = PolicyLockRegistry()
