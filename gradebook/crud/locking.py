# gradebook/crud/locking.py
import threading
from contextlib import contextmanager

_registry_lock = threading.Lock()
_class_locks = {}


def _lock_for(class_id: str) -> threading.Lock:
    with _registry_lock:
        lock = _class_locks.get(class_id)
        if lock is None:
            lock = _class_locks[class_id] = threading.Lock()
        return lock


@contextmanager
def class_locks(class_ids):
    """Serializes mutation batches that touch the same classes."""
    # sorted so two batches never wait on each other in opposite order
    ids = sorted(set(class_ids))
    acquired = []
    try:
        for class_id in ids:
            lock = _lock_for(class_id)
            lock.acquire()
            acquired.append(lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()
