from __future__ import annotations
import threading


class PicklableLock:
    """
    Normal thread-locks are not pickleable. This provides a pickleable lock by mandating that the lock is unlocked
    during serialization.
    """

    _LOCK = threading.Lock

    def __init__(self, *args, **kwargs):
        self._lock = self.__class__._LOCK(*args, **kwargs)  # pylint: disable=too-many-function-args

    def __enter__(self):
        return self._lock.__enter__()

    def __exit__(self, exc_type, exc_val, exc_tb):
        return self._lock.__exit__(exc_type, exc_val, exc_tb)

    def acquire(self, *args, **kwargs):
        return self._lock.acquire(*args, **kwargs)

    def locked(self):
        return self._lock.locked()

    def release(self):
        return self._lock.release()

    def __reduce__(self):
        if self.locked():
            raise TypeError("Cannot pickle a lock that is being held")
        return type(self), ()

    def __deepcopy__(self, memo):
        # a copied provider gets its own lock, never a shared one
        return type(self)()


class PicklableRLock(PicklableLock):
    """
    Same as above, but uses RLock instead of Lock for locking. A provider may re-enter its own lock when a naming
    operation calls another one (batch renaming computes parameter names, for example).

    RLock does not tell whether it is held by another thread, so the check is done by trying to acquire it without
    blocking.
    """

    _LOCK = threading.RLock

    def locked(self):
        if self._lock.acquire(blocking=False):
            self._lock.release()
            return False
        return True
