import threading
import weakref
from typing import Dict

from app.utils.logging import get_logger

logger = get_logger(__name__)


class LockService:
    """
    -blokada checkoutu per uzytkownik (w obrebie procesu)
    -zwalnianie locka
    -dwa rownolegle checkouty tego samego usera ida jeden po drugim
    """

    def __init__(self):
        # wpis zyje tak dlugo, jak ktos trzyma lock albo na niego czeka
        self._locks: "weakref.WeakValueDictionary[int, threading.Lock]" = weakref.WeakValueDictionary()
        self._held: Dict[int, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, user_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock

    def acquire_user_lock(self, user_id: int, timeout: float) -> bool:
        logger.info(f"Acquire checkout lock for user {user_id}")
        lock = self._lock_for(user_id)
        if not lock.acquire(timeout=timeout):
            return False
        self._held[user_id] = lock
        return True

    def release_user_lock(self, user_id: int) -> bool:
        lock = self._held.pop(user_id, None)
        if lock is None:
            return False
        logger.info(f"Release checkout lock for user {user_id}")
        lock.release()
        return True

    def tracked_users(self) -> int:
        return len(self._locks)
