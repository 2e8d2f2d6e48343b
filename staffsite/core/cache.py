"""
In-process render cache for personal pages.

Keys embed the employee's last_updated stamp, so editing a record makes
its old entries unreachable; they then age out by TTL or get dropped by
the size cap.
"""

import logging
import time
from threading import Lock

log = logging.getLogger("staffsite.cache")


def render_cache_key(employee: dict, path: str) -> str:
    return f"{employee.get('id', '')}:{path}:{employee.get('last_updated', '')}"


class RenderCache:

    def __init__(self, max_entries: int = 1000, clock=time.monotonic):
        self.max_entries = max_entries
        self._clock = clock
        self._entries = {}
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str):
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry[0] <= self._clock():
                if entry is not None:
                    del self._entries[key]
                self.misses += 1
                return None
            self.hits += 1
            return entry[1]

    def set(self, key: str, value, ttl: int):
        if ttl <= 0:
            return
        with self._lock:
            if len(self._entries) >= self.max_entries:
                log.info("Render cache full (%d entries), clearing", len(self._entries))
                self._entries.clear()
            self._entries[key] = (self._clock() + ttl, value)

    def clear(self) -> int:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        return dropped

    def stats(self) -> dict:
        with self._lock:
            return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}
