import threading
from typing import Set


class VisitedSet:
    """
    Tracks which URLs have been claimed during a single crawl.

    Shared by every traversal step of the crawl. `claim` is the only way in,
    and it tests and inserts under one lock so a URL is handed to at most one
    step even when several steps race on it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def claim(self, url: str) -> bool:
        """Mark `url` as visited. Returns False if it was already claimed."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        with self._lock:
            return url in self._visited

    def urls(self) -> frozenset:
        with self._lock:
            return frozenset(self._visited)

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
