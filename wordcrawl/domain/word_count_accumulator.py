import threading
from typing import Dict, Mapping


class WordCountAccumulator:
    """Running word -> count totals merged from many pages concurrently."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}

    def merge(self, counts: Mapping[str, int]) -> None:
        """Add `counts` into the totals, summing on collision."""
        if not counts:
            return
        with self._lock:
            for word, count in counts.items():
                self._counts[word] = self._counts.get(word, 0) + int(count)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
