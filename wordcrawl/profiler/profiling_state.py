import threading
from typing import Dict, List, TextIO, Tuple

ProfilingKey = Tuple[type, str]


def format_key(key: ProfilingKey) -> str:
    owner, operation = key
    return f"{owner.__module__}.{owner.__qualname__}#{operation}"


def format_duration(seconds: float) -> str:
    # truncated, not rounded
    total_ms = int(seconds * 1000)
    minutes, rest_ms = divmod(total_ms, 60_000)
    secs, ms = divmod(rest_ms, 1000)
    return f"{minutes}m {secs}s {ms}ms"


class ProfilingState:
    """Accumulated wall-clock time per (owning type, operation name).

    Keys keep the order in which they were first measured. Safe to update from
    many threads at once.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._durations: Dict[ProfilingKey, float] = {}

    def record(self, owner: type, operation: str, seconds: float) -> None:
        key = (owner, operation)
        with self._lock:
            self._durations[key] = self._durations.get(key, 0.0) + seconds

    def get(self, owner: type, operation: str) -> float:
        with self._lock:
            return self._durations.get((owner, operation), 0.0)

    def items(self) -> List[Tuple[ProfilingKey, float]]:
        with self._lock:
            return list(self._durations.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._durations)

    def write(self, stream: TextIO) -> None:
        for key, seconds in self.items():
            stream.write(f"{format_key(key)} took {format_duration(seconds)}\n")
