from __future__ import annotations

import io
import logging
import os
import sys
import time
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Callable, Iterable, Optional, TextIO, Union

from wordcrawl.exceptions import FileOperationError, ProfilerConfigurationError
from wordcrawl.profiler.profiling_state import ProfilingState
from wordcrawl.profiler.proxy import ProfilingProxy

logger = logging.getLogger(__name__)

Destination = Union[str, os.PathLike, TextIO, None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Profiler:
    """Measures how long designated operations of wrapped components take.

    One profiler is shared by every component of a run; durations for the same
    (type, operation) pair are summed across calls and threads.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter, now: Callable[[], datetime] = _utc_now):
        self._clock = clock
        self._state = ProfilingState()
        self.start_time = now()

    @property
    def state(self) -> ProfilingState:
        return self._state

    def wrap(self, component, measured: Iterable[str]) -> ProfilingProxy:
        """Return a proxy for `component` that times the operations named in `measured`.

        Raises `ProfilerConfigurationError` when `measured` is empty or names
        anything that is not a callable attribute of `component`.
        """
        if component is None:
            raise ValueError("component is required")
        if isinstance(measured, str):
            measured = [measured]
        names = frozenset(measured or ())
        owner = type(component).__name__
        if not names:
            raise ProfilerConfigurationError(f"No measured operations given for {owner}")
        missing = sorted(n for n in names if not callable(getattr(component, n, None)))
        if missing:
            raise ProfilerConfigurationError(f"{owner} has no operation(s) named {', '.join(missing)}")
        return ProfilingProxy(component, names, self._clock, self._state)

    def report(self) -> str:
        buf = io.StringIO()
        self._write(buf)
        return buf.getvalue()

    def write_report(self, destination: Destination = None) -> None:
        """Write the report to a path (appending, parents created), a text stream, or stdout.

        Streams are flushed but never closed.
        """
        if destination is None:
            self._write(sys.stdout)
            return
        if hasattr(destination, "write"):
            self._write(destination)
            return

        path = os.fspath(destination)
        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                self._write(f)
        except OSError as e:
            raise FileOperationError("write", path, e) from e
        logger.info("Wrote profiling data for %d operation(s) to %s", len(self._state), path)

    def _write(self, stream: TextIO) -> None:
        stream.write(f"Run at {format_datetime(self.start_time.astimezone(timezone.utc), usegmt=True)}\n")
        self._state.write(stream)
        stream.write("\n")
        stream.flush()
