import functools
from typing import Callable, FrozenSet

from wordcrawl.profiler.profiling_state import ProfilingState

_OWN_ATTRS = frozenset({"_delegate", "_measured", "_clock", "_state"})


class ProfilingProxy:
    """Stands in for a component and times its measured operations.

    Attribute access is forwarded to the delegate. Calls to operations named
    in `measured` are timed; the duration is recorded even when the call
    raises, and the original exception is re-raised untouched.
    """

    def __init__(self, delegate, measured: FrozenSet[str], clock: Callable[[], float], state: ProfilingState):
        object.__setattr__(self, "_delegate", delegate)
        object.__setattr__(self, "_measured", measured)
        object.__setattr__(self, "_clock", clock)
        object.__setattr__(self, "_state", state)

    def __getattr__(self, name):
        if name in _OWN_ATTRS:
            raise AttributeError(name)
        attr = getattr(self._delegate, name)
        if name in self._measured and callable(attr):
            return self._timed(name, attr)
        return attr

    def __setattr__(self, name, value):
        setattr(self._delegate, name, value)

    def _timed(self, name: str, operation: Callable) -> Callable:
        owner = type(self._delegate)

        @functools.wraps(operation)
        def timed(*args, **kwargs):
            start = self._clock()
            try:
                return operation(*args, **kwargs)
            finally:
                self._state.record(owner, name, self._clock() - start)

        return timed

    def __eq__(self, other):
        if isinstance(other, ProfilingProxy):
            other = other._delegate
        return self._delegate == other

    def __hash__(self):
        return hash(self._delegate)

    def __repr__(self):
        return f"<ProfilingProxy {self._delegate!r} measured={sorted(self._measured)}>"
