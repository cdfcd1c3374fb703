"""Call-latency profiling for WordCrawl components."""
from .profiler import Profiler as Profiler
from .profiling_state import ProfilingState as ProfilingState
from .proxy import ProfilingProxy as ProfilingProxy

__all__ = ["Profiler", "ProfilingState", "ProfilingProxy"]
