import time
from typing import Callable, Mapping, Optional

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.visited_set import VisitedSet
from wordcrawl.domain.word_count_accumulator import WordCountAccumulator


class CrawlContext:
    """State shared by every traversal step of one crawl invocation.

    The deadline and config are fixed at construction and only read afterwards;
    the visited set and the accumulator synchronize themselves.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        clock: Callable[[], float] = time.monotonic,
        visited: Optional[VisitedSet] = None,
        counts: Optional[WordCountAccumulator] = None,
    ):
        self.config = config
        self.clock = clock
        self.deadline = clock() + config.timeout_seconds
        self.visited = visited if visited is not None else VisitedSet()
        self.counts = counts if counts is not None else WordCountAccumulator()

    def is_expired(self) -> bool:
        return self.clock() >= self.deadline

    def claim(self, url: str) -> bool:
        return self.visited.claim(url)

    def merge_counts(self, counts: Mapping[str, int]) -> None:
        self.counts.merge(counts)

    @property
    def urls_visited(self) -> int:
        return len(self.visited)
