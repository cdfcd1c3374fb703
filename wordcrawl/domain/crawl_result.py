"""Crawl result data model."""
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Tuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Built once when the crawl has finished and never mutated afterwards.
    """
    word_counts: Mapping[str, int]
    """Read-only word -> count mapping; iteration order is rank order"""

    urls_visited: int
    """Number of distinct URLs claimed during the crawl"""

    @classmethod
    def build(cls, word_counts: Iterable[Tuple[str, int]], urls_visited: int) -> "CrawlResult":
        return cls(word_counts=MappingProxyType(dict(word_counts)), urls_visited=int(urls_visited))

    @classmethod
    def empty(cls) -> "CrawlResult":
        return cls.build((), 0)

    def to_dict(self) -> dict:
        return {"wordCounts": dict(self.word_counts), "urlsVisited": self.urls_visited}
