"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .page_result import PageResult as PageResult
from .visited_set import VisitedSet as VisitedSet
from .word_count_accumulator import WordCountAccumulator as WordCountAccumulator

__all__ = [
    "CrawlerConfig",
    "CrawlContext",
    "CrawlResult",
    "PageResult",
    "VisitedSet",
    "WordCountAccumulator",
]
