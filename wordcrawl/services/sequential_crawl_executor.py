import logging
from typing import Iterable, List, Tuple

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.services.crawl_executor import BaseCrawlExecutor

logger = logging.getLogger(__name__)


class SequentialCrawlExecutor(BaseCrawlExecutor):
    """Single-threaded depth-first crawl with the same rules as the parallel one."""

    @property
    def max_parallelism(self) -> int:
        return 1

    def crawl(self, start_urls: Iterable[str]) -> CrawlResult:
        context = self.new_context()
        for url in start_urls:
            self.crawl_from(url, self.config.max_depth, context)
        result = self.build_result(context)
        logger.info("Crawl finished: %d URL(s) visited, %d word(s) ranked", result.urls_visited, len(result.word_counts))
        return result

    def crawl_from(self, url: str, depth: int, context: CrawlContext) -> None:
        """Depth-first traversal from `url` on an explicit stack (no recursion limit on depth)."""
        stack: List[Tuple[str, int]] = [(url, depth)]
        while stack:
            current, remaining = stack.pop()
            links = self.visit(current, remaining, context)
            # reversed so the first link is visited first
            stack.extend((link, remaining - 1) for link in reversed(links))
