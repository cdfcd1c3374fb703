from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.profiler.profiler import Profiler
from wordcrawl.services.crawl_executor import BaseCrawlExecutor, ParallelCrawlExecutor
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.html_page_parser import HtmlPageParser
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_source import HttpPageSource, PageSource
from wordcrawl.services.sequential_crawl_executor import SequentialCrawlExecutor

logger = logging.getLogger(__name__)

_EXECUTORS = {
    "": ParallelCrawlExecutor,
    "parallel": ParallelCrawlExecutor,
    "sequential": SequentialCrawlExecutor,
}

_EXECUTOR_NAMES = {cls.__name__.lower(): cls for cls in (ParallelCrawlExecutor, SequentialCrawlExecutor)}


def executor_names() -> list:
    """Short names accepted for `implementationOverride` (besides "" and class names)."""
    return [name for name in _EXECUTORS if name]


def resolve_executor_class(implementation_override: Optional[str]) -> type[BaseCrawlExecutor]:
    """Map a config `implementationOverride` to an executor class.

    Accepts the short names above, a class name, or a dotted path ending in one
    (e.g. `wordcrawl.services.sequential_crawl_executor.SequentialCrawlExecutor`).
    """
    name = (implementation_override or "").strip().lower()
    if name in _EXECUTORS:
        return _EXECUTORS[name]
    short = name.rsplit(".", 1)[-1]
    if short in _EXECUTOR_NAMES:
        return _EXECUTOR_NAMES[short]
    raise ValueError(f"Unknown implementationOverride: {implementation_override!r}")


class CrawlerFactory:
    """Builds a ready-to-run, profiled crawler for one `CrawlerConfig`.

    The page source (`fetch`) and the executor (`crawl`) are both wrapped by
    the shared profiler so one report covers the whole run.
    """

    def __init__(
        self,
        *,
        http_service: HttpService,
        profiler: Profiler,
        page_source_factory: Optional[Callable[[CrawlerConfig], PageSource]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.http_service = http_service
        self.profiler = profiler
        self.page_source_factory = page_source_factory or self._default_page_source
        self.clock = clock

    def _default_page_source(self, config: CrawlerConfig) -> PageSource:
        return HttpPageSource(self.http_service, HtmlPageParser(ignored_words=config.ignored_words))

    def create(self, config: CrawlerConfig):
        executor_cls = resolve_executor_class(config.implementation_override)
        page_source = self.profiler.wrap(self.page_source_factory(config), ["fetch"])
        executor = executor_cls(
            config=config,
            page_source=page_source,
            crawl_policy=CrawlPolicy(),
            clock=self.clock,
        )
        logger.debug("Created %s for %r", executor_cls.__name__, config)
        return self.profiler.wrap(executor, ["crawl"])
