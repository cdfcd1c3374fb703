from unittest.mock import Mock

import pytest

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.profiler.profiler import Profiler
from wordcrawl.profiler.proxy import ProfilingProxy
from wordcrawl.services.crawl_executor import ParallelCrawlExecutor
from wordcrawl.services.crawler_factory import CrawlerFactory, resolve_executor_class
from wordcrawl.services.page_source import HttpPageSource
from wordcrawl.services.sequential_crawl_executor import SequentialCrawlExecutor


@pytest.mark.parametrize(
    "override, expected",
    [
        ("", ParallelCrawlExecutor),
        (None, ParallelCrawlExecutor),
        ("parallel", ParallelCrawlExecutor),
        ("Sequential", SequentialCrawlExecutor),
        ("SequentialCrawlExecutor", SequentialCrawlExecutor),
        ("wordcrawl.services.sequential_crawl_executor.SequentialCrawlExecutor", SequentialCrawlExecutor),
    ],
)
def test_resolve_executor_class(override, expected):
    assert resolve_executor_class(override) is expected


def test_unknown_override_rejected():
    with pytest.raises(ValueError):
        resolve_executor_class("quantum")


def test_create_wraps_executor_and_page_source_with_profiler():
    profiler = Profiler()
    factory = CrawlerFactory(http_service=Mock(), profiler=profiler)
    cfg = CrawlerConfig(implementation_override="sequential", ignored_words=["^a$"])

    crawler = factory.create(cfg)

    assert isinstance(crawler, ProfilingProxy)
    assert crawler.max_parallelism == 1
    assert isinstance(crawler.page_source, ProfilingProxy)
    assert isinstance(crawler.page_source._delegate, HttpPageSource)


def test_profiled_crawl_records_crawl_and_fetch(make_page_source):
    profiler = Profiler()
    pages = {"A": ({"hello": 1}, ["B"]), "B": ({"world": 1}, [])}
    factory = CrawlerFactory(
        http_service=Mock(),
        profiler=profiler,
        page_source_factory=lambda cfg: make_page_source(pages),
    )
    cfg = CrawlerConfig(max_depth=2, timeout_seconds=30, popular_word_count=5)

    result = factory.create(cfg).crawl(["A"])

    assert dict(result.word_counts) == {"hello": 1, "world": 1}
    report = profiler.report()
    assert "ParallelCrawlExecutor#crawl took" in report
    assert "FakePageSource#fetch took" in report


def test_executor_names_resolve():
    from wordcrawl.services.crawler_factory import executor_names

    names = executor_names()
    assert names == ["parallel", "sequential"]
    for name in names:
        assert resolve_executor_class(name) is not None
