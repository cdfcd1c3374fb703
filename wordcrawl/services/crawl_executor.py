import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.exceptions import HttpFetchError, PageFetchError
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.page_source import PageSource
from wordcrawl.services.word_ranker import rank

logger = logging.getLogger(__name__)


def available_parallelism() -> int:
    return os.cpu_count() or 1


def clamp_parallelism(hint: Optional[int], available: Optional[int] = None) -> int:
    """Fit a parallelism hint into 1..available; non-positive or excessive hints get `available`."""
    available = available or available_parallelism()
    if hint is None or hint <= 0 or hint > available:
        return available
    return hint


class BaseCrawlExecutor:
    """Traversal rules and result assembly shared by the crawl executors.

    Subclasses decide how the steps returned by `visit` are scheduled.
    """

    def __init__(
        self,
        *,
        config: CrawlerConfig,
        page_source: PageSource,
        crawl_policy: Optional[CrawlPolicy] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if config is None:
            raise ValueError("config is required for crawl")
        self.config = config
        self.page_source = page_source
        self.crawl_policy = crawl_policy or CrawlPolicy()
        self.clock = clock

    @property
    def max_parallelism(self) -> int:
        return available_parallelism()

    def new_context(self) -> CrawlContext:
        return CrawlContext(self.config, clock=self.clock)

    def visit(self, url: str, depth: int, context: CrawlContext) -> Sequence[str]:
        """Run one traversal step up to (not including) its children.

        Returns the links to continue with at `depth - 1`, or an empty
        sequence when this branch ends here.
        """
        if self.crawl_policy.should_skip(url, depth, context):
            return ()

        try:
            page = self.page_source.fetch(url)
        except (HttpFetchError, PageFetchError) as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return ()
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return ()

        context.merge_counts(page.word_counts)
        logger.info("Fetched %s -> %d distinct words, %d links", url, len(page.word_counts), len(page.links))

        if depth - 1 <= 0:
            return ()
        return list(page.links)

    def build_result(self, context: CrawlContext) -> CrawlResult:
        counts = context.counts.snapshot()
        if not counts:
            return CrawlResult.build((), context.urls_visited)
        return CrawlResult.build(rank(counts, self.config.popular_word_count), context.urls_visited)

    def crawl(self, start_urls: Iterable[str]) -> CrawlResult:
        raise NotImplementedError


class _JoinCounter:
    """Outstanding work for one traversal subtree.

    Each unit of work calls `done()` once. When the count reaches zero the
    parent counter is released in turn, or `on_complete` runs at the top.
    No thread ever waits on a counter, so a full pool cannot deadlock.
    """

    def __init__(self, pending: int = 1, parent: Optional["_JoinCounter"] = None, on_complete: Optional[Callable[[], None]] = None):
        self._lock = threading.Lock()
        self._pending = pending
        self._parent = parent
        self._on_complete = on_complete

    def add(self, count: int = 1) -> None:
        with self._lock:
            self._pending += count

    def _release(self) -> bool:
        with self._lock:
            self._pending -= 1
            return self._pending == 0

    def done(self) -> None:
        # walk up iteratively; link chains can be far deeper than the recursion limit
        node = self
        while node._release():
            if node._parent is None:
                if node._on_complete is not None:
                    node._on_complete()
                return
            node = node._parent


class ParallelCrawlExecutor(BaseCrawlExecutor):
    """Crawls on a bounded thread pool.

    Every traversal step is its own pool task. A step spawns its children and
    returns; join counters carry completion back up the tree, so a subtree is
    finished only when every descendant has finished. `crawl` waits for all
    roots before reading the shared counts.
    """

    def __init__(self, *, config: CrawlerConfig, page_source: PageSource, crawl_policy: Optional[CrawlPolicy] = None, clock: Callable[[], float] = time.monotonic, parallelism: Optional[int] = None):
        super().__init__(config=config, page_source=page_source, crawl_policy=crawl_policy, clock=clock)
        hint = parallelism if parallelism is not None else config.parallelism
        self.parallelism = clamp_parallelism(hint, self.max_parallelism)

    def crawl(self, start_urls: Iterable[str]) -> CrawlResult:
        """Crawl from every start URL and return the ranked result.

        Page-source failures only end their own branch. An exception raised by
        the engine itself, such as a policy bug, is a programming
        error rather than a crawl outcome: it is re-raised here once every
        in-flight step has finished, instead of returning a partial snapshot.
        """
        start_urls = list(start_urls)
        context = self.new_context()
        if not start_urls:
            return self.build_result(context)

        logger.info("Starting crawl of %d start page(s) with %d worker(s)", len(start_urls), self.parallelism)
        run = _CrawlRun(context)
        with ThreadPoolExecutor(max_workers=self.parallelism, thread_name_prefix="wordcrawl") as pool:
            top = _JoinCounter(pending=len(start_urls), on_complete=run.finished.set)
            for url in start_urls:
                self._spawn(pool, url, self.config.max_depth, top, run)
            run.finished.wait()

        if run.failures:
            raise run.failures[0]

        result = self.build_result(context)
        logger.info("Crawl finished: %d URL(s) visited, %d word(s) ranked", result.urls_visited, len(result.word_counts))
        return result

    def _spawn(self, pool: ThreadPoolExecutor, url: str, depth: int, parent: _JoinCounter, run: "_CrawlRun") -> None:
        """Schedule a child step; `parent` must already count it."""
        join = _JoinCounter(parent=parent)
        try:
            future = pool.submit(self._run_step, pool, url, depth, join, run)
        except RuntimeError:
            join.done()
            raise
        future.add_done_callback(run.check_step)

    def _run_step(self, pool: ThreadPoolExecutor, url: str, depth: int, join: _JoinCounter, run: "_CrawlRun") -> None:
        try:
            for link in self.visit(url, depth, run.context):
                join.add(1)
                self._spawn(pool, link, depth - 1, join, run)
        except Exception as e:
            logger.exception("Traversal step failed for %s", url)
            run.fail(e)
        finally:
            join.done()


class _CrawlRun:
    """Per-call state of a parallel crawl: shared context, completion barrier and engine failures."""

    def __init__(self, context: CrawlContext):
        self.context = context
        self.finished = threading.Event()
        self.failures: List[BaseException] = []
        self._lock = threading.Lock()

    def fail(self, error: BaseException) -> None:
        with self._lock:
            self.failures.append(error)

    def check_step(self, future: Future) -> None:
        # a step that escaped its own handling can no longer be joined; release the barrier
        error = future.exception()
        if error is None:
            return
        logger.error("Traversal step crashed: %s", error, exc_info=error)
        self.fail(error)
        self.finished.set()
