import threading

import pytest

from wordcrawl.domain.page_result import PageResult
from wordcrawl.exceptions import PageFetchError


class FakePageSource:
    """Serves pages from a dict: url -> (word_counts, links)."""

    def __init__(self, pages, failing=(), on_fetch=None):
        self.pages = pages
        self.failing = dict.fromkeys(failing, PageFetchError) if not isinstance(failing, dict) else failing
        self.on_fetch = on_fetch
        self.fetched = []
        self._lock = threading.Lock()

    def fetch(self, url):
        with self._lock:
            self.fetched.append(url)
        if self.on_fetch is not None:
            self.on_fetch(url)
        if url in self.failing:
            exc = self.failing[url]
            if exc is PageFetchError:
                raise PageFetchError(url, "boom")
            raise exc
        if url not in self.pages:
            raise PageFetchError(url, "not found")
        counts, links = self.pages[url]
        return PageResult(word_counts=dict(counts), links=list(links))


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def make_page_source():
    return FakePageSource


@pytest.fixture
def fake_clock():
    return FakeClock()
