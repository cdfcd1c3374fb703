from __future__ import annotations

import logging
from typing import Protocol, Tuple
from urllib.parse import urlparse
from urllib.request import url2pathname

from wordcrawl.domain.page_result import PageResult
from wordcrawl.exceptions import PageFetchError
from wordcrawl.services.html_page_parser import HtmlPageParser
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)


class PageSource(Protocol):
    """Fetch a single URL and return its word counts and outbound links.

    Implementations raise on failure; the crawl engine treats any exception as
    "this page contributes nothing".
    """

    def fetch(self, url: str) -> PageResult: ...


class HttpPageSource:
    """Page source backed by `HttpService` for http(s) URLs and the local
    filesystem for `file:` URLs."""

    def __init__(self, http_service: HttpService, parser: HtmlPageParser):
        self._http_service = http_service
        self._parser = parser

    def fetch(self, url: str) -> PageResult:
        if urlparse(url).scheme == "file":
            base_url, body = url, self._read_local(url)
        else:
            base_url, body = self._fetch_remote(url)
        result = self._parser.parse(base_url, body)
        logger.debug("Parsed %s: %d distinct words, %d links", url, len(result.word_counts), len(result.links))
        return result

    def _fetch_remote(self, url: str) -> Tuple[str, str]:
        """Return (base URL for relative links, body); redirects move the base."""
        response = self._http_service.fetch(url)
        if not response.ok:
            raise PageFetchError(url, f"HTTP status {response.status_code}")
        return response.url or url, response.text

    def _read_local(self, url: str) -> str:
        path = url2pathname(urlparse(url).path)
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise PageFetchError(url, str(e)) from e
