import requests
from typing import Callable

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching crawl pages.

    The client callable is injected (`requests.get` in production) so tests
    can stub it without patching.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """GET `url`; transport failures become `HttpFetchError`, any status is returned."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # headers/url are optional on stub clients; real errors still bubble up
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')
        final_url = getattr(resp, 'url', None)
        if not isinstance(final_url, str) or not final_url:
            final_url = url

        return HttpResponse(resp.status_code, resp.text, ct, final_url)
