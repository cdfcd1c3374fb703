from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from a single page request."""
    status_code: int
    text: str
    content_type: Optional[str] = None
    url: Optional[str] = None
    """Final URL after redirects, when the client reports one"""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
