"""Custom exceptions for WordCrawl."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class PageFetchError(Exception):
    """Raised when a page was reached but cannot be used (non-2xx status, unreadable file)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Page fetch failed for {url}: {reason}")


class ConfigValidationError(ValueError):
    """Raised when crawler configuration values are out of range or malformed."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid config field '{field}': {reason}")


class ProfilerConfigurationError(ValueError):
    """Raised when a component is wrapped without any operation to measure."""


class FileOperationError(Exception):
    """Raised when reading or writing a config, result or report file fails."""

    def __init__(self, operation: str, path: str, original: Exception):
        self.operation = operation
        self.path = path
        self.original = original
        super().__init__(f"Failed to {operation} '{path}': {original}")
