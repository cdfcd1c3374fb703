import json
import logging
import os
import sys
from typing import TextIO, Union

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.exceptions import FileOperationError

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Writes a CrawlResult as JSON, keeping `wordCounts` in rank order."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_json(self, result: CrawlResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent)

    def write(self, result: CrawlResult, destination: Union[str, os.PathLike, TextIO, None] = None) -> None:
        """Write to a path (overwriting, parents created), a text stream, or stdout.

        Streams are flushed but never closed.
        """
        if result is None:
            raise ValueError("result is required")
        if destination is None:
            destination = sys.stdout
        if hasattr(destination, "write"):
            destination.write(self.to_json(result))
            destination.write("\n")
            destination.flush()
            return

        path = os.fspath(destination)
        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.to_json(result))
                f.write("\n")
        except OSError as e:
            raise FileOperationError("write", path, e) from e
        logger.info("Wrote crawl result to %s", path)
