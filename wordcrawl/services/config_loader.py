import os
from typing import Optional, TextIO

import yaml

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigValidationError, FileOperationError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser


class ConfigLoader:
    """Filesystem IO for crawl config files.

    Files may be JSON or YAML; `yaml.safe_load` reads both.
    """

    def __init__(self, parser: Optional[CrawlerConfigParser] = None):
        self.parser = parser or CrawlerConfigParser()

    def read(self, stream: TextIO) -> CrawlerConfig:
        """Parse config from an open text stream. The stream is left open."""
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise ConfigValidationError("<document>", f"not valid JSON/YAML: {e}") from e
        if data is None:
            data = {}
        return self.parser.parse(data)

    def load(self, path) -> CrawlerConfig:
        full_path = os.fspath(path)
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                return self.read(f)
        except OSError as e:
            raise FileOperationError("read", full_path, e) from e
