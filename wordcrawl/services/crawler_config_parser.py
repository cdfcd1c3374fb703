from typing import Any, Mapping

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigValidationError

# file key -> CrawlerConfig field
_FIELDS = {
    "startPages": "start_pages",
    "ignoredUrls": "ignored_urls",
    "ignoredWords": "ignored_words",
    "parallelism": "parallelism",
    "implementationOverride": "implementation_override",
    "maxDepth": "max_depth",
    "timeoutSeconds": "timeout_seconds",
    "popularWordCount": "popular_word_count",
    "profileOutputPath": "profile_output_path",
    "resultPath": "result_path",
}

_LIST_FIELDS = ("startPages", "ignoredUrls", "ignoredWords")
_STR_FIELDS = ("implementationOverride", "profileOutputPath", "resultPath")


class CrawlerConfigParser:
    """Parse a JSON/YAML dict into a CrawlerConfig.

    Responsibility: schema/validation for config documents.
    It does NOT perform filesystem IO.
    """

    def parse(self, data: Mapping[str, Any]) -> CrawlerConfig:
        if not isinstance(data, Mapping):
            raise ConfigValidationError("<root>", f"expected a mapping, got {type(data).__name__}")

        unknown = sorted(set(data) - set(_FIELDS))
        if unknown:
            raise ConfigValidationError(unknown[0], "unknown field")

        kwargs = {}
        for key, field_name in _FIELDS.items():
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if key in _LIST_FIELDS:
                if isinstance(value, str):
                    value = [value]
                if not isinstance(value, (list, tuple)):
                    raise ConfigValidationError(key, "must be a list of strings")
            elif key in _STR_FIELDS and not isinstance(value, str):
                raise ConfigValidationError(key, "must be a string")
            kwargs[field_name] = value
        return CrawlerConfig(**kwargs)

    def to_dict(self, config: CrawlerConfig) -> dict:
        """Inverse of `parse`, with patterns rendered back to their source strings."""
        return {
            "startPages": list(config.start_pages),
            "ignoredUrls": [p.pattern for p in config.ignored_urls],
            "ignoredWords": [p.pattern for p in config.ignored_words],
            "parallelism": config.parallelism,
            "implementationOverride": config.implementation_override,
            "maxDepth": config.max_depth,
            "timeoutSeconds": config.timeout_seconds,
            "popularWordCount": config.popular_word_count,
            "profileOutputPath": config.profile_output_path,
            "resultPath": config.result_path,
        }
