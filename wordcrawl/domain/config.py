from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from re import Pattern
from typing import Iterable, Union

from wordcrawl.exceptions import ConfigValidationError

PatternLike = Union[str, Pattern]


def _unique(values: Iterable) -> tuple:
    # insertion-ordered de-duplication
    return tuple(dict.fromkeys(values))


def _compile_patterns(field_name: str, patterns: Iterable[PatternLike]) -> tuple[Pattern, ...]:
    compiled = []
    for p in _unique(patterns or ()):
        if isinstance(p, re.Pattern):
            compiled.append(p)
            continue
        if not isinstance(p, str):
            raise ConfigValidationError(field_name, f"pattern must be a string, got {type(p).__name__}")
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigValidationError(field_name, f"invalid pattern {p!r}: {e}") from e
    return tuple(compiled)


@dataclass(frozen=True)
class CrawlerConfig:
    """Settings for a single crawl.

    Validation happens at construction, so a `CrawlerConfig` that exists is
    always safe to crawl with. URL and word patterns are compiled once here and
    matched against whole strings by their consumers.
    """

    start_pages: tuple[str, ...] = ()
    ignored_urls: tuple[Pattern, ...] = ()
    ignored_words: tuple[Pattern, ...] = ()
    parallelism: int = -1
    implementation_override: str = ""
    max_depth: int = 0
    timeout_seconds: int = 1
    popular_word_count: int = 0
    profile_output_path: str = ""
    result_path: str = ""

    def __post_init__(self):
        for name in ("parallelism", "max_depth", "timeout_seconds", "popular_word_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigValidationError(name, f"must be an integer, got {value!r}")
        if self.max_depth < 0:
            raise ConfigValidationError("max_depth", "cannot be negative")
        if self.timeout_seconds <= 0:
            raise ConfigValidationError("timeout_seconds", "must be positive")
        if self.popular_word_count < 0:
            raise ConfigValidationError("popular_word_count", "cannot be negative")

        pages = self.start_pages
        if isinstance(pages, str):
            pages = [pages]
        for page in pages or ():
            if not isinstance(page, str):
                raise ConfigValidationError("start_pages", f"URL must be a string, got {page!r}")
        object.__setattr__(self, "start_pages", _unique(pages or ()))
        object.__setattr__(self, "ignored_urls", _compile_patterns("ignored_urls", self.ignored_urls))
        object.__setattr__(self, "ignored_words", _compile_patterns("ignored_words", self.ignored_words))
        object.__setattr__(self, "implementation_override", (self.implementation_override or "").strip())
        object.__setattr__(self, "profile_output_path", self.profile_output_path or "")
        object.__setattr__(self, "result_path", self.result_path or "")

    @property
    def timeout(self) -> timedelta:
        return timedelta(seconds=self.timeout_seconds)

    def __repr__(self):
        return (
            f"<CrawlerConfig start_pages={len(self.start_pages)} max_depth={self.max_depth} "
            f"timeout={self.timeout_seconds}s parallelism={self.parallelism}>"
        )
