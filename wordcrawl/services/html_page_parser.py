import re
from collections import Counter
from typing import Callable, Optional, Sequence
from urllib.parse import urldefrag, urljoin

from bs4 import BeautifulSoup

from wordcrawl.domain.page_result import PageResult

_WHITESPACE = re.compile(r"\s+")
_NON_WORD_CHARACTERS = re.compile(r"\W")


class HtmlPageParser:
    """Turn an HTML document into word counts and absolute outbound links.

    Words are the whitespace-separated tokens of the page text with non-word
    characters removed, lower-cased. A word that fully matches any of
    `ignored_words` is not counted.
    """

    def __init__(
        self,
        ignored_words: Sequence[re.Pattern] = (),
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.ignored_words = tuple(ignored_words)
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def parse(self, base_url: str, html: Optional[str]) -> PageResult:
        if not html:
            return PageResult(word_counts={}, links=[])
        soup = self._soup_factory(html)
        return PageResult(word_counts=self._count_words(soup), links=self._extract_links(base_url, soup))

    def _is_ignored(self, word: str) -> bool:
        return any(p.fullmatch(word) for p in self.ignored_words)

    def _count_words(self, soup: BeautifulSoup) -> dict:
        for element in soup.find_all(["script", "style", "noscript"]):
            element.decompose()
        root = soup.body if soup.body is not None else soup
        text = root.get_text(separator=" ")

        counts: Counter = Counter()
        for token in _WHITESPACE.split(text):
            word = _NON_WORD_CHARACTERS.sub("", token).lower()
            if not word or self._is_ignored(word):
                continue
            counts[word] += 1
        return dict(counts)

    def _extract_links(self, base_url: str, soup: BeautifulSoup) -> list:
        links = []
        for a in soup.find_all("a", href=True):
            href = a.get("href", "").strip()
            if not href or href.startswith(("javascript:", "mailto:")):
                continue
            abs_url, _fragment = urldefrag(urljoin(base_url, href))
            if abs_url:
                links.append(abs_url)
        return links
