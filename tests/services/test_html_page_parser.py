import re

from wordcrawl.services.html_page_parser import HtmlPageParser

HTML = """
<html>
  <head><title>Ignored title</title><style>.x { color: red }</style></head>
  <body>
    <h1>The Quick brown fox</h1>
    <p>The fox's den, the FOX!</p>
    <script>var hidden = "fox";</script>
    <a href="/about">About us</a>
    <a href="https://other.example/page#section">Other</a>
    <a href="mailto:someone@example.com">Mail</a>
    <a href="#top">Top</a>
  </body>
</html>
"""


def test_words_are_normalized_and_counted():
    result = HtmlPageParser().parse("http://example.com/index.html", HTML)
    assert result.word_counts["fox"] == 2
    assert result.word_counts["foxs"] == 1
    assert result.word_counts["the"] == 3
    assert result.word_counts["quick"] == 1
    assert "hidden" not in result.word_counts
    assert "color" not in result.word_counts


def test_ignored_words_use_full_match():
    parser = HtmlPageParser(ignored_words=[re.compile(r"^.{1,3}$")])
    result = parser.parse("http://example.com/", HTML)
    assert "the" not in result.word_counts
    assert "fox" not in result.word_counts
    assert result.word_counts["quick"] == 1
    assert result.word_counts["brown"] == 1


def test_links_are_absolute_without_fragments():
    result = HtmlPageParser().parse("http://example.com/index.html", HTML)
    assert result.links == [
        "http://example.com/about",
        "https://other.example/page",
        "http://example.com/index.html",
    ]


def test_empty_body_yields_empty_result():
    result = HtmlPageParser().parse("http://example.com/", "")
    assert dict(result.word_counts) == {}
    assert list(result.links) == []


def test_document_without_body_uses_whole_text():
    result = HtmlPageParser().parse("http://example.com/", "just some words words")
    assert result.word_counts == {"just": 1, "some": 1, "words": 2}
