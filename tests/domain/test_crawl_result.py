import pytest

from wordcrawl.domain.crawl_result import CrawlResult


def test_build_keeps_given_order():
    result = CrawlResult.build([("zebra", 3), ("apple", 2)], 4)
    assert list(result.word_counts) == ["zebra", "apple"]
    assert result.urls_visited == 4


def test_word_counts_are_read_only():
    result = CrawlResult.build([("dog", 1)], 1)
    with pytest.raises(TypeError):
        result.word_counts["dog"] = 2


def test_empty_result():
    result = CrawlResult.empty()
    assert dict(result.word_counts) == {}
    assert result.urls_visited == 0


def test_to_dict_uses_wire_field_names():
    result = CrawlResult.build([("b", 2), ("a", 1)], 2)
    d = result.to_dict()
    assert d == {"wordCounts": {"b": 2, "a": 1}, "urlsVisited": 2}
    assert list(d["wordCounts"]) == ["b", "a"]
