from typing import Mapping, NamedTuple, Sequence


class PageResult(NamedTuple):
    """Words and outbound links found on a single page."""
    word_counts: Mapping[str, int]
    links: Sequence[str]
