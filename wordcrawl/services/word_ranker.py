from typing import List, Mapping, Tuple


def _rank_key(item: Tuple[str, int]):
    word, count = item
    # more frequent first, then longer, then alphabetical
    return (-count, -len(word), word)


def rank(counts: Mapping[str, int], limit: int) -> List[Tuple[str, int]]:
    """Return the top `limit` (word, count) pairs of `counts` in rank order.

    Order is total: count descending, then word length descending, then the
    word itself ascending. Input iteration order never affects the output.
    """
    if limit < 0:
        raise ValueError("limit cannot be negative")
    return sorted(counts.items(), key=_rank_key)[:limit]
