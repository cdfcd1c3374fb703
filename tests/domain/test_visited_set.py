import threading

from wordcrawl.domain.visited_set import VisitedSet


def test_url_not_visited_initially():
    visited = VisitedSet()
    assert not visited.is_visited("https://example.com")
    assert len(visited) == 0


def test_claiming_url_makes_it_visited():
    visited = VisitedSet()
    assert visited.claim("https://example.com")
    assert visited.is_visited("https://example.com")


def test_second_claim_of_same_url_fails():
    visited = VisitedSet()
    assert visited.claim("https://example.com")
    assert not visited.claim("https://example.com")
    assert len(visited) == 1


def test_different_urls_tracked_independently():
    visited = VisitedSet()
    visited.claim("https://example.com")
    assert visited.is_visited("https://example.com")
    assert not visited.is_visited("https://other.com")
    assert visited.urls() == frozenset({"https://example.com"})


def test_concurrent_claims_grant_each_url_once():
    visited = VisitedSet()
    wins = []
    lock = threading.Lock()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for i in range(200):
            if visited.claim(f"https://example.com/{i}"):
                with lock:
                    wins.append(i)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(wins) == list(range(200))
    assert len(visited) == 200
