"""Scenario 2: Concurrent Lookup Conformance Tests

Request options shared between worker threads:
- Racing first hash() calls on one builder agree
- Frozen keys are looked up from many threads without divergence
- Equivalent options built per thread all resolve to one entry
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from graphql_request_options import HttpMethod, RequestOptions

WORKERS = 16


def _options(order: int) -> RequestOptions:
    pairs = [("Accept", "application/json"), ("Store", "en"), ("X-Id", "7")]
    shift = order % len(pairs)
    rotated = pairs[shift:] + pairs[:shift]
    return RequestOptions().with_http_method(HttpMethod.POST).with_headers(rotated)


class TestConcurrentLookup:
    """Thread-safety of hashing and lookups."""

    def test_racing_first_hash_calls_agree(self) -> None:
        shared = _options(0)
        barrier = threading.Barrier(WORKERS)

        def compute(_: int) -> int:
            barrier.wait()
            return hash(shared)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = set(pool.map(compute, range(WORKERS)))

        assert results == {hash(_options(1))}

    def test_frozen_key_shared_across_threads(self) -> None:
        key = _options(0).freeze()
        cache = {key: "response"}

        def lookup(order: int) -> str:
            return cache[_options(order)]

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(lookup, range(WORKERS * 4)))

        assert results == ["response"] * (WORKERS * 4)

    def test_per_thread_builders_collapse_to_one_entry(self) -> None:
        cache: dict[object, int] = {}
        lock = threading.Lock()

        def store(order: int) -> None:
            key = _options(order).freeze()
            with lock:
                cache.setdefault(key, order)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            list(pool.map(store, range(WORKERS * 4)))

        assert len(cache) == 1
