"""Prometheus metrics for GraphQL request options.

Hashes are memoized, so a high ratio of hash computations to frozen keys
means builders are being mutated after use or rebuilt per lookup.

Examples:
    Recording a hash computation::

        from graphql_request_options.observability.metrics import record_hash_computation

        record_hash_computation(kind="builder")
"""

from prometheus_client import Counter

# Labels: kind (builder, frozen)
hash_computations = Counter(
    "graphql_request_options_hash_computations_total",
    "Number of request option hashes computed (memo misses)",
    ["kind"],
)

frozen_total = Counter(
    "graphql_request_options_frozen_total",
    "Number of builders finalized into immutable cache keys",
)


def record_hash_computation(kind: str) -> None:
    """Record a hash computed from scratch.

    Args:
        kind: "builder" for RequestOptions, "frozen" for FrozenRequestOptions

    Examples:
        >>> record_hash_computation("frozen")
    """
    hash_computations.labels(kind=kind).inc()


def record_freeze() -> None:
    """Record a builder finalized into a FrozenRequestOptions."""
    frozen_total.inc()
