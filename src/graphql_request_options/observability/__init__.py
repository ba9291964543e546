"""Observability utilities for GraphQL request options.

This package provides:
- Structured logging with contextual information
- Prometheus counters for hash memoization and key finalization
"""

from graphql_request_options.observability.logging import configure_logging, get_logger
from graphql_request_options.observability.metrics import (
    record_freeze,
    record_hash_computation,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "record_hash_computation",
    "record_freeze",
]
