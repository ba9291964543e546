"""Utility modules for GraphQL request options."""

from .headers import (
    canonical_headers,
    coerce_header,
    header_sort_key,
    headers_match,
    normalize_headers,
    sorted_headers,
)

__all__ = [
    "coerce_header",
    "normalize_headers",
    "header_sort_key",
    "sorted_headers",
    "headers_match",
    "canonical_headers",
]
