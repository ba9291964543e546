"""
Request options and cache identity for GraphQL clients.

This package provides per-request execution options (deserializer, headers,
HTTP method, caching strategy) whose equality and hash ignore header order,
so equivalent requests share one cache entry.
"""

from graphql_request_options.config import RequestOptionsConfig
from graphql_request_options.exceptions import (
    InvalidHeaderError,
    RequestOptionsError,
    UnsupportedHttpMethodError,
)
from graphql_request_options.fingerprint import compute_fingerprint
from graphql_request_options.models import (
    CachingStrategy,
    DataFetchingPolicy,
    Header,
    HttpMethod,
)
from graphql_request_options.request_options import FrozenRequestOptions, RequestOptions

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "RequestOptions",
    "FrozenRequestOptions",
    "RequestOptionsConfig",
    "CachingStrategy",
    "DataFetchingPolicy",
    "Header",
    "HttpMethod",
    "compute_fingerprint",
    "RequestOptionsError",
    "UnsupportedHttpMethodError",
    "InvalidHeaderError",
]
