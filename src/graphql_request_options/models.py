"""Value types carried by GraphQL request options.

This module provides the small immutable building blocks that request options
are assembled from: the HTTP method selector, header pairs and the caching
directive read by the cache layer.

Examples:
    Building headers and a caching strategy::

        from graphql_request_options.models import (
            CachingStrategy,
            DataFetchingPolicy,
            Header,
        )

        accept = Header(name="Accept", value="application/json")
        strategy = CachingStrategy(
            cache_name="products",
            data_fetching_policy=DataFetchingPolicy.CACHE_FIRST,
        )
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from graphql_request_options.exceptions import UnsupportedHttpMethodError


class HttpMethod(str, Enum):
    """HTTP method used to send a GraphQL request.

    Attributes:
        GET: Query, operation name and variables are URL-encoded.
        POST: The request is sent as a JSON body. This is the client default.
    """

    GET = "GET"
    POST = "POST"

    @classmethod
    def parse(cls, value: Any) -> "HttpMethod":
        """Coerce a method or a case-insensitive method name.

        Args:
            value: An HttpMethod or a string such as "get" or "POST".

        Returns:
            The matching HttpMethod.

        Raises:
            UnsupportedHttpMethodError: If the value is not GET or POST.

        Examples:
            >>> HttpMethod.parse("get")
            <HttpMethod.GET: 'GET'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise UnsupportedHttpMethodError(
            f"Unsupported HTTP method: {value!r}. Valid methods are: GET, POST",
            method=value,
        )


class DataFetchingPolicy(str, Enum):
    """How the cache layer treats a request.

    Attributes:
        CACHE_FIRST: Serve from cache when an entry exists, else fetch and store.
        NETWORK_ONLY: Always fetch, never read or write the cache.
    """

    CACHE_FIRST = "CACHE_FIRST"
    NETWORK_ONLY = "NETWORK_ONLY"


class Header(BaseModel):
    """A single HTTP header name/value pair.

    Either side may be None. Such entries are kept as-is and compared
    null-safely rather than rejected.
    """

    name: str | None = Field(
        ...,
        description="Header name, compared case-sensitively",
        examples=["Accept", "Authorization"],
    )
    value: str | None = Field(
        ...,
        description="Header value",
        examples=["application/json"],
    )

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[str | None, str | None]:
        return (self.name, self.value)


class CachingStrategy(BaseModel):
    """Caching directive read by the cache layer.

    The strategy decides whether and where a response is cached. It is not
    part of request identity: two requests that differ only in their caching
    strategy map to the same cache key.

    Attributes:
        cache_name: Name of the cache to use. No name means no caching.
        data_fetching_policy: Whether the cache may serve the request.
    """

    cache_name: str | None = Field(
        default=None,
        description="Name of the cache the response is stored in",
        examples=["products", "categories"],
    )
    data_fetching_policy: DataFetchingPolicy = Field(
        default=DataFetchingPolicy.CACHE_FIRST,
        description="Whether the cache may serve the request",
    )

    model_config = {"frozen": True}

    @property
    def bypasses_cache(self) -> bool:
        """True when the cache must neither be read nor written."""
        return (
            self.cache_name is None
            or self.data_fetching_policy is DataFetchingPolicy.NETWORK_ONLY
        )
