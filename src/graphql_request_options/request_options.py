"""Per-request options for GraphQL requests and their cache identity.

RequestOptions carries what a single GraphQL request needs beyond the query
itself: a custom response deserializer, extra HTTP headers, the HTTP method
and a caching directive. It also serves as the key the cache layer files
responses under, so equality and hashing look only at what identifies a
request:

- the HTTP method, compared by value
- the headers, compared as a multiset of (name, value) pairs

Header order, the collection the headers came in and the order of the
``with_*`` calls do not matter. The serializer and caching strategy never
take part in identity; they decide how a response is decoded and whether it
is cached, not which entry it is.

Examples:
    Two equivalent requests::

        from graphql_request_options import HttpMethod, RequestOptions

        a = (
            RequestOptions()
            .with_http_method(HttpMethod.POST)
            .with_headers([("Accept", "application/json"), ("X-Id", "7")])
        )
        b = (
            RequestOptions()
            .with_headers([("X-Id", "7"), ("Accept", "application/json")])
            .with_http_method("post")
        )
        assert a == b and hash(a) == hash(b)

    Handing options to a shared cache::

        key = a.freeze()
        cache[key] = response
        assert cache[b] is response
"""

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from graphql_request_options.config import RequestOptionsConfig
from graphql_request_options.exceptions import UnsupportedHttpMethodError
from graphql_request_options.fingerprint import compute_fingerprint
from graphql_request_options.models import CachingStrategy, Header, HttpMethod
from graphql_request_options.observability.logging import get_logger
from graphql_request_options.observability.metrics import (
    record_freeze,
    record_hash_computation,
)
from graphql_request_options.utils.headers import (
    canonical_headers,
    headers_match,
    normalize_headers,
)

logger = get_logger(__name__)

Deserializer = Callable[[str | bytes], Any]
HeadersInput = Iterable[Any] | Mapping[str, str] | None


def _identity_hash(http_method: HttpMethod | None, headers: tuple[Header, ...] | None) -> int:
    # None and () fold the same empty tuple
    return hash((http_method, canonical_headers(headers)))


def _same_identity(
    options: Union["RequestOptions", "FrozenRequestOptions"],
    other: Union["RequestOptions", "FrozenRequestOptions"],
) -> bool:
    if options.http_method != other.http_method:
        return False
    return headers_match(options.headers, other.headers)


class RequestOptions:
    """Fluent, mutable options for a single GraphQL request.

    Every ``with_*`` method sets one field and returns the same instance, so
    calls chain. The hash is computed lazily and memoized; setting the method
    or the headers drops the memo, so ``hash()`` always reflects them.

    A builder that is still being configured should not sit in a dict or set.
    Use ``freeze()`` to obtain an immutable key once configuration is done.
    """

    def __init__(self) -> None:
        self._serializer: Deserializer | None = None
        self._headers: tuple[Header, ...] | None = None
        self._http_method: HttpMethod | None = None
        self._caching_strategy: CachingStrategy | None = None
        self._hash: int | None = None

    @classmethod
    def from_config(cls, config: RequestOptionsConfig) -> "RequestOptions":
        """Start from client-wide defaults.

        Args:
            config: Defaults for method, headers and caching.

        Returns:
            A new builder with those defaults applied.
        """
        return (
            cls()
            .with_http_method(config.default_http_method)
            .with_headers(config.default_headers or None)
            .with_caching_strategy(config.caching_strategy())
        )

    def with_serializer(self, serializer: Deserializer | None) -> "RequestOptions":
        """Set the deserializer used for the JSON response.

        Only needed when the response cannot be decoded by ``json.loads`` or
        needs custom decoding. None restores the default.

        Args:
            serializer: Callable taking the raw payload and returning the
                decoded value.

        Returns:
            This RequestOptions object.
        """
        self._serializer = serializer
        return self

    def with_headers(self, headers: HeadersInput) -> "RequestOptions":
        """Set the HTTP headers sent with the request.

        The headers are copied, so later changes to the caller's collection
        have no effect. Duplicates are kept.

        Args:
            headers: Header pairs as Header objects, (name, value) tuples,
                objects with ``name`` and ``value`` attributes, or a mapping.
                None means no headers.

        Returns:
            This RequestOptions object.

        Comparing and hashing never raise for any header content, None
        included. Malformed input is the one exception: entries that are not
        string-or-None pairs, or a single header passed without a list, are
        rejected here so they are never stored.

        Raises:
            InvalidHeaderError: If an entry is not a name/value pair.
        """
        self._headers = normalize_headers(headers)
        self._hash = None
        return self

    def with_http_method(self, http_method: HttpMethod | str | None) -> "RequestOptions":
        """Set the HTTP method, GET or POST.

        With GET the transport URL-encodes the query, operation name and
        variables. When unset the transport sends a POST.

        Args:
            http_method: An HttpMethod, its name in any case, or None.

        Returns:
            This RequestOptions object.

        Raises:
            UnsupportedHttpMethodError: For any method other than GET or POST.
        """
        if http_method is None:
            self._http_method = None
        else:
            try:
                self._http_method = HttpMethod.parse(http_method)
            except UnsupportedHttpMethodError as e:
                logger.warning("request_options.http_method_rejected", method=repr(e.method))
                raise
        self._hash = None
        return self

    def with_caching_strategy(self, caching_strategy: CachingStrategy | None) -> "RequestOptions":
        """Set the caching directive read by the cache layer.

        Args:
            caching_strategy: Cache name and data fetching policy, or None.

        Returns:
            This RequestOptions object.
        """
        self._caching_strategy = caching_strategy
        return self

    @property
    def serializer(self) -> Deserializer | None:
        return self._serializer

    @property
    def headers(self) -> tuple[Header, ...] | None:
        return self._headers

    @property
    def http_method(self) -> HttpMethod | None:
        return self._http_method

    @property
    def caching_strategy(self) -> CachingStrategy | None:
        return self._caching_strategy

    @property
    def effective_http_method(self) -> HttpMethod:
        """The method the transport uses: the configured one, else POST."""
        return self._http_method or HttpMethod.POST

    def deserialize(self, payload: str | bytes) -> Any:
        """Decode a response payload with the custom serializer or json.loads."""
        return (self._serializer or json.loads)(payload)

    def fingerprint(self) -> str:
        """Process-stable SHA-256 digest of the request identity."""
        return compute_fingerprint(self._http_method, self._headers)

    def freeze(self) -> "FrozenRequestOptions":
        """Snapshot the current fields into an immutable cache key.

        The snapshot compares and hashes equal to this builder, so either can
        be used to look up entries stored under the other.
        """
        frozen = FrozenRequestOptions(
            http_method=self._http_method,
            headers=self._headers,
            serializer=self._serializer,
            caching_strategy=self._caching_strategy,
        )
        record_freeze()
        logger.debug(
            "request_options.frozen",
            http_method=self._http_method.value if self._http_method else None,
            header_count=len(self._headers or ()),
        )
        return frozen

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, (RequestOptions, FrozenRequestOptions)):
            return NotImplemented
        if self._hash is not None and other._hash is not None and self._hash != other._hash:
            return False
        return _same_identity(self, other)

    def __hash__(self) -> int:
        if self._hash is not None:
            return self._hash
        value = _identity_hash(self._http_method, self._headers)
        # Racing threads compute and store the same value
        self._hash = value
        record_hash_computation("builder")
        return value

    def __repr__(self) -> str:
        return (
            f"RequestOptions(http_method={self._http_method!r}, headers={self._headers!r}, "
            f"caching_strategy={self._caching_strategy!r})"
        )


@dataclass(frozen=True, eq=False)
class FrozenRequestOptions:
    """Immutable request options with a precomputed hash.

    Produced by ``RequestOptions.freeze()``. Safe to share across threads and
    to keep in dicts and sets for as long as needed. Headers and method are
    normalized on construction exactly as the builder normalizes them.
    """

    http_method: HttpMethod | None = None
    headers: tuple[Header, ...] | None = None
    serializer: Deserializer | None = None
    caching_strategy: CachingStrategy | None = None
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.http_method is not None:
            object.__setattr__(self, "http_method", HttpMethod.parse(self.http_method))
        object.__setattr__(self, "headers", normalize_headers(self.headers))
        object.__setattr__(self, "_hash", _identity_hash(self.http_method, self.headers))
        record_hash_computation("frozen")

    @property
    def effective_http_method(self) -> HttpMethod:
        return self.http_method or HttpMethod.POST

    def deserialize(self, payload: str | bytes) -> Any:
        return (self.serializer or json.loads)(payload)

    def fingerprint(self) -> str:
        return compute_fingerprint(self.http_method, self.headers)

    def thaw(self) -> RequestOptions:
        """Return a new builder holding the same fields."""
        return (
            RequestOptions()
            .with_http_method(self.http_method)
            .with_headers(self.headers)
            .with_serializer(self.serializer)
            .with_caching_strategy(self.caching_strategy)
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, (RequestOptions, FrozenRequestOptions)):
            return NotImplemented
        if other._hash is not None and self._hash != other._hash:
            return False
        return _same_identity(self, other)

    def __hash__(self) -> int:
        return self._hash
