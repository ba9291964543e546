"""Header coercion and comparison utilities for request options.

This module provides functions for:
- Coercing caller-supplied header collections into Header tuples
- Ordering headers by a null-safe (name, value) key
- Comparing header collections as multisets
- Producing the canonical form folded into hashes and fingerprints
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from graphql_request_options.exceptions import InvalidHeaderError
from graphql_request_options.models import Header

HeaderKey = tuple[bool, str, bool, str]


def coerce_header(entry: Any) -> Header:
    """Convert a single header entry into a Header.

    Accepted shapes are Header instances, (name, value) tuples or lists, and
    any object exposing ``name`` and ``value`` attributes.

    Args:
        entry: The header entry to convert.

    Returns:
        The entry as a Header.

    Raises:
        InvalidHeaderError: If the entry is not pair-shaped or a side is
            neither a string nor None.

    Example:
        >>> coerce_header(("Accept", "application/json"))
        Header(name='Accept', value='application/json')
    """
    if isinstance(entry, Header):
        return entry

    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        name, value = entry
    elif not isinstance(entry, (str, bytes)) and hasattr(entry, "name") and hasattr(entry, "value"):
        name, value = entry.name, entry.value
    else:
        raise InvalidHeaderError(f"Header entry is not a name/value pair: {entry!r}", entry=entry)

    for part in (name, value):
        if part is not None and not isinstance(part, str):
            raise InvalidHeaderError(
                f"Header name and value must be strings or None, got {type(part).__name__}",
                entry=entry,
            )

    return Header(name=name, value=value)


def normalize_headers(headers: Iterable[Any] | Mapping[str, str] | None) -> tuple[Header, ...] | None:
    """Copy a header collection into an owned tuple of Header.

    Order and duplicates are preserved. A mapping contributes its items in
    iteration order. None stays None so that "never set" remains visible to
    callers; identity treats it the same as an empty tuple.

    Args:
        headers: Headers as a sequence of pairs, a mapping, or None.

    Returns:
        A tuple of Header, or None.

    Example:
        >>> normalize_headers({"Accept": "application/json"})
        (Header(name='Accept', value='application/json'),)
    """
    if headers is None:
        return None
    if isinstance(headers, Mapping):
        return tuple(coerce_header(item) for item in headers.items())
    if isinstance(headers, (str, bytes)):
        raise InvalidHeaderError("Headers must be a collection of pairs, not a string", entry=headers)
    if isinstance(headers, BaseModel) or (hasattr(headers, "name") and hasattr(headers, "value")):
        raise InvalidHeaderError(
            "Headers must be a collection of pairs, not a single header; wrap it in a list",
            entry=headers,
        )
    return tuple(coerce_header(entry) for entry in headers)


def header_sort_key(header: Header) -> HeaderKey:
    """Null-safe sort key ordering by name, then value.

    Comparison is case-sensitive. None sorts before every string.
    """
    return (
        header.name is not None,
        header.name or "",
        header.value is not None,
        header.value or "",
    )


def sorted_headers(headers: Iterable[Header] | None) -> list[Header]:
    """Return a sorted copy of the headers. None yields an empty list."""
    if not headers:
        return []
    return sorted(headers, key=header_sort_key)


def headers_match(
    headers: tuple[Header, ...] | None,
    other: tuple[Header, ...] | None,
) -> bool:
    """Compare two header collections as multisets of (name, value) pairs.

    Absent and empty collections are equivalent. Duplicate pairs are counted,
    so ``[a, a, b]`` does not match ``[a, b, b]``.

    Args:
        headers: First header tuple, or None.
        other: Second header tuple, or None.

    Returns:
        True if both hold the same pairs regardless of order.

    Example:
        >>> a = normalize_headers([("X", "1"), ("Y", "2")])
        >>> b = normalize_headers([("Y", "2"), ("X", "1")])
        >>> headers_match(a, b)
        True
    """
    if not headers and not other:
        return True
    if not headers or not other:
        return False
    if len(headers) != len(other):
        return False

    for mine, theirs in zip(sorted_headers(headers), sorted_headers(other)):
        if mine.name != theirs.name:
            return False
        if mine.value != theirs.value:
            return False
    return True


def canonical_headers(headers: Iterable[Header] | None) -> tuple[tuple[str | None, str | None], ...]:
    """Sorted (name, value) tuples used for hashing and fingerprinting.

    None and an empty collection produce the same empty tuple.
    """
    return tuple(header.as_tuple() for header in sorted_headers(headers))
