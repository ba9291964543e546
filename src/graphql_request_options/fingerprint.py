"""Process-stable request fingerprints.

``hash()`` on request options is only stable within one interpreter, since
Python salts string hashes per process. Caches shared between processes
(Redis, memcached, files) need a key that survives restarts, so this module
derives a SHA-256 digest from the same canonical identity that equality uses:
the HTTP method and the sorted multiset of header pairs.
"""

import hashlib
import json
from collections.abc import Iterable

from graphql_request_options.models import Header, HttpMethod
from graphql_request_options.utils.headers import canonical_headers


def compute_fingerprint(
    http_method: HttpMethod | None,
    headers: Iterable[Header] | None,
) -> str:
    """Compute a deterministic fingerprint for a request identity.

    The fingerprint is computed from canonical representations of:
    1. Method: the enum value, or an empty line when unset
    2. Headers: sorted by (name, value), JSON encoded as a list of pairs

    Absent and empty headers encode identically, and header order never
    changes the result. The serializer and caching strategy are not inputs.

    Args:
        http_method: The request method, or None when unset
        headers: Header pairs, or None

    Returns:
        Hexadecimal SHA-256 hash string (64 characters)

    Examples:
        >>> a = compute_fingerprint(HttpMethod.POST, [Header(name="X", value="1")])
        >>> len(a)
        64
    """
    canonical_method = http_method.value if http_method is not None else ""
    canonical = _canonicalize_headers(headers)

    fingerprint_input = "\n".join([canonical_method, canonical])
    return hashlib.sha256(fingerprint_input.encode("utf-8")).hexdigest()


def _canonicalize_headers(headers: Iterable[Header] | None) -> str:
    """Encode sorted header pairs as compact JSON.

    Names and values stay case-sensitive. None encodes as JSON null, which
    cannot collide with any string.
    """
    pairs = [list(pair) for pair in canonical_headers(headers)]
    return json.dumps(pairs, separators=(",", ":"), ensure_ascii=False)
