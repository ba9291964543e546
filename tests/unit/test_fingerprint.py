"""Tests for process-stable request fingerprints."""

import hashlib

from graphql_request_options.fingerprint import _canonicalize_headers, compute_fingerprint
from graphql_request_options.models import Header, HttpMethod
from graphql_request_options.utils.headers import normalize_headers


def _headers(*pairs: tuple[str | None, str | None]) -> tuple[Header, ...]:
    result = normalize_headers(list(pairs))
    assert result is not None
    return result


class TestComputeFingerprint:
    """Tests for the main compute_fingerprint function."""

    def test_same_identity_produces_same_fingerprint(self) -> None:
        headers = _headers(("Accept", "application/json"))

        fp1 = compute_fingerprint(HttpMethod.POST, headers)
        fp2 = compute_fingerprint(HttpMethod.POST, headers)

        assert fp1 == fp2
        assert len(fp1) == 64

    def test_known_digest(self) -> None:
        """The digest is a plain function of its inputs, stable across processes."""
        expected = hashlib.sha256('POST\n[["X","1"]]'.encode("utf-8")).hexdigest()

        assert compute_fingerprint(HttpMethod.POST, _headers(("X", "1"))) == expected

    def test_different_methods_produce_different_fingerprints(self) -> None:
        headers = _headers(("Accept", "application/json"))

        assert compute_fingerprint(HttpMethod.GET, headers) != compute_fingerprint(
            HttpMethod.POST, headers
        )

    def test_unset_method_differs_from_post(self) -> None:
        assert compute_fingerprint(None, None) != compute_fingerprint(HttpMethod.POST, None)

    def test_header_order_independence(self) -> None:
        fp1 = compute_fingerprint(HttpMethod.GET, _headers(("X", "1"), ("Y", "2")))
        fp2 = compute_fingerprint(HttpMethod.GET, _headers(("Y", "2"), ("X", "1")))

        assert fp1 == fp2

    def test_absent_and_empty_headers_match(self) -> None:
        assert compute_fingerprint(HttpMethod.GET, None) == compute_fingerprint(HttpMethod.GET, ())

    def test_duplicate_headers_change_fingerprint(self) -> None:
        once = compute_fingerprint(HttpMethod.GET, _headers(("X", "1")))
        twice = compute_fingerprint(HttpMethod.GET, _headers(("X", "1"), ("X", "1")))

        assert once != twice

    def test_header_values_are_case_sensitive(self) -> None:
        fp1 = compute_fingerprint(HttpMethod.GET, _headers(("X", "abc")))
        fp2 = compute_fingerprint(HttpMethod.GET, _headers(("X", "ABC")))

        assert fp1 != fp2


class TestCanonicalizeHeaders:
    """Tests for _canonicalize_headers helper."""

    def test_empty(self) -> None:
        assert _canonicalize_headers(None) == "[]"
        assert _canonicalize_headers(()) == "[]"

    def test_sorted_compact_json(self) -> None:
        result = _canonicalize_headers(_headers(("B", "2"), ("A", "1")))

        assert result == '[["A","1"],["B","2"]]'

    def test_none_encodes_as_null(self) -> None:
        """A None value cannot collide with the string "null"."""
        with_none = _canonicalize_headers(_headers(("X", None)))
        with_text = _canonicalize_headers(_headers(("X", "null")))

        assert with_none == '[["X",null]]'
        assert with_none != with_text

    def test_unicode_kept_verbatim(self) -> None:
        assert _canonicalize_headers(_headers(("X-Name", "café"))) == '[["X-Name","café"]]'
