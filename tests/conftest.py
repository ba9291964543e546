"""
Pytest configuration and shared fixtures for graphql_request_options tests.
"""

import pytest

from graphql_request_options import HttpMethod, RequestOptions


@pytest.fixture
def sample_headers() -> list[tuple[str, str]]:
    """Provide a sample header list for tests."""
    return [("Accept", "application/json"), ("X-Id", "7")]


@pytest.fixture
def post_options(sample_headers: list[tuple[str, str]]) -> RequestOptions:
    """Provide POST request options carrying the sample headers."""
    return RequestOptions().with_http_method(HttpMethod.POST).with_headers(sample_headers)
