"""Custom exceptions for GraphQL request options.

Only construction can fail: an unsupported HTTP method or a header entry that
is not a name/value pair is rejected when it is handed to the builder.
Comparing and hashing options never raise.

Examples:
    Rejecting an unsupported method::

        from graphql_request_options import RequestOptions
        from graphql_request_options.exceptions import UnsupportedHttpMethodError

        try:
            RequestOptions().with_http_method("PUT")
        except UnsupportedHttpMethodError as e:
            logger.warning("request_options.bad_method", method=e.method)
"""

from typing import Any


class RequestOptionsError(Exception):
    """Base exception for all request options errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class UnsupportedHttpMethodError(RequestOptionsError, ValueError):
    """The HTTP method is neither GET nor POST.

    GraphQL requests are sent either URL-encoded (GET) or in the body (POST),
    so no other method can be stored on request options.

    Attributes:
        message: Human-readable error description.
        method: The rejected value, as supplied by the caller.
    """

    def __init__(self, message: str, method: Any) -> None:
        super().__init__(message)
        self.method = method


class InvalidHeaderError(RequestOptionsError, TypeError):
    """A header entry could not be read as a name/value pair.

    Attributes:
        message: Human-readable error description.
        entry: The offending entry.
    """

    def __init__(self, message: str, entry: Any) -> None:
        super().__init__(message)
        self.entry = entry
