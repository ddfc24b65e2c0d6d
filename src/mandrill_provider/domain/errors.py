"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete provider configuration.

    Raised synchronously by the provider constructor when the API key is
    absent or not a string, or when an option fails validation. Never
    delivered through a result callback.

    Example:
        >>> from mandrill_provider.domain.errors import ConfigurationError
        >>> err = ConfigurationError("API key must be a non-empty string")
        >>> str(err)
        'API key must be a non-empty string'
    """


class ValidationError(ValueError):
    """Message failed a required-field precondition.

    Reported through the result callback before any network I/O happens.
    Inherits from ValueError so generic ``except ValueError`` handlers
    catch it as well.

    Example:
        >>> from mandrill_provider.domain.errors import ValidationError
        >>> err = ValidationError("Message has no subject")
        >>> isinstance(err, ValueError)
        True
    """


class TransportError(Exception):
    """Network or TLS failure before an HTTP response was obtained.

    Wraps the underlying transport exception, which is available both as
    ``cause`` and through the standard ``__cause__`` chain.

    Example:
        >>> from mandrill_provider.domain.errors import TransportError
        >>> err = TransportError("Connection refused", cause=OSError(111, "refused"))
        >>> str(err)
        'Connection refused'
        >>> isinstance(err.cause, OSError)
        True
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ApiError(Exception):
    """The provider answered with a status other than 200.

    Carries the HTTP status code and the raw response body text exactly as
    received; the body is not parsed.

    Example:
        >>> from mandrill_provider.domain.errors import ApiError
        >>> err = ApiError(503, '{"status":"error"}')
        >>> err.http_status_code
        503
        >>> err.http_response_data
        '{"status":"error"}'
        >>> str(err)
        'Email could not be sent (HTTP 503)'
    """

    def __init__(self, http_status_code: int, http_response_data: str) -> None:
        super().__init__(f"Email could not be sent (HTTP {http_status_code})")
        self.http_status_code = http_status_code
        self.http_response_data = http_response_data


__all__ = [
    "ApiError",
    "ConfigurationError",
    "TransportError",
    "ValidationError",
]
