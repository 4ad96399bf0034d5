"""Exceptions raised by the Mackerel API client.

Every client call either returns its typed result or raises exactly one of
:class:`TransportError`, :class:`DecodeError` or :class:`ApiError` (or one
of the status-specific :class:`ApiError` subclasses).
"""

from typing import Any


class MackerelError(Exception):
    """Base exception for all Mackerel client errors."""


class TransportError(MackerelError):
    """The request could not be sent or no response was received."""


class DecodeError(MackerelError):
    """A successful response did not match the expected shape.

    Indicates a schema mismatch between this client and the API rather
    than a rejected request.
    """

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"failed to decode response (status {status_code}): {reason}")
        self.status_code = status_code
        self.reason = reason


class ApiError(MackerelError):
    """The API answered with a non-success status.

    Attributes:
        status_code: HTTP status code of the response.
        message: Error message reported by the API, or "" if the body did
            not contain one.
        details: Any other fields of the reported error object.
        body: Raw response body text.
    """

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        details: dict[str, Any] | None = None,
        body: str = "",
    ):
        super().__init__(f"status:{status_code}, message:{message}")
        self.status_code = status_code
        self.message = message
        self.details = details or {}
        self.body = body

    @property
    def is_client_error(self) -> bool:
        """Whether the request itself was rejected (4xx)."""
        return 400 <= self.status_code < 500  # noqa: PLR2004

    @property
    def is_server_error(self) -> bool:
        """Whether the API failed to handle a valid request (5xx)."""
        return 500 <= self.status_code < 600  # noqa: PLR2004


class BadRequestError(ApiError):
    """400: invalid request parameters or body."""


class AuthenticationError(ApiError):
    """401: missing or invalid API key."""


class PermissionDeniedError(ApiError):
    """403: the API key lacks the required permission."""


class NotFoundError(ApiError):
    """404: the resource does not exist."""


class ConflictError(ApiError):
    """409: the resource already exists or conflicts."""


class RateLimitError(ApiError):
    """429: too many requests."""


class ServerError(ApiError):
    """5xx: server-side failure."""


STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def error_class_for_status(status_code: int) -> type[ApiError]:
    """Pick the ApiError subclass matching a status code."""
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if 500 <= status_code < 600:  # noqa: PLR2004
        return ServerError
    return ApiError
