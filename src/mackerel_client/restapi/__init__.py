"""Mackerel REST API client package.

Provides a typed HTTP client for the Mackerel API. Requests are described
by endpoint descriptors, sent through a pluggable transport, and responses
are validated into Pydantic models.

Exports:
    MackerelClient: API client with one method per operation.
    types: Module containing Pydantic models for API resources.
    errors: Module containing the client's exception hierarchy.
    HttpxTransport: Default transport backed by httpx.
    DEFAULT_API_BASE: Default base URL of the API.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
"""

from . import errors, types
from .client import DEFAULT_API_BASE, DEFAULT_USER_AGENT, MackerelClient
from .errors import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DecodeError,
    MackerelError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    TransportError,
)
from .transport import DEFAULT_TIMEOUT, HttpxTransport, ResponseEnvelope, Transport

__all__ = [
    "DEFAULT_API_BASE",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ApiError",
    "AuthenticationError",
    "BadRequestError",
    "ConflictError",
    "DecodeError",
    "HttpxTransport",
    "MackerelClient",
    "MackerelError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "ResponseEnvelope",
    "ServerError",
    "Transport",
    "TransportError",
    "errors",
    "types",
]
