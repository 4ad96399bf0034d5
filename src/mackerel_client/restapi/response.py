"""Response decoding for the Mackerel API.

A response is either a success (2xx) decoded into the expected type, or a
failure turned into an :class:`~.errors.ApiError`. Decoding of error
bodies never fails: when the body is not the usual
``{"error": {"message": ...}}`` document the error keeps the raw text.
"""

import json
from collections.abc import Iterable
from functools import lru_cache
from typing import Any, TypeVar, overload

import pydantic

from .errors import ApiError, DecodeError, error_class_for_status
from .transport import ResponseEnvelope

T = TypeVar("T")

REDACTED = "***"


def is_success(status_code: int) -> bool:
    """Whether a status code is in the 2xx range."""
    return 200 <= status_code < 300  # noqa: PLR2004


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(result_type)


def _scrub(value: Any, secrets: tuple[str, ...]) -> Any:
    if isinstance(value, str):
        for secret in secrets:
            value = value.replace(secret, REDACTED)
        return value
    if isinstance(value, dict):
        return {key: _scrub(item, secrets) for key, item in value.items()}
    if isinstance(value, list):
        return [_scrub(item, secrets) for item in value]
    return value


def api_error_from_response(
    response: ResponseEnvelope,
    redact: Iterable[str] = (),
) -> ApiError:
    """Build the ApiError for a failed response.

    Args:
        response: A response with a non-success status.
        redact: Strings (such as the API key) replaced by ``***`` in every
            field of the error.

    Returns:
        The most specific ApiError subclass for the status code.
    """
    secrets = tuple(secret for secret in redact if secret)
    message = ""
    details: dict[str, Any] = {}
    try:
        payload = json.loads(response.body)
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            if isinstance(error.get("message"), str):
                message = error["message"]
            details = {key: value for key, value in error.items() if key != "message"}
        elif isinstance(error, str):
            message = error

    error_class = error_class_for_status(response.status_code)
    return error_class(
        response.status_code,
        _scrub(message, secrets),
        details=_scrub(details, secrets),
        body=_scrub(response.text, secrets),
    )


@overload
def decode(
    response: ResponseEnvelope,
    result_type: None = None,
    *,
    key: str | None = None,
    redact: Iterable[str] = (),
) -> None: ...


@overload
def decode(
    response: ResponseEnvelope,
    result_type: type[T],
    *,
    key: str | None = None,
    redact: Iterable[str] = (),
) -> T: ...


@overload
def decode(
    response: ResponseEnvelope,
    result_type: Any,
    *,
    key: str | None = None,
    redact: Iterable[str] = (),
) -> Any: ...


def decode(
    response: ResponseEnvelope,
    result_type: Any = None,
    *,
    key: str | None = None,
    redact: Iterable[str] = (),
) -> Any:
    """Classify a response and decode its body.

    Args:
        response: The response to decode.
        result_type: Expected type of the result (a model, ``list[...]``,
            a union, ...). ``None`` ignores the body of a success.
        key: Decode only this field of the top-level JSON object.
        redact: Strings removed from any error raised for a failure.

    Returns:
        The validated result, or None if no result type was given.

    Raises:
        ApiError: If the status code is not 2xx.
        DecodeError: If a success body is not valid JSON or does not match
            ``result_type``.
    """
    secrets = tuple(secret for secret in redact if secret)
    if not is_success(response.status_code):
        raise api_error_from_response(response, secrets)
    if result_type is None:
        return None
    if not response.body:
        raise DecodeError(response.status_code, "empty response body")

    try:
        data = json.loads(response.body)
    except ValueError as exc:
        reason = _scrub(f"invalid JSON: {exc}", secrets)
        raise DecodeError(response.status_code, reason) from exc

    if key is not None:
        if not isinstance(data, dict) or key not in data:
            raise DecodeError(response.status_code, f"missing field {key!r}")
        data = data[key]

    try:
        return _adapter(result_type).validate_python(data)
    except pydantic.ValidationError as exc:
        # The validation error echoes input values and stays out of the chain
        reason = _scrub(str(exc), secrets)
        raise DecodeError(response.status_code, reason) from None
