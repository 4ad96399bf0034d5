"""Tests for classifying and decoding API responses."""

import json

import pytest

from mackerel_client.restapi import errors
from mackerel_client.restapi.response import api_error_from_response, decode
from mackerel_client.restapi.transport import ResponseEnvelope
from mackerel_client.restapi.types import Organization, Service


def _response(status_code: int, payload=None, *, raw: bytes | None = None):
    body = raw if raw is not None else json.dumps(payload).encode()
    return ResponseEnvelope(status_code=status_code, body=body)


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("status_code", [200, 201])
def test_success_decodes_body(status_code: int):
    """2xx bodies are validated into the result type."""
    response = _response(status_code, {"name": "example", "displayName": "Example"})
    org = decode(response, Organization)
    assert org == Organization(name="example", display_name="Example")


def test_no_content_without_result_type():
    """A 204 with an empty body is a success when no result is expected."""
    assert decode(ResponseEnvelope(status_code=204), None) is None


def test_key_selects_field():
    """Only the named top-level field is decoded."""
    response = _response(200, {"services": [{"name": "web", "roles": ["app"]}]})
    services = decode(response, list[Service], key="services")
    assert services[0].name == "web"
    assert services[0].roles == ["app"]


def test_invalid_json_raises_decode_error():
    """A success body that is not JSON is a decode failure."""
    with pytest.raises(errors.DecodeError, match="invalid JSON") as exc_info:
        decode(_response(200, raw=b"<html>"), Organization)
    assert exc_info.value.status_code == 200


def test_missing_key_raises_decode_error():
    """A missing wrapper field is a decode failure."""
    with pytest.raises(errors.DecodeError, match="missing field 'services'"):
        decode(_response(200, {"roles": []}), list[Service], key="services")


def test_schema_mismatch_raises_decode_error():
    """A body of the wrong shape is a decode failure."""
    with pytest.raises(errors.DecodeError):
        decode(_response(200, {"displayName": "no name"}), Organization)


# ---------------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("status_code", "error_class"),
    [
        (400, errors.BadRequestError),
        (401, errors.AuthenticationError),
        (403, errors.PermissionDeniedError),
        (404, errors.NotFoundError),
        (409, errors.ConflictError),
        (429, errors.RateLimitError),
        (500, errors.ServerError),
        (503, errors.ServerError),
    ],
)
def test_failure_status_raises_api_error(status_code, error_class):
    """Non-2xx statuses raise the matching ApiError subclass."""
    response = _response(status_code, {"error": {"message": "boom"}})
    with pytest.raises(error_class) as exc_info:
        decode(response, Organization)
    assert isinstance(exc_info.value, errors.ApiError)
    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "boom"


def test_unmapped_status_raises_base_api_error():
    """Statuses without a dedicated class raise ApiError itself."""
    with pytest.raises(errors.ApiError) as exc_info:
        decode(_response(418, {}), None)
    assert type(exc_info.value) is errors.ApiError


def test_failure_is_raised_even_without_result_type():
    """Ignoring the body does not ignore the status."""
    with pytest.raises(errors.NotFoundError):
        decode(_response(404, {"error": {"message": "Host Not Found"}}), None)


def test_error_message_as_plain_string():
    """An ``error`` field holding a string is used as the message."""
    error = api_error_from_response(_response(400, {"error": "invalid name"}))
    assert error.message == "invalid name"


def test_error_details_are_kept():
    """Fields next to the message are exposed as details."""
    error = api_error_from_response(
        _response(400, {"error": {"message": "bad", "field": "name"}})
    )
    assert error.details == {"field": "name"}


def test_non_json_error_body_keeps_raw_text():
    """A failure body that is not JSON still yields an ApiError."""
    error = api_error_from_response(_response(502, raw=b"Bad Gateway"))
    assert isinstance(error, errors.ServerError)
    assert error.message == ""
    assert error.body == "Bad Gateway"


def test_error_str():
    """The error renders its status and message."""
    error = errors.ApiError(404, "Host Not Found")
    assert str(error) == "status:404, message:Host Not Found"
    assert error.is_client_error
    assert not error.is_server_error


def test_credential_is_redacted_from_errors():
    """An echoed API key never reaches the raised error."""
    response = _response(
        401,
        {"error": {"message": "invalid key secret-key", "key": "secret-key"}},
    )
    error = api_error_from_response(response, redact=("secret-key",))
    assert "secret-key" not in str(error)
    assert "secret-key" not in error.body
    assert error.message == "invalid key ***"
    assert error.details == {"key": "***"}


def test_credential_is_redacted_from_decode_errors():
    """Validation failures echo the body but never the API key."""
    response = _response(200, {"displayName": "secret-key"})
    with pytest.raises(errors.DecodeError) as exc_info:
        decode(response, Organization, redact=("secret-key",))
    assert "secret-key" not in str(exc_info.value)
    assert "secret-key" not in exc_info.value.reason
    assert "***" in exc_info.value.reason
    assert exc_info.value.__cause__ is None


def test_credential_is_redacted_from_invalid_json_errors():
    """A truncated body holding the key is reported without it."""
    with pytest.raises(errors.DecodeError) as exc_info:
        decode(_response(200, raw=b"secret-key"), Organization, redact=("secret-key",))
    assert "secret-key" not in str(exc_info.value)


def test_no_content_with_result_type_raises_decode_error():
    """An empty success body cannot produce an expected result."""
    with pytest.raises(errors.DecodeError, match="empty response body") as exc_info:
        decode(ResponseEnvelope(status_code=204), Organization)
    assert exc_info.value.status_code == 204
