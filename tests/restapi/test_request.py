"""Tests for building request envelopes."""

import json

import pytest

from mackerel_client.restapi import endpoints
from mackerel_client.restapi.request import API_KEY_HEADER, build_request
from mackerel_client.restapi.types import HostStatus, ServiceValue

API_KEY = "secret-api-key"
API_BASE = "https://api.mackerelio.com"


def _build(endpoint, **kwargs):
    return build_request(
        endpoint,
        api_base=kwargs.pop("api_base", API_BASE),
        api_key=API_KEY,
        user_agent="test-agent/1.0",
        **kwargs,
    )


# ---------------------------------------------------------------------------
# URL and headers
# ---------------------------------------------------------------------------


def test_url_joins_base_and_path():
    """Path parameters are substituted into the full URL."""
    request = _build(
        endpoints.LIST_SERVICE_METRIC_NAMES,
        path_params={"serviceName": "web-server"},
    )
    assert request.method == "GET"
    assert request.url == f"{API_BASE}/api/v0/services/web-server/metric-names"


def test_trailing_slash_in_base_is_ignored():
    """A base URL ending in a slash does not produce a double slash."""
    request = _build(endpoints.GET_ORGANIZATION, api_base=f"{API_BASE}/")
    assert request.url == f"{API_BASE}/api/v0/org"


def test_headers_carry_credential_and_content_type():
    """Every request is authenticated and declares JSON."""
    request = _build(endpoints.LIST_USERS)
    assert request.headers[API_KEY_HEADER] == API_KEY
    assert request.headers["User-Agent"] == "test-agent/1.0"
    assert request.headers["Content-Type"] == "application/json"


def test_repr_hides_credential():
    """The API key does not show up when a request is printed or logged."""
    request = _build(endpoints.CREATE_SERVICE, body=ServiceValue(name="web"))
    assert API_KEY not in repr(request)


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


def test_query_drops_none_and_stringifies_values():
    """Unset optional parameters are not sent."""
    request = _build(
        endpoints.LIST_ALERTS,
        query=[("withClosed", "true"), ("nextId", None), ("limit", 10)],
    )
    assert request.query == (("withClosed", "true"), ("limit", "10"))


def test_query_keeps_repeated_names():
    """Repeated parameters are kept in order."""
    request = _build(
        endpoints.LIST_LATEST_HOST_METRIC_VALUES,
        query=[("hostId", "h1"), ("hostId", "h2"), ("name", "loadavg5")],
    )
    assert request.query == (("hostId", "h1"), ("hostId", "h2"), ("name", "loadavg5"))


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------


def test_get_has_no_body():
    """Requests without a body send no content."""
    assert _build(endpoints.LIST_HOSTS).body is None


def test_model_body_uses_aliases_and_omits_empty_fields():
    """Model bodies are camelCase JSON without empty optional fields."""
    request = _build(endpoints.CREATE_SERVICE, body=ServiceValue(name="web"))
    assert json.loads(request.body) == {"name": "web"}


def test_plain_body_serializes_enums():
    """Enum values in plain dict bodies are sent as their string value."""
    request = _build(
        endpoints.UPDATE_HOST_STATUS,
        path_params={"hostId": "h1"},
        body={"status": HostStatus.MAINTENANCE},
    )
    assert json.loads(request.body) == {"status": "maintenance"}


def test_none_body_is_sent_as_null():
    """None is a JSON value of its own, distinct from sending no body."""
    request = _build(
        endpoints.PUT_HOST_METADATA,
        path_params={"hostId": "h1", "namespace": "deploy"},
        body=None,
    )
    assert request.body == b"null"


def test_body_never_contains_credential():
    """The API key travels only in the header."""
    request = _build(endpoints.CREATE_SERVICE, body=ServiceValue(name="web", memo="m"))
    assert API_KEY.encode() not in request.body


def test_missing_body_raises():
    """Operations that send a body require one."""
    with pytest.raises(ValueError, match="requires a request body"):
        _build(endpoints.CREATE_SERVICE)


def test_unexpected_body_raises():
    """Operations without a body reject one."""
    with pytest.raises(ValueError, match="does not take a request body"):
        _build(endpoints.LIST_SERVICES, body={"name": "web"})
