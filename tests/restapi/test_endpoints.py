"""Tests for endpoint descriptors and path parameter substitution."""

import pytest

from mackerel_client.restapi import endpoints
from mackerel_client.restapi.endpoints import Endpoint

ALL_ENDPOINTS = [
    value for value in vars(endpoints).values() if isinstance(value, Endpoint)
]

# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def test_resolve_substitutes_placeholder():
    """Service name replaces its placeholder in the metric names path."""
    path = endpoints.LIST_SERVICE_METRIC_NAMES.resolve({"serviceName": "web-server"})
    assert path == "/api/v0/services/web-server/metric-names"


def test_resolve_without_placeholders():
    """Paths without placeholders resolve to themselves."""
    assert endpoints.LIST_HOSTS.resolve() == "/api/v0/hosts"


def test_resolve_multiple_placeholders():
    """All placeholders of a nested path are filled in."""
    path = endpoints.GET_ROLE_METADATA.resolve(
        {"serviceName": "web", "roleName": "app", "namespace": "deploy"}
    )
    assert path == "/api/v0/services/web/roles/app/metadata/deploy"


def test_resolve_percent_encodes_segment():
    """Reserved characters cannot escape their path segment."""
    path = endpoints.GET_HOST_BY_CUSTOM_IDENTIFIER.resolve(
        {"customIdentifier": "i-123/../x y"}
    )
    assert path == "/api/v0/hosts-by-custom-identifier/i-123%2F..%2Fx%20y"


def test_resolve_missing_parameter_raises():
    """A placeholder without a value is rejected."""
    with pytest.raises(ValueError, match="missing path parameters"):
        endpoints.DELETE_ROLE.resolve({"serviceName": "web"})


def test_resolve_unexpected_parameter_raises():
    """A value without a placeholder is rejected."""
    with pytest.raises(ValueError, match="unexpected path parameters"):
        endpoints.LIST_SERVICES.resolve({"serviceName": "web"})


def test_placeholders():
    """Placeholder names are extracted from the template."""
    assert endpoints.DELETE_ROLE.placeholders == {"serviceName", "roleName"}


def test_describe_falls_back_to_method_and_path():
    """Unnamed endpoints are described by method and path."""
    assert Endpoint("GET", "/api/v0/x").describe() == "GET /api/v0/x"
    assert endpoints.LIST_USERS.describe() == "list_users"


# ---------------------------------------------------------------------------
# Descriptor table
# ---------------------------------------------------------------------------


def test_endpoint_names_are_unique():
    """Each operation is described exactly once."""
    names = [endpoint.name for endpoint in ALL_ENDPOINTS]
    assert all(names)
    assert len(names) == len(set(names))


@pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda e: e.name)
def test_reads_and_deletes_send_no_body(endpoint: Endpoint):
    """GET and DELETE operations never carry a request body."""
    if endpoint.method in ("GET", "DELETE"):
        assert not endpoint.has_body


@pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda e: e.name)
def test_paths_are_versioned(endpoint: Endpoint):
    """All paths live under /api/v0/."""
    assert endpoint.path.startswith("/api/v0/")


def test_retire_host_sends_no_body():
    """Retiring a single host is a bare POST."""
    assert endpoints.RETIRE_HOST.method == "POST"
    assert not endpoints.RETIRE_HOST.has_body
