"""Request building for the Mackerel API.

Turns an :class:`~.endpoints.Endpoint` plus call arguments into a fully
addressed :class:`RequestEnvelope` ready for a transport.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic_core import to_json

from .endpoints import Endpoint

API_KEY_HEADER = "X-Api-Key"

QueryParams = Iterable[tuple[str, Any]]


class _NoBody:
    def __repr__(self) -> str:
        return "NO_BODY"


# Marks a request without a body; None is sent as a JSON null
NO_BODY: Any = _NoBody()


@dataclass(frozen=True)
class RequestEnvelope:
    """An outgoing HTTP request.

    Headers carry the API key and are left out of ``repr``.
    """

    method: str
    url: str
    query: tuple[tuple[str, str], ...] = ()
    headers: Mapping[str, str] = field(default_factory=dict, repr=False)
    body: bytes | None = None


def serialize_body(body: Any) -> bytes:
    """Serialize a request body to JSON.

    Models are dumped under their camelCase aliases. ``None`` fields are
    omitted rather than sent as null, as are fields marked as omitted
    when empty.
    """
    return to_json(body, by_alias=True, exclude_none=True)


def build_request(
    endpoint: Endpoint,
    *,
    api_base: str,
    api_key: str,
    user_agent: str,
    path_params: Mapping[str, str] | None = None,
    query: QueryParams | None = None,
    body: Any = NO_BODY,
) -> RequestEnvelope:
    """Build the request for one API operation.

    Args:
        endpoint: Descriptor of the operation.
        api_base: Root URL of the API (e.g., "https://api.mackerelio.com").
        api_key: API key sent in the ``X-Api-Key`` header.
        user_agent: User-Agent header value.
        path_params: Values for the placeholders of the path template.
        query: Query parameters as (name, value) pairs. Names may repeat;
            pairs whose value is None are dropped.
        body: Request body; required if and only if the endpoint sends one.
            ``None`` is a body and serializes to ``null``.

    Returns:
        The request envelope.

    Raises:
        ValueError: If path parameters or body do not match the endpoint.
    """
    path = endpoint.resolve(path_params)
    if endpoint.has_body and body is NO_BODY:
        msg = f"{endpoint.describe()} requires a request body"
        raise ValueError(msg)
    if not endpoint.has_body and body is not NO_BODY:
        msg = f"{endpoint.describe()} does not take a request body"
        raise ValueError(msg)

    headers = {
        API_KEY_HEADER: api_key,
        "User-Agent": user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    query_pairs = tuple(
        (name, str(value)) for name, value in (query or ()) if value is not None
    )
    return RequestEnvelope(
        method=endpoint.method,
        url=api_base.rstrip("/") + path,
        query=query_pairs,
        headers=headers,
        body=None if body is NO_BODY else serialize_body(body),
    )
