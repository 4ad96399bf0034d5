"""Monitor models.

A monitor is a tagged union keyed by its ``type`` field. Each known kind
has its own model; a kind the client does not recognize decodes into
:class:`UnknownMonitor`, which keeps the raw ``type`` and every other field
so it can be inspected or sent back unchanged.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Tag

from .base import MackerelModel, OpenStrEnum

MonitorId = str


class MonitorType(OpenStrEnum):
    """Monitor kinds as reported in alerts and monitored statuses."""

    CONNECTIVITY = "connectivity"
    HOST = "host"
    SERVICE = "service"
    EXTERNAL = "external"
    CHECK = "check"
    EXPRESSION = "expression"
    ANOMALY_DETECTION = "anomalyDetection"


class Operator(OpenStrEnum):
    """Comparison used against the warning and critical thresholds."""

    GREATER_THAN = ">"
    LESS_THAN = "<"


class ExternalMethod(OpenStrEnum):
    """HTTP methods for external http monitors."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ExternalHeader(MackerelModel):
    """HTTP header sent by an external http monitor."""

    name: str
    value: str


class _MonitorFields(MackerelModel):
    id: MonitorId | None = None
    name: str
    memo: str | None = None
    is_mute: bool | None = None
    notification_interval: int | None = None


class HostMonitor(_MonitorFields):
    """Threshold monitor on a host metric."""

    type: Literal["host"] = "host"
    duration: int
    metric: str
    operator: Operator
    warning: float | None = None
    critical: float | None = None
    max_check_attempts: int | None = None
    scopes: list[str] | None = None
    exclude_scopes: list[str] | None = None


class ConnectivityMonitor(_MonitorFields):
    """Monitor raising an alert when hosts stop posting metrics."""

    type: Literal["connectivity"] = "connectivity"
    scopes: list[str] | None = None
    exclude_scopes: list[str] | None = None


class ServiceMonitor(_MonitorFields):
    """Threshold monitor on a service metric."""

    type: Literal["service"] = "service"
    service: str
    duration: int
    metric: str
    operator: Operator
    warning: float | None = None
    critical: float | None = None
    max_check_attempts: int | None = None


class ExternalMonitor(_MonitorFields):
    """External http monitor."""

    type: Literal["external"] = "external"
    method: ExternalMethod | None = None
    url: str
    request_body: str | None = None
    headers: list[ExternalHeader] | None = None
    service: str | None = None
    response_time_duration: int | None = None
    response_time_warning: float | None = None
    response_time_critical: float | None = None
    contains_string: str | None = None
    max_check_attempts: int | None = None
    certification_expiration_warning: int | None = None
    certification_expiration_critical: int | None = None
    skip_certificate_verification: bool | None = None
    follow_redirect: bool | None = None


class ExpressionMonitor(_MonitorFields):
    """Threshold monitor on a graph expression."""

    type: Literal["expression"] = "expression"
    expression: str
    operator: Operator
    warning: float | None = None
    critical: float | None = None


class UnknownMonitor(MackerelModel):
    """A monitor whose kind this client does not know.

    Fields other than ``type``, ``id`` and ``name`` are kept as extra
    attributes under their original JSON names.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    id: MonitorId | None = None
    name: str = ""


_MONITOR_TYPES = frozenset(
    {"host", "connectivity", "service", "external", "expression"}
)


def _monitor_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if isinstance(kind, str) and kind in _MONITOR_TYPES:
        return kind
    return "unknown"


Monitor = Annotated[
    Union[
        Annotated[HostMonitor, Tag("host")],
        Annotated[ConnectivityMonitor, Tag("connectivity")],
        Annotated[ServiceMonitor, Tag("service")],
        Annotated[ExternalMonitor, Tag("external")],
        Annotated[ExpressionMonitor, Tag("expression")],
        Annotated[UnknownMonitor, Tag("unknown")],
    ],
    Discriminator(_monitor_tag),
]
