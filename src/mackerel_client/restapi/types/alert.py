"""Alert models."""

from pydantic import Field

from .base import MackerelModel, OpenStrEnum, Timestamp
from .monitor import MonitorId, MonitorType

AlertId = str


class AlertStatus(OpenStrEnum):
    """Alert and check statuses."""

    OK = "OK"
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    UNKNOWN = "UNKNOWN"


class Alert(MackerelModel):
    """An alert raised by a monitor."""

    id: AlertId
    status: AlertStatus
    monitor_id: MonitorId | None = None
    monitor_type: MonitorType = Field(alias="type")
    host_id: str | None = None
    value: float | None = None
    message: str | None = None
    reason: str | None = None
    opened_at: Timestamp | None = None
    closed_at: Timestamp | None = None


class AlertsPage(MackerelModel):
    """One page of alerts, as returned by the API.

    ``next_id`` is set when more alerts are available; pass it back to
    fetch the following page.
    """

    alerts: list[Alert] = []
    next_id: AlertId | None = None
