"""Check monitoring report models."""

from typing import Literal

from .alert import AlertStatus
from .base import MackerelModel, Timestamp
from .host import HostId


class CheckSource(MackerelModel):
    """The host a check result is reported for."""

    type: Literal["host"] = "host"
    host_id: HostId


class CheckReport(MackerelModel):
    """A check monitoring result posted to the API."""

    name: str
    message: str = ""
    source: CheckSource
    status: AlertStatus
    occurred_at: Timestamp
    notification_interval: int | None = None
    max_check_attempts: int | None = None
