"""Host models and host listing filters."""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Annotated, Any

from pydantic import Field

from .alert import AlertStatus
from .base import MackerelModel, OmitEmpty, OpenStrEnum, Timestamp
from .monitor import MonitorId, MonitorType
from .service import RoleFullname, RoleName, ServiceName

HostId = str


class HostSize(OpenStrEnum):
    """Billing size of a host."""

    STANDARD = "standard"
    MICRO = "micro"


class HostStatus(OpenStrEnum):
    """Host statuses."""

    WORKING = "working"
    STANDBY = "standby"
    MAINTENANCE = "maintenance"
    POWEROFF = "poweroff"


class HostInterface(MackerelModel):
    """A network interface of a host."""

    name: str
    mac_address: str | None = None
    ipv4_addresses: Annotated[list[IPv4Address], OmitEmpty] = []
    ipv6_addresses: Annotated[list[IPv6Address], OmitEmpty] = []
    ip_address: IPv4Address | None = None
    ipv6_address: IPv6Address | None = None


class HostCheck(MackerelModel):
    """A check monitoring item registered by the agent."""

    name: str
    memo: Annotated[str, OmitEmpty] = ""


class HostValue(MackerelModel):
    """Fields accepted when registering or updating a host."""

    name: str
    display_name: str | None = None
    custom_identifier: str | None = None
    meta: dict[str, Any] = {}
    memo: Annotated[str, OmitEmpty] = ""
    interfaces: Annotated[list[HostInterface], OmitEmpty] = []
    role_fullnames: Annotated[list[RoleFullname], OmitEmpty] = []
    checks: Annotated[list[HostCheck], OmitEmpty] = []


class Host(HostValue):
    """A registered host."""

    id: HostId
    created_at: Timestamp
    size: HostSize = HostSize.STANDARD
    status: HostStatus
    is_retired: bool = False
    retired_at: Timestamp | None = None
    roles: dict[ServiceName, list[RoleName]] = {}


class MonitoredStatusDetail(MackerelModel):
    """Detail attached to a check monitoring status."""

    monitor_type: MonitorType = Field(alias="type")
    message: str
    memo: Annotated[str, OmitEmpty] = ""


class MonitoredStatus(MackerelModel):
    """Status of one monitor for a host."""

    monitor_id: MonitorId
    status: AlertStatus
    detail: MonitoredStatusDetail | None = None


@dataclass(frozen=True)
class ListHostsParams:
    """Filters for listing hosts.

    Without filters the API returns hosts in working or standby status.
    ``roles`` only takes effect together with ``service``.
    """

    service: ServiceName | None = None
    roles: tuple[RoleName, ...] = ()
    name: str | None = None
    statuses: tuple[HostStatus, ...] = ()

    @classmethod
    def role_fullname(cls, fullname: RoleFullname) -> "ListHostsParams":
        """Filter by a ``service:role`` fullname."""
        service, _, role = fullname.partition(":")
        return cls(service=service, roles=(role,) if role else ())

    def query_params(self) -> list[tuple[str, str]]:
        """Render the filters as repeated query parameters."""
        params: list[tuple[str, str]] = []
        if self.service is not None:
            params.append(("service", self.service))
        params.extend(("role", role) for role in self.roles)
        if self.name is not None:
            params.append(("name", self.name))
        params.extend(("status", str(status)) for status in self.statuses)
        return params
