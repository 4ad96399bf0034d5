"""Service and role models."""

from typing import Annotated

from .base import MackerelModel, OmitEmpty

ServiceName = str
RoleName = str
# "<service name>:<role name>"
RoleFullname = str


class ServiceValue(MackerelModel):
    """Fields accepted when creating a service."""

    name: ServiceName
    memo: Annotated[str, OmitEmpty] = ""


class Service(ServiceValue):
    """A service and the names of its roles."""

    roles: list[RoleName] = []


class Role(MackerelModel):
    """A role within a service."""

    name: RoleName
    memo: Annotated[str, OmitEmpty] = ""


def role_fullname(service_name: ServiceName, role_name: RoleName) -> RoleFullname:
    """Join a service name and a role name into a role fullname."""
    return f"{service_name}:{role_name}"
