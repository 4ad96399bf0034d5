"""Alert group setting models."""

from typing import Annotated

from .base import MackerelModel, OmitEmpty
from .monitor import MonitorId
from .service import RoleFullname, ServiceName

AlertGroupSettingId = str


class AlertGroupSettingValue(MackerelModel):
    """Fields accepted when creating or updating an alert group setting."""

    name: str
    memo: Annotated[str, OmitEmpty] = ""
    service_scopes: Annotated[list[ServiceName], OmitEmpty] = []
    role_scopes: Annotated[list[RoleFullname], OmitEmpty] = []
    monitor_scopes: Annotated[list[MonitorId], OmitEmpty] = []
    notification_interval: int | None = None


class AlertGroupSetting(AlertGroupSettingValue):
    """An alert group setting."""

    id: AlertGroupSettingId
