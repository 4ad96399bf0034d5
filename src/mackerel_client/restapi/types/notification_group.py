"""Notification group models."""

from typing import Annotated

from .base import MackerelModel, OmitEmpty, OpenStrEnum
from .channel import ChannelId
from .monitor import MonitorId
from .service import ServiceName

NotificationGroupId = str


class NotificationLevel(OpenStrEnum):
    """Which alerts a notification group forwards."""

    ALL = "all"
    CRITICAL = "critical"


class NotificationGroupMonitor(MackerelModel):
    """A monitor routed to a notification group."""

    id: MonitorId
    skip_default: bool = False


class NotificationGroupService(MackerelModel):
    """A service routed to a notification group."""

    name: ServiceName


class NotificationGroupValue(MackerelModel):
    """Fields accepted when creating or updating a notification group."""

    name: str
    notification_level: NotificationLevel = NotificationLevel.ALL
    child_notification_group_ids: list[NotificationGroupId] = []
    child_channel_ids: list[ChannelId] = []
    monitors: Annotated[list[NotificationGroupMonitor], OmitEmpty] = []
    services: Annotated[list[NotificationGroupService], OmitEmpty] = []


class NotificationGroup(NotificationGroupValue):
    """A notification group."""

    id: NotificationGroupId
