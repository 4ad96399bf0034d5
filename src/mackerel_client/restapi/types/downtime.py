"""Downtime models."""

from typing import Annotated

from pydantic import Field

from .base import MackerelModel, OmitEmpty, OpenStrEnum, Timestamp
from .monitor import MonitorId
from .service import RoleFullname, ServiceName

DowntimeId = str


class DowntimeRecurrenceType(OpenStrEnum):
    """How often a downtime repeats."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class DowntimeRecurrenceWeekday(OpenStrEnum):
    """Weekdays for weekly recurrences."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class DowntimeRecurrence(MackerelModel):
    """Recurrence setting of a downtime."""

    recurrence_type: DowntimeRecurrenceType = Field(alias="type")
    interval: int
    weekdays: Annotated[list[DowntimeRecurrenceWeekday], OmitEmpty] = []
    until: Timestamp | None = None


class DowntimeValue(MackerelModel):
    """Fields accepted when creating or updating a downtime."""

    name: str
    memo: Annotated[str, OmitEmpty] = ""
    start: Timestamp
    # minutes
    duration: int
    recurrence: DowntimeRecurrence | None = None
    service_scopes: Annotated[list[ServiceName], OmitEmpty] = []
    service_exclude_scopes: Annotated[list[ServiceName], OmitEmpty] = []
    role_scopes: Annotated[list[RoleFullname], OmitEmpty] = []
    role_exclude_scopes: Annotated[list[RoleFullname], OmitEmpty] = []
    monitor_scopes: Annotated[list[MonitorId], OmitEmpty] = []
    monitor_exclude_scopes: Annotated[list[MonitorId], OmitEmpty] = []


class Downtime(DowntimeValue):
    """A scheduled downtime."""

    id: DowntimeId
