"""Typed models for Mackerel API resources.

Each resource declares its JSON field mapping once; the same models are
used to serialize request bodies and to validate responses.
"""

from .alert import Alert, AlertId, AlertsPage, AlertStatus
from .alert_group_setting import (
    AlertGroupSetting,
    AlertGroupSettingId,
    AlertGroupSettingValue,
)
from .aws_integration import (
    AWSExcludableMetrics,
    AWSIntegration,
    AWSIntegrationId,
    AWSIntegrationValue,
    AWSServiceConfig,
    AWSServiceName,
)
from .base import (
    MackerelModel,
    OmitEmpty,
    OpenStrEnum,
    Timestamp,
    epoch_seconds,
    to_utc_seconds,
)
from .channel import (
    Channel,
    ChannelId,
    EmailChannel,
    NamedChannel,
    NotificationEvent,
    SlackChannel,
    UnknownChannel,
    WebhookChannel,
)
from .check_report import CheckReport, CheckSource
from .dashboard import Dashboard, DashboardId, DashboardValue
from .downtime import (
    Downtime,
    DowntimeId,
    DowntimeRecurrence,
    DowntimeRecurrenceType,
    DowntimeRecurrenceWeekday,
    DowntimeValue,
)
from .graph import (
    GraphAnnotation,
    GraphAnnotationId,
    GraphAnnotationValue,
    GraphDefinition,
    GraphMetric,
    GraphUnit,
)
from .host import (
    Host,
    HostCheck,
    HostId,
    HostInterface,
    HostSize,
    HostStatus,
    HostValue,
    ListHostsParams,
    MonitoredStatus,
    MonitoredStatusDetail,
)
from .invitation import Invitation, InvitationValue
from .metadata import Metadata
from .metric import (
    HostMetricValue,
    LatestMetricValues,
    MetricValue,
    ServiceMetricValue,
)
from .monitor import (
    ConnectivityMonitor,
    ExpressionMonitor,
    ExternalHeader,
    ExternalMethod,
    ExternalMonitor,
    HostMonitor,
    Monitor,
    MonitorId,
    MonitorType,
    Operator,
    ServiceMonitor,
    UnknownMonitor,
)
from .notification_group import (
    NotificationGroup,
    NotificationGroupId,
    NotificationGroupMonitor,
    NotificationGroupService,
    NotificationGroupValue,
    NotificationLevel,
)
from .organization import Organization
from .service import (
    Role,
    RoleFullname,
    RoleName,
    Service,
    ServiceName,
    ServiceValue,
    role_fullname,
)
from .user import User, UserAuthority, UserId

__all__ = [
    "AWSExcludableMetrics",
    "AWSIntegration",
    "AWSIntegrationId",
    "AWSIntegrationValue",
    "AWSServiceConfig",
    "AWSServiceName",
    "Alert",
    "AlertGroupSetting",
    "AlertGroupSettingId",
    "AlertGroupSettingValue",
    "AlertId",
    "AlertStatus",
    "AlertsPage",
    "Channel",
    "ChannelId",
    "CheckReport",
    "CheckSource",
    "ConnectivityMonitor",
    "Dashboard",
    "DashboardId",
    "DashboardValue",
    "Downtime",
    "DowntimeId",
    "DowntimeRecurrence",
    "DowntimeRecurrenceType",
    "DowntimeRecurrenceWeekday",
    "DowntimeValue",
    "EmailChannel",
    "ExpressionMonitor",
    "ExternalHeader",
    "ExternalMethod",
    "ExternalMonitor",
    "GraphAnnotation",
    "GraphAnnotationId",
    "GraphAnnotationValue",
    "GraphDefinition",
    "GraphMetric",
    "GraphUnit",
    "Host",
    "HostCheck",
    "HostId",
    "HostInterface",
    "HostMetricValue",
    "HostMonitor",
    "HostSize",
    "HostStatus",
    "HostValue",
    "Invitation",
    "InvitationValue",
    "LatestMetricValues",
    "ListHostsParams",
    "MackerelModel",
    "Metadata",
    "MetricValue",
    "Monitor",
    "MonitorId",
    "MonitorType",
    "MonitoredStatus",
    "MonitoredStatusDetail",
    "NamedChannel",
    "NotificationEvent",
    "NotificationGroup",
    "NotificationGroupId",
    "NotificationGroupMonitor",
    "NotificationGroupService",
    "NotificationGroupValue",
    "NotificationLevel",
    "OmitEmpty",
    "OpenStrEnum",
    "Operator",
    "Organization",
    "Role",
    "RoleFullname",
    "RoleName",
    "Service",
    "ServiceMetricValue",
    "ServiceMonitor",
    "ServiceName",
    "ServiceValue",
    "SlackChannel",
    "Timestamp",
    "UnknownChannel",
    "UnknownMonitor",
    "User",
    "UserAuthority",
    "UserId",
    "WebhookChannel",
    "epoch_seconds",
    "role_fullname",
    "to_utc_seconds",
]
