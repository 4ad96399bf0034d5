"""Mackerel REST API client.

Provides one method per API operation. Every method builds the request
from its endpoint descriptor, sends it once through the transport and
returns the typed result, or raises a :class:`~.errors.MackerelError`.
"""

import logging
import time
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

import structlog

from .. import __version__
from ..metrics import TRANSPORT_ERROR_STATUS, observe_request
from . import endpoints
from .endpoints import Endpoint
from .errors import NotFoundError, TransportError
from .request import NO_BODY, QueryParams, build_request
from .response import decode
from .transport import DEFAULT_TIMEOUT, HttpxTransport, Transport
from .types import (
    AWSExcludableMetrics,
    AWSIntegration,
    AWSIntegrationId,
    AWSIntegrationValue,
    Alert,
    AlertGroupSetting,
    AlertGroupSettingId,
    AlertGroupSettingValue,
    AlertId,
    AlertsPage,
    Channel,
    ChannelId,
    CheckReport,
    Dashboard,
    DashboardId,
    DashboardValue,
    Downtime,
    DowntimeId,
    DowntimeValue,
    GraphAnnotation,
    GraphAnnotationId,
    GraphAnnotationValue,
    GraphDefinition,
    Host,
    HostId,
    HostMetricValue,
    HostStatus,
    HostValue,
    Invitation,
    InvitationValue,
    LatestMetricValues,
    ListHostsParams,
    Metadata,
    MetricValue,
    Monitor,
    MonitoredStatus,
    MonitorId,
    NotificationGroup,
    NotificationGroupId,
    NotificationGroupValue,
    Organization,
    Role,
    RoleFullname,
    RoleName,
    Service,
    ServiceMetricValue,
    ServiceName,
    ServiceValue,
    User,
    UserId,
    epoch_seconds,
)

if TYPE_CHECKING:
    from ..config import ClientConfig

logger = structlog.get_logger(__name__)

DEFAULT_API_BASE = "https://api.mackerelio.com"
DEFAULT_USER_AGENT = f"mackerel-client-python/{__version__}"


def parse_log_level(log_level_name: str) -> int:
    """Map a level name such as "info" or "DEBUG" to its logging level.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    level = logging.getLevelNamesMapping().get(log_level_name.upper())
    if level is None:
        msg = f"unknown log level: {log_level_name}"
        raise ValueError(msg)
    return level


def _client_logger(log_level_name: str | None):
    if log_level_name is None:
        return logger
    # Processors and output stay those configured by the application
    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(
            parse_log_level(log_level_name)
        ),
        logger_factory_args=(__name__,),
    )


class MackerelClient:
    """Client for the Mackerel REST API.

    Holds only immutable settings and a transport, so one instance can be
    shared between threads. Can be used as a context manager for automatic
    cleanup.
    """

    def __init__(
        self,
        api_key: str,
        api_base: str = DEFAULT_API_BASE,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        log_level: str | None = None,
    ):
        """Initialize the API client.

        Args:
            api_key: Mackerel API key, sent in the ``X-Api-Key`` header.
            api_base: Base URL of the API (default: https://api.mackerelio.com).
            user_agent: User-Agent header value.
            timeout: Request timeout in seconds, used when no transport is
                given (default: 30.0).
            transport: Transport executing the requests (default: httpx).
            log_level: Minimum level of the events this client logs. Without
                it the application's structlog configuration decides.

        Raises:
            ValueError: If api_key or api_base is empty, timeout is not
                positive, or log_level is not a logging level name.
        """
        if not api_key:
            msg = "api_key cannot be empty"
            raise ValueError(msg)
        if not api_base:
            msg = "api_base cannot be empty"
            raise ValueError(msg)

        self._api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.user_agent = user_agent
        self._transport = transport or HttpxTransport(timeout=timeout)
        self._logger = _client_logger(log_level)

    @classmethod
    def from_config(
        cls,
        config: "ClientConfig",
        transport: Transport | None = None,
    ) -> "MackerelClient":
        """Create a client from a loaded configuration."""
        return cls(
            config.api_key.get_secret_value(),
            config.api_base,
            user_agent=config.user_agent,
            timeout=config.timeout,
            transport=transport,
            log_level=config.log_level,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_base={self.api_base!r})"

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Release the transport's connections."""
        self._transport.close()

    def _request(
        self,
        endpoint: Endpoint,
        *,
        path_params: dict[str, str] | None = None,
        query: QueryParams | None = None,
        body: Any = NO_BODY,
        result: Any = None,
        key: str | None = None,
    ) -> Any:
        """Execute one API operation.

        Args:
            endpoint: Descriptor of the operation.
            path_params: Values for the path placeholders.
            query: Query parameters as (name, value) pairs.
            body: Request body.
            result: Expected type of the decoded result; None to ignore the
                response body.
            key: Top-level field of the response holding the result.

        Returns:
            The decoded result, or None.

        Raises:
            TransportError: If no response was received.
            ApiError: If the API returned a non-success status.
            DecodeError: If a success response did not match ``result``.
        """
        request = build_request(
            endpoint,
            api_base=self.api_base,
            api_key=self._api_key,
            user_agent=self.user_agent,
            path_params=path_params,
            query=query,
            body=body,
        )
        self._logger.debug(
            "Making API request",
            endpoint=endpoint.name,
            method=request.method,
            url=request.url,
        )

        start_time = time.time()
        try:
            response = self._transport.execute(request)
        except TransportError:
            observe_request(
                endpoint.name,
                request.method,
                TRANSPORT_ERROR_STATUS,
                time.time() - start_time,
            )
            raise
        duration = time.time() - start_time
        observe_request(endpoint.name, request.method, response.status_code, duration)

        self._logger.debug(
            "API request completed",
            endpoint=endpoint.name,
            method=request.method,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )
        return decode(response, result, key=key, redact=(self._api_key,))

    # Organization

    def get_organization(self) -> Organization:
        """Get the organization the API key belongs to."""
        return self._request(endpoints.GET_ORGANIZATION, result=Organization)

    # Users

    def list_users(self) -> list[User]:
        return self._request(endpoints.LIST_USERS, result=list[User], key="users")

    def delete_user(self, user_id: UserId) -> User:
        """Remove a user from the organization and return it."""
        return self._request(
            endpoints.DELETE_USER, path_params={"userId": user_id}, result=User
        )

    # Services

    def list_services(self) -> list[Service]:
        return self._request(
            endpoints.LIST_SERVICES, result=list[Service], key="services"
        )

    def create_service(self, service: ServiceValue) -> Service:
        return self._request(endpoints.CREATE_SERVICE, body=service, result=Service)

    def delete_service(self, service_name: ServiceName) -> Service:
        return self._request(
            endpoints.DELETE_SERVICE,
            path_params={"serviceName": service_name},
            result=Service,
        )

    def list_service_metric_names(self, service_name: ServiceName) -> list[str]:
        """List the names of the metrics posted to a service."""
        return self._request(
            endpoints.LIST_SERVICE_METRIC_NAMES,
            path_params={"serviceName": service_name},
            result=list[str],
            key="names",
        )

    # Roles

    def list_roles(self, service_name: ServiceName) -> list[Role]:
        return self._request(
            endpoints.LIST_ROLES,
            path_params={"serviceName": service_name},
            result=list[Role],
            key="roles",
        )

    def create_role(self, service_name: ServiceName, role: Role) -> Role:
        return self._request(
            endpoints.CREATE_ROLE,
            path_params={"serviceName": service_name},
            body=role,
            result=Role,
        )

    def delete_role(self, service_name: ServiceName, role_name: RoleName) -> Role:
        return self._request(
            endpoints.DELETE_ROLE,
            path_params={"serviceName": service_name, "roleName": role_name},
            result=Role,
        )

    # Hosts

    def create_host(self, host: HostValue) -> HostId:
        """Register a host.

        Returns:
            The id assigned to the new host.
        """
        return self._request(endpoints.CREATE_HOST, body=host, result=str, key="id")

    def get_host(self, host_id: HostId) -> Host:
        return self._request(
            endpoints.GET_HOST, path_params={"hostId": host_id}, result=Host, key="host"
        )

    def get_host_by_custom_identifier(self, custom_identifier: str) -> Host | None:
        """Find a host by its custom identifier.

        Returns:
            The host, or None if no host has this identifier.
        """
        try:
            return self._request(
                endpoints.GET_HOST_BY_CUSTOM_IDENTIFIER,
                path_params={"customIdentifier": custom_identifier},
                result=Host | None,
                key="host",
            )
        except NotFoundError:
            return None

    def update_host(self, host_id: HostId, host: HostValue) -> None:
        self._request(
            endpoints.UPDATE_HOST, path_params={"hostId": host_id}, body=host
        )

    def update_host_status(self, host_id: HostId, status: HostStatus) -> None:
        self._request(
            endpoints.UPDATE_HOST_STATUS,
            path_params={"hostId": host_id},
            body={"status": status},
        )

    def update_host_statuses(
        self, host_ids: Sequence[HostId], status: HostStatus
    ) -> None:
        """Set the status of several hosts at once."""
        self._request(
            endpoints.UPDATE_HOST_STATUSES,
            body={"ids": list(host_ids), "status": status},
        )

    def update_host_roles(
        self, host_id: HostId, role_fullnames: Sequence[RoleFullname]
    ) -> None:
        """Replace the roles of a host.

        Args:
            host_id: Host to update.
            role_fullnames: Roles as ``service:role`` strings.
        """
        self._request(
            endpoints.UPDATE_HOST_ROLES,
            path_params={"hostId": host_id},
            body={"roleFullnames": list(role_fullnames)},
        )

    def retire_host(self, host_id: HostId) -> None:
        self._request(endpoints.RETIRE_HOST, path_params={"hostId": host_id})

    def retire_hosts(self, host_ids: Sequence[HostId]) -> None:
        self._request(endpoints.RETIRE_HOSTS, body={"ids": list(host_ids)})

    def list_hosts(self, params: ListHostsParams | None = None) -> list[Host]:
        """List hosts, optionally filtered.

        Without filters the API returns the hosts in working or standby
        status.
        """
        return self._request(
            endpoints.LIST_HOSTS,
            query=params.query_params() if params else None,
            result=list[Host],
            key="hosts",
        )

    def list_host_metric_names(self, host_id: HostId) -> list[str]:
        return self._request(
            endpoints.LIST_HOST_METRIC_NAMES,
            path_params={"hostId": host_id},
            result=list[str],
            key="names",
        )

    def list_host_monitored_statuses(self, host_id: HostId) -> list[MonitoredStatus]:
        return self._request(
            endpoints.LIST_HOST_MONITORED_STATUSES,
            path_params={"hostId": host_id},
            result=list[MonitoredStatus],
            key="monitoredStatuses",
        )

    # Metrics

    def post_host_metric_values(self, values: Iterable[HostMetricValue]) -> None:
        self._request(endpoints.POST_HOST_METRIC_VALUES, body=list(values))

    def list_host_metric_values(
        self,
        host_id: HostId,
        name: str,
        from_: datetime,
        to: datetime,
    ) -> list[MetricValue]:
        """Fetch the values of one host metric between two times."""
        return self._request(
            endpoints.LIST_HOST_METRIC_VALUES,
            path_params={"hostId": host_id},
            query=[
                ("name", name),
                ("from", epoch_seconds(from_)),
                ("to", epoch_seconds(to)),
            ],
            result=list[MetricValue],
            key="metrics",
        )

    def list_latest_host_metric_values(
        self,
        host_ids: Iterable[HostId],
        names: Iterable[str],
    ) -> LatestMetricValues:
        """Fetch the latest values of metrics for several hosts.

        Returns:
            Mapping of host id to metric name to latest value. A metric
            without a recent value maps to None.
        """
        query = [("hostId", host_id) for host_id in host_ids]
        query.extend(("name", name) for name in names)
        return self._request(
            endpoints.LIST_LATEST_HOST_METRIC_VALUES,
            query=query,
            result=LatestMetricValues,
            key="tsdbLatest",
        )

    def post_service_metric_values(
        self,
        service_name: ServiceName,
        values: Iterable[ServiceMetricValue],
    ) -> None:
        self._request(
            endpoints.POST_SERVICE_METRIC_VALUES,
            path_params={"serviceName": service_name},
            body=list(values),
        )

    def list_service_metric_values(
        self,
        service_name: ServiceName,
        name: str,
        from_: datetime,
        to: datetime,
    ) -> list[MetricValue]:
        return self._request(
            endpoints.LIST_SERVICE_METRIC_VALUES,
            path_params={"serviceName": service_name},
            query=[
                ("name", name),
                ("from", epoch_seconds(from_)),
                ("to", epoch_seconds(to)),
            ],
            result=list[MetricValue],
            key="metrics",
        )

    # Monitors

    def list_monitors(self) -> list[Monitor]:
        return self._request(
            endpoints.LIST_MONITORS, result=list[Monitor], key="monitors"
        )

    def create_monitor(self, monitor: Monitor) -> Monitor:
        return self._request(endpoints.CREATE_MONITOR, body=monitor, result=Monitor)

    def get_monitor(self, monitor_id: MonitorId) -> Monitor:
        return self._request(
            endpoints.GET_MONITOR,
            path_params={"monitorId": monitor_id},
            result=Monitor,
            key="monitor",
        )

    def update_monitor(self, monitor_id: MonitorId, monitor: Monitor) -> Monitor:
        return self._request(
            endpoints.UPDATE_MONITOR,
            path_params={"monitorId": monitor_id},
            body=monitor,
            result=Monitor,
        )

    def delete_monitor(self, monitor_id: MonitorId) -> Monitor:
        return self._request(
            endpoints.DELETE_MONITOR,
            path_params={"monitorId": monitor_id},
            result=Monitor,
        )

    # Alerts

    def list_alerts(
        self,
        *,
        with_closed: bool = False,
        next_id: AlertId | None = None,
        limit: int | None = None,
    ) -> AlertsPage:
        """List alerts, newest first.

        Args:
            with_closed: Include closed alerts.
            next_id: Continue from the ``next_id`` of a previous page.
            limit: Maximum number of alerts in the page.

        Returns:
            One page of alerts. ``next_id`` is set when more remain.
        """
        query = [
            ("withClosed", "true" if with_closed else "false"),
            ("nextId", next_id),
            ("limit", limit),
        ]
        return self._request(endpoints.LIST_ALERTS, query=query, result=AlertsPage)

    def close_alert(self, alert_id: AlertId, reason: str) -> Alert:
        return self._request(
            endpoints.CLOSE_ALERT,
            path_params={"alertId": alert_id},
            body={"reason": reason},
            result=Alert,
        )

    # Channels

    def list_channels(self) -> list[Channel]:
        return self._request(
            endpoints.LIST_CHANNELS, result=list[Channel], key="channels"
        )

    def create_channel(self, channel: Channel) -> Channel:
        return self._request(endpoints.CREATE_CHANNEL, body=channel, result=Channel)

    def delete_channel(self, channel_id: ChannelId) -> Channel:
        return self._request(
            endpoints.DELETE_CHANNEL,
            path_params={"channelId": channel_id},
            result=Channel,
        )

    # Dashboards

    def list_dashboards(self) -> list[Dashboard]:
        return self._request(
            endpoints.LIST_DASHBOARDS, result=list[Dashboard], key="dashboards"
        )

    def create_dashboard(self, dashboard: DashboardValue) -> Dashboard:
        return self._request(
            endpoints.CREATE_DASHBOARD, body=dashboard, result=Dashboard
        )

    def get_dashboard(self, dashboard_id: DashboardId) -> Dashboard:
        return self._request(
            endpoints.GET_DASHBOARD,
            path_params={"dashboardId": dashboard_id},
            result=Dashboard,
        )

    def update_dashboard(
        self, dashboard_id: DashboardId, dashboard: DashboardValue
    ) -> Dashboard:
        return self._request(
            endpoints.UPDATE_DASHBOARD,
            path_params={"dashboardId": dashboard_id},
            body=dashboard,
            result=Dashboard,
        )

    def delete_dashboard(self, dashboard_id: DashboardId) -> Dashboard:
        return self._request(
            endpoints.DELETE_DASHBOARD,
            path_params={"dashboardId": dashboard_id},
            result=Dashboard,
        )

    # Invitations

    def list_invitations(self) -> list[Invitation]:
        return self._request(
            endpoints.LIST_INVITATIONS, result=list[Invitation], key="invitations"
        )

    def create_invitation(self, invitation: InvitationValue) -> Invitation:
        return self._request(
            endpoints.CREATE_INVITATION, body=invitation, result=Invitation
        )

    def revoke_invitation(self, email: str) -> None:
        self._request(endpoints.REVOKE_INVITATION, body={"email": email})

    # Metadata

    def get_host_metadata(self, host_id: HostId, namespace: str) -> Any:
        """Get the JSON document stored under a namespace of a host."""
        return self._request(
            endpoints.GET_HOST_METADATA,
            path_params={"hostId": host_id, "namespace": namespace},
            result=Any,
        )

    def put_host_metadata(self, host_id: HostId, namespace: str, metadata: Any) -> None:
        """Store a JSON document under a namespace of a host.

        ``metadata`` may be any JSON value, including None (sent as null).
        """
        self._request(
            endpoints.PUT_HOST_METADATA,
            path_params={"hostId": host_id, "namespace": namespace},
            body=metadata,
        )

    def delete_host_metadata(self, host_id: HostId, namespace: str) -> None:
        self._request(
            endpoints.DELETE_HOST_METADATA,
            path_params={"hostId": host_id, "namespace": namespace},
        )

    def list_host_metadata(self, host_id: HostId) -> list[Metadata]:
        return self._request(
            endpoints.LIST_HOST_METADATA,
            path_params={"hostId": host_id},
            result=list[Metadata],
            key="metadata",
        )

    def get_service_metadata(self, service_name: ServiceName, namespace: str) -> Any:
        return self._request(
            endpoints.GET_SERVICE_METADATA,
            path_params={"serviceName": service_name, "namespace": namespace},
            result=Any,
        )

    def put_service_metadata(
        self, service_name: ServiceName, namespace: str, metadata: Any
    ) -> None:
        self._request(
            endpoints.PUT_SERVICE_METADATA,
            path_params={"serviceName": service_name, "namespace": namespace},
            body=metadata,
        )

    def delete_service_metadata(
        self, service_name: ServiceName, namespace: str
    ) -> None:
        self._request(
            endpoints.DELETE_SERVICE_METADATA,
            path_params={"serviceName": service_name, "namespace": namespace},
        )

    def list_service_metadata(self, service_name: ServiceName) -> list[Metadata]:
        return self._request(
            endpoints.LIST_SERVICE_METADATA,
            path_params={"serviceName": service_name},
            result=list[Metadata],
            key="metadata",
        )

    def get_role_metadata(
        self, service_name: ServiceName, role_name: RoleName, namespace: str
    ) -> Any:
        return self._request(
            endpoints.GET_ROLE_METADATA,
            path_params={
                "serviceName": service_name,
                "roleName": role_name,
                "namespace": namespace,
            },
            result=Any,
        )

    def put_role_metadata(
        self,
        service_name: ServiceName,
        role_name: RoleName,
        namespace: str,
        metadata: Any,
    ) -> None:
        self._request(
            endpoints.PUT_ROLE_METADATA,
            path_params={
                "serviceName": service_name,
                "roleName": role_name,
                "namespace": namespace,
            },
            body=metadata,
        )

    def delete_role_metadata(
        self, service_name: ServiceName, role_name: RoleName, namespace: str
    ) -> None:
        self._request(
            endpoints.DELETE_ROLE_METADATA,
            path_params={
                "serviceName": service_name,
                "roleName": role_name,
                "namespace": namespace,
            },
        )

    def list_role_metadata(
        self, service_name: ServiceName, role_name: RoleName
    ) -> list[Metadata]:
        return self._request(
            endpoints.LIST_ROLE_METADATA,
            path_params={"serviceName": service_name, "roleName": role_name},
            result=list[Metadata],
            key="metadata",
        )

    # Downtimes

    def list_downtimes(self) -> list[Downtime]:
        return self._request(
            endpoints.LIST_DOWNTIMES, result=list[Downtime], key="downtimes"
        )

    def create_downtime(self, downtime: DowntimeValue) -> Downtime:
        return self._request(endpoints.CREATE_DOWNTIME, body=downtime, result=Downtime)

    def update_downtime(
        self, downtime_id: DowntimeId, downtime: DowntimeValue
    ) -> Downtime:
        return self._request(
            endpoints.UPDATE_DOWNTIME,
            path_params={"downtimeId": downtime_id},
            body=downtime,
            result=Downtime,
        )

    def delete_downtime(self, downtime_id: DowntimeId) -> Downtime:
        return self._request(
            endpoints.DELETE_DOWNTIME,
            path_params={"downtimeId": downtime_id},
            result=Downtime,
        )

    # Notification groups

    def list_notification_groups(self) -> list[NotificationGroup]:
        return self._request(
            endpoints.LIST_NOTIFICATION_GROUPS,
            result=list[NotificationGroup],
            key="notificationGroups",
        )

    def create_notification_group(
        self, notification_group: NotificationGroupValue
    ) -> NotificationGroup:
        return self._request(
            endpoints.CREATE_NOTIFICATION_GROUP,
            body=notification_group,
            result=NotificationGroup,
        )

    def update_notification_group(
        self,
        notification_group_id: NotificationGroupId,
        notification_group: NotificationGroupValue,
    ) -> NotificationGroup:
        return self._request(
            endpoints.UPDATE_NOTIFICATION_GROUP,
            path_params={"notificationGroupId": notification_group_id},
            body=notification_group,
            result=NotificationGroup,
        )

    def delete_notification_group(
        self, notification_group_id: NotificationGroupId
    ) -> NotificationGroup:
        return self._request(
            endpoints.DELETE_NOTIFICATION_GROUP,
            path_params={"notificationGroupId": notification_group_id},
            result=NotificationGroup,
        )

    # Alert group settings

    def list_alert_group_settings(self) -> list[AlertGroupSetting]:
        return self._request(
            endpoints.LIST_ALERT_GROUP_SETTINGS,
            result=list[AlertGroupSetting],
            key="alertGroupSettings",
        )

    def create_alert_group_setting(
        self, setting: AlertGroupSettingValue
    ) -> AlertGroupSetting:
        return self._request(
            endpoints.CREATE_ALERT_GROUP_SETTING,
            body=setting,
            result=AlertGroupSetting,
        )

    def get_alert_group_setting(
        self, setting_id: AlertGroupSettingId
    ) -> AlertGroupSetting:
        return self._request(
            endpoints.GET_ALERT_GROUP_SETTING,
            path_params={"alertGroupSettingId": setting_id},
            result=AlertGroupSetting,
        )

    def update_alert_group_setting(
        self, setting_id: AlertGroupSettingId, setting: AlertGroupSettingValue
    ) -> AlertGroupSetting:
        return self._request(
            endpoints.UPDATE_ALERT_GROUP_SETTING,
            path_params={"alertGroupSettingId": setting_id},
            body=setting,
            result=AlertGroupSetting,
        )

    def delete_alert_group_setting(
        self, setting_id: AlertGroupSettingId
    ) -> AlertGroupSetting:
        return self._request(
            endpoints.DELETE_ALERT_GROUP_SETTING,
            path_params={"alertGroupSettingId": setting_id},
            result=AlertGroupSetting,
        )

    # Check monitoring

    def create_check_reports(self, reports: Iterable[CheckReport]) -> None:
        """Post the results of check monitoring run outside the agent."""
        self._request(endpoints.CREATE_CHECK_REPORTS, body={"reports": list(reports)})

    # Graphs

    def create_graph_definitions(self, definitions: Iterable[GraphDefinition]) -> None:
        self._request(endpoints.CREATE_GRAPH_DEFINITIONS, body=list(definitions))

    def list_graph_annotations(
        self,
        service_name: ServiceName,
        from_: datetime,
        to: datetime,
    ) -> list[GraphAnnotation]:
        query = [
            ("service", service_name),
            ("from", epoch_seconds(from_)),
            ("to", epoch_seconds(to)),
        ]
        return self._request(
            endpoints.LIST_GRAPH_ANNOTATIONS,
            query=query,
            result=list[GraphAnnotation],
            key="graphAnnotations",
        )

    def create_graph_annotation(
        self, annotation: GraphAnnotationValue
    ) -> GraphAnnotation:
        return self._request(
            endpoints.CREATE_GRAPH_ANNOTATION,
            body=annotation,
            result=GraphAnnotation,
        )

    def update_graph_annotation(
        self, annotation_id: GraphAnnotationId, annotation: GraphAnnotationValue
    ) -> GraphAnnotation:
        return self._request(
            endpoints.UPDATE_GRAPH_ANNOTATION,
            path_params={"graphAnnotationId": annotation_id},
            body=annotation,
            result=GraphAnnotation,
        )

    def delete_graph_annotation(
        self, annotation_id: GraphAnnotationId
    ) -> GraphAnnotation:
        return self._request(
            endpoints.DELETE_GRAPH_ANNOTATION,
            path_params={"graphAnnotationId": annotation_id},
            result=GraphAnnotation,
        )

    # AWS integrations

    def list_aws_integrations(self) -> list[AWSIntegration]:
        return self._request(
            endpoints.LIST_AWS_INTEGRATIONS,
            result=list[AWSIntegration],
            key="aws_integrations",
        )

    def create_aws_integration(
        self, integration: AWSIntegrationValue
    ) -> AWSIntegration:
        return self._request(
            endpoints.CREATE_AWS_INTEGRATION,
            body=integration,
            result=AWSIntegration,
        )

    def get_aws_integration(self, integration_id: AWSIntegrationId) -> AWSIntegration:
        return self._request(
            endpoints.GET_AWS_INTEGRATION,
            path_params={"awsIntegrationId": integration_id},
            result=AWSIntegration,
        )

    def update_aws_integration(
        self, integration_id: AWSIntegrationId, integration: AWSIntegrationValue
    ) -> AWSIntegration:
        return self._request(
            endpoints.UPDATE_AWS_INTEGRATION,
            path_params={"awsIntegrationId": integration_id},
            body=integration,
            result=AWSIntegration,
        )

    def delete_aws_integration(
        self, integration_id: AWSIntegrationId
    ) -> AWSIntegration:
        return self._request(
            endpoints.DELETE_AWS_INTEGRATION,
            path_params={"awsIntegrationId": integration_id},
            result=AWSIntegration,
        )

    def create_aws_integration_external_id(self) -> str:
        """Generate the external id to set on the IAM role's trust policy."""
        return self._request(
            endpoints.CREATE_AWS_INTEGRATION_EXTERNAL_ID,
            result=str,
            key="externalId",
        )

    def list_aws_integration_excludable_metrics(self) -> AWSExcludableMetrics:
        """List, per AWS service, the metrics that can be excluded."""
        return self._request(
            endpoints.LIST_AWS_INTEGRATION_EXCLUDABLE_METRICS,
            result=AWSExcludableMetrics,
        )
