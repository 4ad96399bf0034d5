"""Endpoint descriptors for the Mackerel API.

Each operation the client supports is described once here by its HTTP
method, path template and whether it sends a JSON body. Path templates use
``{name}`` placeholders that the request builder fills in.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from urllib.parse import quote

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class Endpoint:
    """Static description of one API operation."""

    method: str
    path: str
    has_body: bool = False
    name: str = ""

    @cached_property
    def placeholders(self) -> frozenset[str]:
        """Names of the placeholders in the path template."""
        return frozenset(_PLACEHOLDER.findall(self.path))

    def resolve(self, path_params: Mapping[str, str] | None = None) -> str:
        """Substitute path parameters into the template.

        Each value is percent-encoded as a single path segment.

        Raises:
            ValueError: If a placeholder has no value or a value has no
                placeholder.
        """
        params = dict(path_params or {})
        if missing := self.placeholders - params.keys():
            msg = f"{self.describe()}: missing path parameters {sorted(missing)}"
            raise ValueError(msg)
        if unexpected := params.keys() - self.placeholders:
            msg = f"{self.describe()}: unexpected path parameters {sorted(unexpected)}"
            raise ValueError(msg)
        return _PLACEHOLDER.sub(
            lambda match: quote(str(params[match.group(1)]), safe=""),
            self.path,
        )

    def describe(self) -> str:
        return self.name or f"{self.method} {self.path}"


# Organization
GET_ORGANIZATION = Endpoint("GET", "/api/v0/org", name="get_organization")

# Users
LIST_USERS = Endpoint("GET", "/api/v0/users", name="list_users")
DELETE_USER = Endpoint("DELETE", "/api/v0/users/{userId}", name="delete_user")

# Services
LIST_SERVICES = Endpoint("GET", "/api/v0/services", name="list_services")
CREATE_SERVICE = Endpoint("POST", "/api/v0/services", True, "create_service")
DELETE_SERVICE = Endpoint(
    "DELETE", "/api/v0/services/{serviceName}", name="delete_service"
)
LIST_SERVICE_METRIC_NAMES = Endpoint(
    "GET",
    "/api/v0/services/{serviceName}/metric-names",
    name="list_service_metric_names",
)

# Roles
LIST_ROLES = Endpoint("GET", "/api/v0/services/{serviceName}/roles", name="list_roles")
CREATE_ROLE = Endpoint(
    "POST", "/api/v0/services/{serviceName}/roles", True, "create_role"
)
DELETE_ROLE = Endpoint(
    "DELETE",
    "/api/v0/services/{serviceName}/roles/{roleName}",
    name="delete_role",
)

# Hosts
CREATE_HOST = Endpoint("POST", "/api/v0/hosts", True, "create_host")
GET_HOST = Endpoint("GET", "/api/v0/hosts/{hostId}", name="get_host")
GET_HOST_BY_CUSTOM_IDENTIFIER = Endpoint(
    "GET",
    "/api/v0/hosts-by-custom-identifier/{customIdentifier}",
    name="get_host_by_custom_identifier",
)
UPDATE_HOST = Endpoint("PUT", "/api/v0/hosts/{hostId}", True, "update_host")
UPDATE_HOST_STATUS = Endpoint(
    "POST", "/api/v0/hosts/{hostId}/status", True, "update_host_status"
)
UPDATE_HOST_STATUSES = Endpoint(
    "POST", "/api/v0/hosts/bulk-update-statuses", True, "update_host_statuses"
)
UPDATE_HOST_ROLES = Endpoint(
    "PUT", "/api/v0/hosts/{hostId}/role-fullnames", True, "update_host_roles"
)
RETIRE_HOST = Endpoint("POST", "/api/v0/hosts/{hostId}/retire", name="retire_host")
RETIRE_HOSTS = Endpoint("POST", "/api/v0/hosts/bulk-retire", True, "retire_hosts")
LIST_HOSTS = Endpoint("GET", "/api/v0/hosts", name="list_hosts")
LIST_HOST_METRIC_NAMES = Endpoint(
    "GET", "/api/v0/hosts/{hostId}/metric-names", name="list_host_metric_names"
)
LIST_HOST_MONITORED_STATUSES = Endpoint(
    "GET",
    "/api/v0/hosts/{hostId}/monitored-statuses",
    name="list_host_monitored_statuses",
)

# Metrics
POST_HOST_METRIC_VALUES = Endpoint(
    "POST", "/api/v0/tsdb", True, "post_host_metric_values"
)
LIST_HOST_METRIC_VALUES = Endpoint(
    "GET", "/api/v0/hosts/{hostId}/metrics", name="list_host_metric_values"
)
LIST_LATEST_HOST_METRIC_VALUES = Endpoint(
    "GET", "/api/v0/tsdb/latest", name="list_latest_host_metric_values"
)
POST_SERVICE_METRIC_VALUES = Endpoint(
    "POST",
    "/api/v0/services/{serviceName}/tsdb",
    True,
    "post_service_metric_values",
)
LIST_SERVICE_METRIC_VALUES = Endpoint(
    "GET",
    "/api/v0/services/{serviceName}/metrics",
    name="list_service_metric_values",
)

# Monitors
LIST_MONITORS = Endpoint("GET", "/api/v0/monitors", name="list_monitors")
CREATE_MONITOR = Endpoint("POST", "/api/v0/monitors", True, "create_monitor")
GET_MONITOR = Endpoint("GET", "/api/v0/monitors/{monitorId}", name="get_monitor")
UPDATE_MONITOR = Endpoint(
    "PUT", "/api/v0/monitors/{monitorId}", True, "update_monitor"
)
DELETE_MONITOR = Endpoint(
    "DELETE", "/api/v0/monitors/{monitorId}", name="delete_monitor"
)

# Alerts
LIST_ALERTS = Endpoint("GET", "/api/v0/alerts", name="list_alerts")
CLOSE_ALERT = Endpoint("POST", "/api/v0/alerts/{alertId}/close", True, "close_alert")

# Channels
LIST_CHANNELS = Endpoint("GET", "/api/v0/channels", name="list_channels")
CREATE_CHANNEL = Endpoint("POST", "/api/v0/channels", True, "create_channel")
DELETE_CHANNEL = Endpoint(
    "DELETE", "/api/v0/channels/{channelId}", name="delete_channel"
)

# Dashboards
LIST_DASHBOARDS = Endpoint("GET", "/api/v0/dashboards", name="list_dashboards")
CREATE_DASHBOARD = Endpoint("POST", "/api/v0/dashboards", True, "create_dashboard")
GET_DASHBOARD = Endpoint(
    "GET", "/api/v0/dashboards/{dashboardId}", name="get_dashboard"
)
UPDATE_DASHBOARD = Endpoint(
    "PUT", "/api/v0/dashboards/{dashboardId}", True, "update_dashboard"
)
DELETE_DASHBOARD = Endpoint(
    "DELETE", "/api/v0/dashboards/{dashboardId}", name="delete_dashboard"
)

# Invitations
LIST_INVITATIONS = Endpoint("GET", "/api/v0/invitations", name="list_invitations")
CREATE_INVITATION = Endpoint(
    "POST", "/api/v0/invitations", True, "create_invitation"
)
REVOKE_INVITATION = Endpoint(
    "POST", "/api/v0/invitations/revoke", True, "revoke_invitation"
)

# Metadata
GET_HOST_METADATA = Endpoint(
    "GET", "/api/v0/hosts/{hostId}/metadata/{namespace}", name="get_host_metadata"
)
PUT_HOST_METADATA = Endpoint(
    "PUT", "/api/v0/hosts/{hostId}/metadata/{namespace}", True, "put_host_metadata"
)
DELETE_HOST_METADATA = Endpoint(
    "DELETE",
    "/api/v0/hosts/{hostId}/metadata/{namespace}",
    name="delete_host_metadata",
)
LIST_HOST_METADATA = Endpoint(
    "GET", "/api/v0/hosts/{hostId}/metadata", name="list_host_metadata"
)
GET_SERVICE_METADATA = Endpoint(
    "GET",
    "/api/v0/services/{serviceName}/metadata/{namespace}",
    name="get_service_metadata",
)
PUT_SERVICE_METADATA = Endpoint(
    "PUT",
    "/api/v0/services/{serviceName}/metadata/{namespace}",
    True,
    "put_service_metadata",
)
DELETE_SERVICE_METADATA = Endpoint(
    "DELETE",
    "/api/v0/services/{serviceName}/metadata/{namespace}",
    name="delete_service_metadata",
)
LIST_SERVICE_METADATA = Endpoint(
    "GET", "/api/v0/services/{serviceName}/metadata", name="list_service_metadata"
)
GET_ROLE_METADATA = Endpoint(
    "GET",
    "/api/v0/services/{serviceName}/roles/{roleName}/metadata/{namespace}",
    name="get_role_metadata",
)
PUT_ROLE_METADATA = Endpoint(
    "PUT",
    "/api/v0/services/{serviceName}/roles/{roleName}/metadata/{namespace}",
    True,
    "put_role_metadata",
)
DELETE_ROLE_METADATA = Endpoint(
    "DELETE",
    "/api/v0/services/{serviceName}/roles/{roleName}/metadata/{namespace}",
    name="delete_role_metadata",
)
LIST_ROLE_METADATA = Endpoint(
    "GET",
    "/api/v0/services/{serviceName}/roles/{roleName}/metadata",
    name="list_role_metadata",
)

# Downtimes
LIST_DOWNTIMES = Endpoint("GET", "/api/v0/downtimes", name="list_downtimes")
CREATE_DOWNTIME = Endpoint("POST", "/api/v0/downtimes", True, "create_downtime")
UPDATE_DOWNTIME = Endpoint(
    "PUT", "/api/v0/downtimes/{downtimeId}", True, "update_downtime"
)
DELETE_DOWNTIME = Endpoint(
    "DELETE", "/api/v0/downtimes/{downtimeId}", name="delete_downtime"
)

# Notification groups
LIST_NOTIFICATION_GROUPS = Endpoint(
    "GET", "/api/v0/notification-groups", name="list_notification_groups"
)
CREATE_NOTIFICATION_GROUP = Endpoint(
    "POST", "/api/v0/notification-groups", True, "create_notification_group"
)
UPDATE_NOTIFICATION_GROUP = Endpoint(
    "PUT",
    "/api/v0/notification-groups/{notificationGroupId}",
    True,
    "update_notification_group",
)
DELETE_NOTIFICATION_GROUP = Endpoint(
    "DELETE",
    "/api/v0/notification-groups/{notificationGroupId}",
    name="delete_notification_group",
)

# Alert group settings
LIST_ALERT_GROUP_SETTINGS = Endpoint(
    "GET", "/api/v0/alert-group-settings", name="list_alert_group_settings"
)
CREATE_ALERT_GROUP_SETTING = Endpoint(
    "POST", "/api/v0/alert-group-settings", True, "create_alert_group_setting"
)
GET_ALERT_GROUP_SETTING = Endpoint(
    "GET",
    "/api/v0/alert-group-settings/{alertGroupSettingId}",
    name="get_alert_group_setting",
)
UPDATE_ALERT_GROUP_SETTING = Endpoint(
    "PUT",
    "/api/v0/alert-group-settings/{alertGroupSettingId}",
    True,
    "update_alert_group_setting",
)
DELETE_ALERT_GROUP_SETTING = Endpoint(
    "DELETE",
    "/api/v0/alert-group-settings/{alertGroupSettingId}",
    name="delete_alert_group_setting",
)

# Check monitoring
CREATE_CHECK_REPORTS = Endpoint(
    "POST", "/api/v0/monitoring/checks/report", True, "create_check_reports"
)

# Graph definitions and annotations
CREATE_GRAPH_DEFINITIONS = Endpoint(
    "POST", "/api/v0/graph-defs/create", True, "create_graph_definitions"
)
LIST_GRAPH_ANNOTATIONS = Endpoint(
    "GET", "/api/v0/graph-annotations", name="list_graph_annotations"
)
CREATE_GRAPH_ANNOTATION = Endpoint(
    "POST", "/api/v0/graph-annotations", True, "create_graph_annotation"
)
UPDATE_GRAPH_ANNOTATION = Endpoint(
    "PUT",
    "/api/v0/graph-annotations/{graphAnnotationId}",
    True,
    "update_graph_annotation",
)
DELETE_GRAPH_ANNOTATION = Endpoint(
    "DELETE",
    "/api/v0/graph-annotations/{graphAnnotationId}",
    name="delete_graph_annotation",
)

# AWS integrations
LIST_AWS_INTEGRATIONS = Endpoint(
    "GET", "/api/v0/aws-integrations", name="list_aws_integrations"
)
CREATE_AWS_INTEGRATION = Endpoint(
    "POST", "/api/v0/aws-integrations", True, "create_aws_integration"
)
GET_AWS_INTEGRATION = Endpoint(
    "GET",
    "/api/v0/aws-integrations/{awsIntegrationId}",
    name="get_aws_integration",
)
UPDATE_AWS_INTEGRATION = Endpoint(
    "PUT",
    "/api/v0/aws-integrations/{awsIntegrationId}",
    True,
    "update_aws_integration",
)
DELETE_AWS_INTEGRATION = Endpoint(
    "DELETE",
    "/api/v0/aws-integrations/{awsIntegrationId}",
    name="delete_aws_integration",
)
CREATE_AWS_INTEGRATION_EXTERNAL_ID = Endpoint(
    "POST",
    "/api/v0/aws-integrations-external-id",
    name="create_aws_integration_external_id",
)
LIST_AWS_INTEGRATION_EXCLUDABLE_METRICS = Endpoint(
    "GET",
    "/api/v0/aws-integrations-excludable-metrics",
    name="list_aws_integration_excludable_metrics",
)
