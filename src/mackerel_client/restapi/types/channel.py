"""Notification channel models.

Channels are a tagged union keyed by ``type``. Email, Slack and webhook
channels carry their own settings; the remaining kinds the API lists
(LINE, Chatwork, PagerDuty, ...) only expose a name and share
:class:`NamedChannel`. A kind unknown to this client decodes into
:class:`UnknownChannel`.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Tag

from .base import MackerelModel, OpenStrEnum, Timestamp
from .user import UserId

ChannelId = str


class NotificationEvent(OpenStrEnum):
    """Events a channel can be notified of."""

    ALERT = "alert"
    ALERT_GROUP = "alertGroup"
    HOST_STATUS = "hostStatus"
    HOST_REGISTER = "hostRegister"
    HOST_RETIRE = "hostRetire"
    MONITOR = "monitor"


class _ChannelFields(MackerelModel):
    id: ChannelId | None = None
    name: str
    suspended_at: Timestamp | None = None


class EmailChannel(_ChannelFields):
    """Email notification channel."""

    type: Literal["email"] = "email"
    emails: list[str] = []
    user_ids: list[UserId] = []
    events: list[NotificationEvent] = []


class SlackChannel(_ChannelFields):
    """Slack notification channel."""

    type: Literal["slack"] = "slack"
    url: str
    enabled_graph_image: bool = False
    mentions: dict[str, str] = {}
    events: list[NotificationEvent] = []


class WebhookChannel(_ChannelFields):
    """Webhook notification channel."""

    type: Literal["webhook"] = "webhook"
    url: str
    enabled_graph_image: bool = False
    events: list[NotificationEvent] = []


NAMED_CHANNEL_TYPES = (
    "line",
    "chatwork",
    "typetalk",
    "twilio",
    "pagerduty",
    "opsgenie",
    "yammer",
    "microsoft-teams",
    "amazon-event-bridge",
)


class NamedChannel(_ChannelFields):
    """A channel kind whose settings the API does not expose."""

    type: Literal[
        "line",
        "chatwork",
        "typetalk",
        "twilio",
        "pagerduty",
        "opsgenie",
        "yammer",
        "microsoft-teams",
        "amazon-event-bridge",
    ]


class UnknownChannel(MackerelModel):
    """A channel whose kind this client does not know."""

    model_config = ConfigDict(extra="allow")

    type: str
    id: ChannelId | None = None
    name: str = ""


def _channel_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if not isinstance(kind, str):
        return "unknown"
    if kind in ("email", "slack", "webhook"):
        return kind
    if kind in NAMED_CHANNEL_TYPES:
        return "named"
    return "unknown"


Channel = Annotated[
    Union[
        Annotated[EmailChannel, Tag("email")],
        Annotated[SlackChannel, Tag("slack")],
        Annotated[WebhookChannel, Tag("webhook")],
        Annotated[NamedChannel, Tag("named")],
        Annotated[UnknownChannel, Tag("unknown")],
    ],
    Discriminator(_channel_tag),
]
