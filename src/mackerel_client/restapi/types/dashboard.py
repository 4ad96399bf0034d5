"""Dashboard models."""

from .base import MackerelModel, Timestamp

DashboardId = str


class DashboardValue(MackerelModel):
    """Fields accepted when creating or updating a dashboard."""

    title: str
    body_markdown: str
    url_path: str


class Dashboard(DashboardValue):
    """A custom dashboard."""

    id: DashboardId
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
