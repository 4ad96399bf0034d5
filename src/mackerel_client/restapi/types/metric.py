"""Metric value models."""

from .base import MackerelModel, Timestamp
from .host import HostId


class MetricValue(MackerelModel):
    """A single metric data point."""

    time: Timestamp
    value: float


class HostMetricValue(MetricValue):
    """A data point for a host metric, as posted to the API."""

    host_id: HostId
    name: str


class ServiceMetricValue(MetricValue):
    """A data point for a service metric, as posted to the API."""

    name: str


# host id -> metric name -> latest value (None when the host has no data)
LatestMetricValues = dict[HostId, dict[str, MetricValue | None]]
