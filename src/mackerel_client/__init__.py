"""Mackerel API client.

Typed Python client for the Mackerel server-monitoring REST API:
hosts, services, roles, metrics, monitors, alerts, channels, dashboards,
invitations and more.
"""

__version__ = "0.1.0"

from .restapi import MackerelClient  # noqa: E402

__all__ = ["MackerelClient", "__version__"]
