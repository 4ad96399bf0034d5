"""Metadata models.

Metadata values are arbitrary JSON documents and are passed through
untyped; only the namespace listing has a fixed shape.
"""

from .base import MackerelModel


class Metadata(MackerelModel):
    """A metadata namespace attached to a host, service or role."""

    namespace: str
