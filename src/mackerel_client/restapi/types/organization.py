"""Organization model."""

from .base import MackerelModel


class Organization(MackerelModel):
    """The organization the API key belongs to."""

    name: str
    display_name: str | None = None
