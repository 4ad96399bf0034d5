"""Invitation models."""

from .base import MackerelModel, Timestamp
from .user import UserAuthority


class InvitationValue(MackerelModel):
    """Fields accepted when inviting a user."""

    email: str
    authority: UserAuthority


class Invitation(InvitationValue):
    """A pending invitation."""

    expires_at: Timestamp
