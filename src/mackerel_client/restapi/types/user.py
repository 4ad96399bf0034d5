"""User models."""

from pydantic import Field

from .base import MackerelModel, OpenStrEnum, Timestamp

UserId = str


class UserAuthority(OpenStrEnum):
    """Authority of a user within the organization."""

    OWNER = "owner"
    MANAGER = "manager"
    COLLABORATOR = "collaborator"
    VIEWER = "viewer"


class User(MackerelModel):
    """A member of the organization."""

    id: UserId
    screen_name: str
    email: str
    authority: UserAuthority = UserAuthority.COLLABORATOR
    is_in_registration_process: bool = False
    is_mfa_enabled: bool = Field(False, alias="isMFAEnabled")
    authentication_methods: list[str] = []
    joined_at: Timestamp | None = None
