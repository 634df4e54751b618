"""
Permission overwrite value types.

A permission overwrite is a per-channel rule that allows or denies a set
of capabilities for one role or one member. Allow and deny are plain
bitmasks in the platform's permission bit layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from juicebot.datatypes.discord_datatypes import ChannelID, RoleID, Snowflake, UserID


VIEW_CHANNEL = 1 << 10
SEND_MESSAGES = 1 << 11

VIEW_AND_SEND = VIEW_CHANNEL | SEND_MESSAGES


class OverwriteSubject(IntEnum):
    """Kind of subject an overwrite applies to, using the platform's values."""

    ROLE = 0
    MEMBER = 1

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class PermissionOverwrite:
    """One overwrite to apply to a channel.

    Attributes:
        subject_id: Role or member the rule targets
        subject: Whether ``subject_id`` names a role or a member
        allow: Bitmask of granted permissions
        deny: Bitmask of denied permissions
    """
    subject_id: Snowflake
    subject: OverwriteSubject
    allow: int = 0
    deny: int = 0

    def __post_init__(self) -> None:
        if self.allow < 0 or self.deny < 0:
            raise ValueError("Permission bitmasks cannot be negative")
        if self.allow & self.deny:
            raise ValueError("A permission cannot be both allowed and denied")

    @classmethod
    def for_role(cls, role_id: RoleID, *, allow: int = 0, deny: int = 0) -> "PermissionOverwrite":
        return cls(role_id, OverwriteSubject.ROLE, allow, deny)

    @classmethod
    def for_member(cls, user_id: UserID, *, allow: int = 0, deny: int = 0) -> "PermissionOverwrite":
        return cls(user_id, OverwriteSubject.MEMBER, allow, deny)


@dataclass(frozen=True, slots=True)
class CreatedChannel:
    """A text channel as returned by the platform after creation."""
    channel_id: ChannelID
    name: str
