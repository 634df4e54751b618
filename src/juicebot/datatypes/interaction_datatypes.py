"""
Request-scoped snapshot of an incoming slash command invocation.

An :class:`Interaction` is built once from the live py-cord context and is
never mutated. Workflows read it instead of the context so they can be
exercised without a gateway connection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import discord

from juicebot.datatypes.discord_datatypes import ChannelID, GuildID, RoleID, UserID


@dataclass(frozen=True, slots=True)
class Caller:
    """The guild member who invoked a command."""
    user_id: UserID
    role_ids: frozenset[RoleID] = field(default_factory=frozenset)

    def has_role(self, role_id: RoleID) -> bool:
        return role_id in self.role_ids


@dataclass(frozen=True, slots=True)
class CommandOption:
    """One typed option value as sent by the platform.

    ``option_type`` is kept as the raw integer so that unexpected types are
    still represented and can be rejected by validation.
    """
    name: str
    option_type: int
    value: Any


@dataclass(frozen=True, slots=True)
class Interaction:
    """A single command invocation.

    Attributes:
        command_name: Registered name of the invoked command
        guild_id: Guild the command was used in, ``None`` in direct messages
        channel_id: Channel the command was used in
        caller: Invoking member, ``None`` when the platform sent no member
        options: Options in the order the platform delivered them
    """
    command_name: str
    guild_id: Optional[GuildID]
    channel_id: Optional[ChannelID]
    caller: Optional[Caller]
    options: tuple[CommandOption, ...] = ()

    @classmethod
    def from_payload(
        cls,
        data: Mapping[str, Any],
        *,
        guild_id: Optional[int],
        channel_id: Optional[int],
        caller: Optional[Caller],
    ) -> "Interaction":
        """Build an interaction from the raw application command payload."""
        options = tuple(
            CommandOption(
                name=str(raw.get("name", "")),
                option_type=int(raw.get("type", 0)),
                value=raw.get("value"),
            )
            for raw in data.get("options") or []
        )
        return cls(
            command_name=str(data.get("name", "")),
            guild_id=GuildID(guild_id) if guild_id is not None else None,
            channel_id=ChannelID(channel_id) if channel_id is not None else None,
            caller=caller,
            options=options,
        )

    @classmethod
    def from_context(cls, application_context: discord.ApplicationContext) -> "Interaction":
        """Snapshot a live py-cord application context."""
        interaction = application_context.interaction
        user = interaction.user

        caller: Optional[Caller] = None
        if isinstance(user, discord.Member):
            # Raw IDs from the payload; Member.roles only yields roles in the guild cache.
            caller = Caller(
                user_id=UserID(user.id),
                role_ids=frozenset(RoleID(role_id) for role_id in user._roles),
            )

        return cls.from_payload(
            interaction.data or {},
            guild_id=interaction.guild_id,
            channel_id=interaction.channel_id,
            caller=caller,
        )
