"""
Thin async wrapper over the REST calls Juicebot makes.

The workflows only ever talk to a :class:`GuildGateway`. The production
implementation forwards to py-cord's HTTP client, so rate limiting and
retries stay with the library; tests substitute a recording fake.
Errors raised by py-cord (:class:`discord.HTTPException` and friends) are
propagated unchanged.
"""

from __future__ import annotations

from typing import Protocol

import discord

from juicebot.datatypes.discord_datatypes import ChannelID, GuildID, RoleID, UserID
from juicebot.datatypes.permission_datatypes import CreatedChannel, PermissionOverwrite

GUILD_TEXT_CHANNEL = 0


class GuildGateway(Protocol):
    """Platform operations used by the command workflows."""

    async def create_text_channel(self, guild_id: GuildID, name: str) -> CreatedChannel: ...

    async def set_channel_permission(self, channel_id: ChannelID, overwrite: PermissionOverwrite) -> None: ...

    async def fetch_member_roles(self, guild_id: GuildID, user_id: UserID) -> frozenset[RoleID]: ...

    async def add_member_role(self, guild_id: GuildID, user_id: UserID, role_id: RoleID) -> None: ...


class HTTPGuildGateway:
    """:class:`GuildGateway` backed by a connected :class:`discord.Bot`."""

    def __init__(self, bot: discord.Bot) -> None:
        self.bot = bot

    async def create_text_channel(self, guild_id: GuildID, name: str) -> CreatedChannel:
        data = await self.bot.http.create_channel(guild_id.to_int(), GUILD_TEXT_CHANNEL, name=name)
        return CreatedChannel(channel_id=ChannelID(data["id"]), name=str(data.get("name", name)))

    async def set_channel_permission(self, channel_id: ChannelID, overwrite: PermissionOverwrite) -> None:
        await self.bot.http.edit_channel_permissions(
            channel_id.to_int(),
            overwrite.subject_id.to_int(),
            overwrite.allow,
            overwrite.deny,
            int(overwrite.subject),
        )

    async def fetch_member_roles(self, guild_id: GuildID, user_id: UserID) -> frozenset[RoleID]:
        data = await self.bot.http.get_member(guild_id.to_int(), user_id.to_int())
        return frozenset(RoleID(role_id) for role_id in data.get("roles", []))

    async def add_member_role(self, guild_id: GuildID, user_id: UserID, role_id: RoleID) -> None:
        await self.bot.http.add_role(guild_id.to_int(), user_id.to_int(), role_id.to_int())
