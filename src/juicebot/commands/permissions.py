"""Apply channel permission overwrites."""

from __future__ import annotations

from typing import Iterable

import discord

from juicebot.commands.errors import ExternalCallError
from juicebot.commands.guild_gateway import GuildGateway
from juicebot.datatypes.discord_datatypes import ChannelID
from juicebot.datatypes.permission_datatypes import PermissionOverwrite

SET_PERMISSIONS_CONTEXT = "Error setting channel permissions"


async def apply_permission_overwrite(
    gateway: GuildGateway,
    channel_id: ChannelID,
    overwrite: PermissionOverwrite,
) -> None:
    """Apply one overwrite to ``channel_id``.

    Returns silently on success; the caller decides what to tell the user.

    Raises
    ------
    ExternalCallError
        If the platform rejects the call.
    """
    try:
        await gateway.set_channel_permission(channel_id, overwrite)
    except discord.DiscordException as exc:
        raise ExternalCallError(SET_PERMISSIONS_CONTEXT, exc) from exc


async def apply_permission_overwrites(
    gateway: GuildGateway,
    channel_id: ChannelID,
    overwrites: Iterable[PermissionOverwrite],
) -> None:
    """Apply ``overwrites`` in order, stopping at the first failure."""
    for overwrite in overwrites:
        await apply_permission_overwrite(gateway, channel_id, overwrite)
