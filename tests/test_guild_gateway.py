from types import SimpleNamespace
from unittest.mock import AsyncMock

import discord
import pytest

from conftest import GUILD_ID, JUICEWORKS_ROLE_ID, NEW_CHANNEL_ID, PROJECT_CHANNEL_ID, TARGET_ID, http_error
from juicebot.commands.guild_gateway import GUILD_TEXT_CHANNEL, HTTPGuildGateway
from juicebot.datatypes.discord_datatypes import ChannelID, GuildID, RoleID, UserID
from juicebot.datatypes.permission_datatypes import VIEW_AND_SEND, VIEW_CHANNEL, PermissionOverwrite


@pytest.fixture
def http():
    return SimpleNamespace(
        create_channel=AsyncMock(return_value={"id": str(NEW_CHANNEL_ID), "name": "alpha"}),
        edit_channel_permissions=AsyncMock(),
        get_member=AsyncMock(return_value={"roles": ["11", "12"]}),
        add_role=AsyncMock(),
    )


@pytest.fixture
def http_gateway(http):
    return HTTPGuildGateway(SimpleNamespace(http=http))


@pytest.mark.asyncio
async def test_create_text_channel(http_gateway, http):
    created = await http_gateway.create_text_channel(GuildID(GUILD_ID), "alpha")

    http.create_channel.assert_awaited_once_with(GUILD_ID, GUILD_TEXT_CHANNEL, name="alpha")
    assert created.channel_id == ChannelID(NEW_CHANNEL_ID)
    assert created.name == "alpha"


@pytest.mark.asyncio
async def test_set_role_permission(http_gateway, http):
    overwrite = PermissionOverwrite.for_role(RoleID(JUICEWORKS_ROLE_ID), allow=VIEW_AND_SEND)

    await http_gateway.set_channel_permission(ChannelID(PROJECT_CHANNEL_ID), overwrite)

    http.edit_channel_permissions.assert_awaited_once_with(
        PROJECT_CHANNEL_ID, JUICEWORKS_ROLE_ID, VIEW_AND_SEND, 0, 0
    )


@pytest.mark.asyncio
async def test_set_member_permission(http_gateway, http):
    overwrite = PermissionOverwrite.for_member(UserID(TARGET_ID), allow=VIEW_CHANNEL)

    await http_gateway.set_channel_permission(ChannelID(PROJECT_CHANNEL_ID), overwrite)

    http.edit_channel_permissions.assert_awaited_once_with(PROJECT_CHANNEL_ID, TARGET_ID, VIEW_CHANNEL, 0, 1)


@pytest.mark.asyncio
async def test_fetch_member_roles(http_gateway, http):
    roles = await http_gateway.fetch_member_roles(GuildID(GUILD_ID), UserID(TARGET_ID))

    http.get_member.assert_awaited_once_with(GUILD_ID, TARGET_ID)
    assert roles == frozenset({RoleID(11), RoleID(12)})


@pytest.mark.asyncio
async def test_fetch_member_without_roles(http_gateway, http):
    http.get_member.return_value = {}

    assert await http_gateway.fetch_member_roles(GuildID(GUILD_ID), UserID(TARGET_ID)) == frozenset()


@pytest.mark.asyncio
async def test_add_member_role(http_gateway, http):
    await http_gateway.add_member_role(GuildID(GUILD_ID), UserID(TARGET_ID), RoleID(JUICEWORKS_ROLE_ID))

    http.add_role.assert_awaited_once_with(GUILD_ID, TARGET_ID, JUICEWORKS_ROLE_ID)


@pytest.mark.asyncio
async def test_errors_propagate(http_gateway, http):
    http.add_role.side_effect = http_error()

    with pytest.raises(discord.Forbidden) as excinfo:
        await http_gateway.add_member_role(GuildID(GUILD_ID), UserID(TARGET_ID), RoleID(JUICEWORKS_ROLE_ID))

    assert excinfo.value is http.add_role.side_effect
