"""
Pytest configuration and fixtures for Juicebot tests.
"""

import sys
from pathlib import Path

# Add src directory to path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from unittest.mock import MagicMock

import discord
import pytest

from juicebot.configuration.app_configuration import GuildConfig
from juicebot.datatypes.command_datatypes import OptionType
from juicebot.datatypes.discord_datatypes import ChannelID, GuildID, RoleID, UserID
from juicebot.datatypes.interaction_datatypes import Caller, CommandOption, Interaction
from juicebot.datatypes.permission_datatypes import CreatedChannel


GUILD_ID = 1000
INTERNAL_CHANNEL_ID = 2000
JUICEWORKS_ROLE_ID = 3000
PROJECT_CREATOR_ROLE_ID = 4000
SERVICES_ROLE_ID = 5000

PROJECT_CHANNEL_ID = 6000
CALLER_ID = 7000
TARGET_ID = 8000
NEW_CHANNEL_ID = 9000


def http_error(status: int = 403, reason: str = "Forbidden", message: str = "Missing Permissions") -> discord.HTTPException:
    """Build a py-cord HTTP error like the ones the REST client raises."""
    response = MagicMock()
    response.status = status
    response.reason = reason
    return discord.Forbidden(response, message) if status == 403 else discord.HTTPException(response, message)


class FakeGateway:
    """Recording stand-in for :class:`juicebot.commands.guild_gateway.HTTPGuildGateway`.

    ``fail`` maps a method name to the exception it should raise. For
    ``set_channel_permission`` the failure can be limited to the n-th call
    (1-based) with ``fail_permission_call``.
    """

    def __init__(self, member_roles=(), fail=None, fail_permission_call=None):
        self.calls = []
        self.member_roles = frozenset(RoleID(role) for role in member_roles)
        self.fail = dict(fail or {})
        self.fail_permission_call = fail_permission_call
        self._permission_calls = 0

    def _maybe_fail(self, method):
        if method in self.fail:
            raise self.fail[method]

    async def create_text_channel(self, guild_id, name):
        self.calls.append(("create_text_channel", guild_id, name))
        self._maybe_fail("create_text_channel")
        return CreatedChannel(channel_id=ChannelID(NEW_CHANNEL_ID), name=name)

    async def set_channel_permission(self, channel_id, overwrite):
        self.calls.append(("set_channel_permission", channel_id, overwrite))
        self._permission_calls += 1
        if self.fail_permission_call in (None, self._permission_calls):
            self._maybe_fail("set_channel_permission")

    async def fetch_member_roles(self, guild_id, user_id):
        self.calls.append(("fetch_member_roles", guild_id, user_id))
        self._maybe_fail("fetch_member_roles")
        return self.member_roles

    async def add_member_role(self, guild_id, user_id, role_id):
        self.calls.append(("add_member_role", guild_id, user_id, role_id))
        self._maybe_fail("add_member_role")

    def call_names(self):
        return [call[0] for call in self.calls]


def make_interaction(
    command_name="make-channel",
    options=(),
    guild_id=GUILD_ID,
    channel_id=PROJECT_CHANNEL_ID,
    caller_roles=(JUICEWORKS_ROLE_ID,),
    has_member=True,
) -> Interaction:
    caller = None
    if has_member:
        caller = Caller(user_id=UserID(CALLER_ID), role_ids=frozenset(RoleID(r) for r in caller_roles))
    return Interaction(
        command_name=command_name,
        guild_id=GuildID(guild_id) if guild_id is not None else None,
        channel_id=ChannelID(channel_id) if channel_id is not None else None,
        caller=caller,
        options=tuple(options),
    )


def string_option(value, name="channel-name") -> CommandOption:
    return CommandOption(name=name, option_type=int(OptionType.STRING), value=value)


def user_option(value=TARGET_ID, name="user") -> CommandOption:
    return CommandOption(name=name, option_type=int(OptionType.USER), value=str(value))


@pytest.fixture()
def guild_config() -> GuildConfig:
    return GuildConfig(
        guild_id=GuildID(GUILD_ID),
        internal_channel_id=ChannelID(INTERNAL_CHANNEL_ID),
        juiceworks_role_id=RoleID(JUICEWORKS_ROLE_ID),
        project_creator_role_id=RoleID(PROJECT_CREATOR_ROLE_ID),
        services_role_id=RoleID(SERVICES_ROLE_ID),
    )


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()
