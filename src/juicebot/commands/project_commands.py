"""
Project channel workflows.

``make-channel`` creates a private text channel for a new project and
``add-member`` lets someone into the channel it is used in. Both are
linear: check the caller, validate the single option, then make the
platform calls in a fixed order. Any failure raises a
:class:`~juicebot.commands.errors.CommandError` and no later call is made.
On success each workflow returns the reply text; replying is left to the
cog so that exactly one response is sent per interaction.
"""

from __future__ import annotations

import discord

from juicebot.commands.authorization import check_command_caller, check_not_internal_channel
from juicebot.commands.errors import AuthorizationError, ExternalCallError, InputValidationError
from juicebot.commands.guild_gateway import GuildGateway
from juicebot.commands.permissions import apply_permission_overwrites, apply_permission_overwrite
from juicebot.configuration.app_configuration import GuildConfig
from juicebot.datatypes.command_datatypes import CommandKind
from juicebot.datatypes.discord_datatypes import RoleID, UserID
from juicebot.datatypes.interaction_datatypes import CommandOption, Interaction
from juicebot.datatypes.permission_datatypes import (
    VIEW_AND_SEND,
    VIEW_CHANNEL,
    PermissionOverwrite,
)
from juicebot.util.logger import get_logger

logger = get_logger("project_commands")

CHANNEL_NAME_MIN_LENGTH = 2
CHANNEL_NAME_MAX_LENGTH = 100

MISSING_CHANNEL_NAME_MESSAGE = "This command requires a channel name."
CHANNEL_NAME_LENGTH_MESSAGE = (
    f"Channel name must be between {CHANNEL_NAME_MIN_LENGTH} and {CHANNEL_NAME_MAX_LENGTH} characters."
)
MISSING_USER_MESSAGE = "This command requires a user."
NO_CHANNEL_MESSAGE = "This command must be used in a channel."

CREATE_CHANNEL_CONTEXT = "Error creating channel"
READ_ROLES_CONTEXT = "Error reading member roles"
GRANT_ROLE_CONTEXT = "Error granting Project Creator role"


# ==========================================
# Validation helpers
# ==========================================

def lower_each_character(name: str) -> str:
    """Lower-case ``name`` one character at a time.

    ``str.lower`` applies full case mappings, so ``"İ"`` becomes two code
    points. Channel names keep a single character per input character.
    """
    return "".join(char.lower()[0] for char in name)


def normalize_channel_name(name: str) -> str:
    """Trim, lower-case and hyphenate spaces in a requested channel name."""
    return lower_each_character(name.strip()).replace(" ", "-")


def validate_channel_name(name: str) -> str:
    """Return the normalized channel name or raise if its length is out of range.

    Length is counted in UTF-8 bytes, so multi-byte characters use up more
    of the limit.
    """
    normalized = normalize_channel_name(name)
    if not CHANNEL_NAME_MIN_LENGTH <= len(normalized.encode("utf-8")) <= CHANNEL_NAME_MAX_LENGTH:
        raise InputValidationError(CHANNEL_NAME_LENGTH_MESSAGE)
    return normalized


def require_single_option(interaction: Interaction, kind: CommandKind, message: str) -> CommandOption:
    """Return the one option ``kind`` expects, or raise with ``message``."""
    options = interaction.options
    if len(options) != 1 or options[0].option_type != kind.option.option_type:
        raise InputValidationError(message)
    return options[0]


def authorize(interaction: Interaction, kind: CommandKind, config: GuildConfig) -> None:
    try:
        check_command_caller(interaction, config)
    except AuthorizationError as exc:
        logger.warning("Command caller check failed on %s: %s", kind, exc)
        raise


def project_channel_overwrites(config: GuildConfig) -> tuple[PermissionOverwrite, PermissionOverwrite]:
    """Overwrites that make a new project channel private to Juiceworks members.

    The Juiceworks role is allowed in first; ``@everyone`` (the role sharing
    the guild's ID) is then denied view access.
    """
    return (
        PermissionOverwrite.for_role(config.juiceworks_role_id, allow=VIEW_AND_SEND),
        PermissionOverwrite.for_role(RoleID.everyone(config.guild_id), deny=VIEW_CHANNEL),
    )


# ==========================================
# Workflows
# ==========================================

async def make_channel(interaction: Interaction, gateway: GuildGateway, config: GuildConfig) -> str:
    """Create a private project channel named after the ``channel-name`` option."""
    authorize(interaction, CommandKind.MAKE_CHANNEL, config)

    option = require_single_option(interaction, CommandKind.MAKE_CHANNEL, MISSING_CHANNEL_NAME_MESSAGE)
    if not isinstance(option.value, str):
        raise InputValidationError(MISSING_CHANNEL_NAME_MESSAGE)
    channel_name = validate_channel_name(option.value)

    try:
        channel = await gateway.create_text_channel(config.guild_id, channel_name)
    except discord.DiscordException as exc:
        raise ExternalCallError(CREATE_CHANNEL_CONTEXT, exc) from exc

    await apply_permission_overwrites(gateway, channel.channel_id, project_channel_overwrites(config))

    logger.info("Created channel: #%s (%s)", channel.name, channel.channel_id)
    return f"Created channel: #{channel.name}"


async def add_member(interaction: Interaction, gateway: GuildGateway, config: GuildConfig) -> str:
    """Give the ``user`` option access to the channel the command was used in.

    Members without the services role are also granted the project creator
    role before the channel overwrite is applied.
    """
    authorize(interaction, CommandKind.ADD_MEMBER, config)
    check_not_internal_channel(interaction, config)

    option = require_single_option(interaction, CommandKind.ADD_MEMBER, MISSING_USER_MESSAGE)
    try:
        user_id = UserID(option.value)
    except ValueError as exc:
        raise InputValidationError(MISSING_USER_MESSAGE) from exc

    channel_id = interaction.channel_id
    if channel_id is None:
        raise InputValidationError(NO_CHANNEL_MESSAGE)

    try:
        role_ids = await gateway.fetch_member_roles(config.guild_id, user_id)
    except discord.DiscordException as exc:
        raise ExternalCallError(READ_ROLES_CONTEXT, exc) from exc

    if config.services_role_id not in role_ids:
        try:
            await gateway.add_member_role(config.guild_id, user_id, config.project_creator_role_id)
        except discord.DiscordException as exc:
            raise ExternalCallError(GRANT_ROLE_CONTEXT, exc) from exc

    await apply_permission_overwrite(
        gateway,
        channel_id,
        PermissionOverwrite.for_member(user_id, allow=VIEW_AND_SEND),
    )

    logger.info("Added %s (%s) to channel %s.", user_id, user_id.mention(), channel_id)
    return f"Added {user_id.mention()} to the channel."


async def run_command(
    kind: CommandKind,
    interaction: Interaction,
    gateway: GuildGateway,
    config: GuildConfig,
) -> str:
    """Run the workflow for ``kind`` and return the reply text."""
    match kind:
        case CommandKind.MAKE_CHANNEL:
            return await make_channel(interaction, gateway, config)
        case CommandKind.ADD_MEMBER:
            return await add_member(interaction, gateway, config)
