"""Caller checks shared by every Juicebot command."""

from __future__ import annotations

from juicebot.commands.errors import AuthorizationError
from juicebot.configuration.app_configuration import GuildConfig
from juicebot.datatypes.interaction_datatypes import Caller, Interaction

WRONG_GUILD_MESSAGE = "This command can only be used in the Juiceworks Discord server."
NOT_A_MEMBER_MESSAGE = "This command can only be used by Juiceworks members."
INTERNAL_CHANNEL_MESSAGE = "This command cannot be used in the internal channel."


def check_command_caller(interaction: Interaction, config: GuildConfig) -> Caller:
    """Make sure a command comes from the Juiceworks guild and a Juiceworks member.

    Parameters
    ----------
    interaction:
        The invocation to check.
    config:
        Identifiers of the Juiceworks guild and its community role.

    Returns
    -------
    Caller
        The invoking member, known to be non-null past this point.

    Raises
    ------
    AuthorizationError
        If the guild does not match, no member was sent, or the member lacks
        the Juiceworks role.
    """
    if interaction.guild_id != config.guild_id or interaction.caller is None:
        raise AuthorizationError(WRONG_GUILD_MESSAGE)

    if not interaction.caller.has_role(config.juiceworks_role_id):
        raise AuthorizationError(NOT_A_MEMBER_MESSAGE)

    return interaction.caller


def check_not_internal_channel(interaction: Interaction, config: GuildConfig) -> None:
    """Refuse commands that would open up the shared internal channel."""
    if interaction.channel_id == config.internal_channel_id:
        raise AuthorizationError(INTERNAL_CHANNEL_MESSAGE)
