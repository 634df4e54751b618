"""
Project channel cog: the two Juiceworks slash commands.

``/make-channel`` creates a private project channel and ``/add-member``
lets another user into the channel it is used in.

Design notes
- The cog is the only place that talks back to the user. Workflows in
  :mod:`juicebot.commands.project_commands` either return the reply text or
  raise a :class:`~juicebot.commands.errors.CommandError`; either way one
  ephemeral reply is sent.
- Platform failures and unexpected errors are logged here once;
  authorization failures are logged by the workflow; bad input is not logged.

Quick usage example
    from juicebot.bot.cogs import project_cmds
    project_cmds.setup(bot, app_config.guild)
"""

import discord
from discord import Option
from discord.ext import commands

from juicebot.commands.errors import CommandError, ExternalCallError
from juicebot.commands.guild_gateway import GuildGateway, HTTPGuildGateway
from juicebot.commands.project_commands import run_command
from juicebot.configuration.app_configuration import GuildConfig
from juicebot.datatypes.command_datatypes import CommandKind
from juicebot.datatypes.interaction_datatypes import Interaction
from juicebot.util.discord_utils import respond_ephemeral
from juicebot.util.logger import get_logger

logger = get_logger("project_cog")

MAKE_CHANNEL = CommandKind.MAKE_CHANNEL
ADD_MEMBER = CommandKind.ADD_MEMBER

UNEXPECTED_ERROR_MESSAGE = "An error occurred while processing the command."


class ProjectChannelCog(commands.Cog):
    """Cog containing the project channel slash commands."""

    def __init__(
        self,
        discord_bot_instance: discord.Bot,
        config: GuildConfig,
        gateway: GuildGateway | None = None,
    ):
        """Store the bot, the Juiceworks identifiers and the REST gateway.

        Parameters
        ----------
        discord_bot_instance:
            Active :class:`discord.Bot`; used to build the default gateway.
        config:
            Identifiers of the guild, channel and roles the commands act on.
        gateway:
            Optional gateway override, mainly for tests.
        """
        self.discord_bot_instance = discord_bot_instance
        self.config = config
        self.gateway = gateway or HTTPGuildGateway(discord_bot_instance)
        logger.info("Project channel cog loaded")

    async def handle_command(self, application_context: discord.ApplicationContext, kind: CommandKind) -> None:
        """Run ``kind`` for this invocation and send its single reply."""
        try:
            interaction = Interaction.from_context(application_context)
            message = await run_command(kind, interaction, self.gateway, self.config)
        except ExternalCallError as exc:
            logger.error("%s failed: %s", kind, exc)
            message = exc.user_message
        except CommandError as exc:
            message = exc.user_message
        except Exception as exc:
            logger.exception("Unexpected error in %s: %s", kind, exc)
            message = UNEXPECTED_ERROR_MESSAGE

        await respond_ephemeral(application_context, message)

    @commands.slash_command(name=MAKE_CHANNEL.command_name, description=MAKE_CHANNEL.description)
    async def make_channel(
        self,
        ctx: discord.ApplicationContext,
        channel_name: Option(  # type: ignore
            str,
            MAKE_CHANNEL.option.description,
            name=MAKE_CHANNEL.option.name,
            required=True,
        ),
    ) -> None:
        """Create a private channel for a new project.

        The option value is re-read from the raw interaction so that the
        same validation runs whatever py-cord parsed.
        """
        await self.handle_command(ctx, MAKE_CHANNEL)

    @commands.slash_command(name=ADD_MEMBER.command_name, description=ADD_MEMBER.description)
    async def add_member(
        self,
        ctx: discord.ApplicationContext,
        user: Option(  # type: ignore
            discord.User,
            ADD_MEMBER.option.description,
            name=ADD_MEMBER.option.name,
            required=True,
        ),
    ) -> None:
        """Add a user to the channel this command is used in."""
        await self.handle_command(ctx, ADD_MEMBER)


def setup(discord_bot_instance: discord.Bot, config: GuildConfig) -> None:
    """Register the project channel cog with the running bot."""
    discord_bot_instance.add_cog(ProjectChannelCog(discord_bot_instance, config))
