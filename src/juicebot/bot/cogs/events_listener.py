"""Event listener Cog for Juicebot.

Signals readiness to the runtime, logs connection lifecycle events, and logs
any command error that escaped the command workflows so a bug in one
interaction never takes the bot down.
"""

import asyncio

import discord
from discord.ext import commands

from juicebot.util.logger import get_logger

logger = get_logger("events_listener_cog")


class EventsListenerCog(commands.Cog):
    """Cog containing bot lifecycle and command error handlers."""

    def __init__(self, discord_bot_instance, ready_event: asyncio.Event | None = None):
        self.bot = discord_bot_instance
        self.ready_event = ready_event if ready_event is not None else asyncio.Event()
        logger.info("Events listener cog loaded")

    @commands.Cog.listener(name="on_ready")
    async def on_ready(self):
        if self.bot.user:
            logger.info("Logged in as: %s (ID: %s)", self.bot.user, self.bot.user.id)
        else:
            logger.warning("Bot partially connected, but user information not yet available.")
        self.ready_event.set()

    @commands.Cog.listener(name="on_application_command_error")
    async def on_application_command_error(
        self,
        application_context: discord.ApplicationContext,
        error: discord.DiscordException,
    ) -> None:
        """Log unexpected failures raised out of a slash command."""
        command_name = getattr(application_context.command, "name", "<unknown>")
        logger.error(
            "Unhandled error in /%s: %s",
            command_name,
            error,
            exc_info=(type(error), error, error.__traceback__),
        )


def setup(discord_bot_instance, ready_event: asyncio.Event | None = None):
    discord_bot_instance.add_cog(EventsListenerCog(discord_bot_instance, ready_event))
