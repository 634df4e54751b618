"""
discord_utils.py
================

Stateless py-cord helpers shared by the cogs.
"""

import discord

from juicebot.util.logger import get_logger

logger = get_logger("discord_utils")


async def respond_ephemeral(application_context: discord.ApplicationContext, content: str) -> bool:
    """Reply to the invoking user only.

    A failed reply cannot be reported to the user, so it is logged and
    swallowed.

    Returns
    -------
    bool
        ``True`` if the reply was delivered.
    """
    try:
        await application_context.respond(content, ephemeral=True)
    except discord.DiscordException as exc:
        logger.error("Error responding to interaction: %s", exc)
        return False
    return True


async def unregister_guild_commands(bot: discord.Bot, guild_id: int) -> int:
    """Delete every slash command ``bot`` registered in ``guild_id``.

    Commands that were never synced (no ID yet) are skipped. Each failure is
    logged and the remaining commands are still attempted.

    Returns
    -------
    int
        Number of commands deleted.
    """
    if bot.application_id is None:
        return 0

    deleted = 0
    for command in list(bot.application_commands):
        command_id = getattr(command, "id", None)
        if command_id is None:
            continue
        try:
            await bot.http.delete_guild_command(bot.application_id, guild_id, command_id)
        except discord.DiscordException as exc:
            logger.error("Cannot delete '%s' command: %s", command.name, exc)
            continue
        deleted += 1
        logger.debug("Deleted '%s' command from guild %s", command.name, guild_id)
    return deleted
