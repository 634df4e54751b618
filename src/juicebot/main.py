"""
Juiceworks Project Bot
======================

A Discord bot for the Juiceworks community. It registers two slash commands
in the Juiceworks guild: ``/make-channel`` creates a private project channel
and ``/add-member`` lets another user into the current project channel.
"""

import os
import sys
from pathlib import Path

def resolve_base_dir() -> Path:
    """Determine the base directory of the project.

    Resolution order:
    1. JUICEBOT_HOME environment variable, if set.
    2. If running in a frozen/compiled context (e.g., PyInstaller, Nuitka), use the executable's directory.
    3. Otherwise, assume running from source and use the grandparent of this file's directory.
    """
    if env_home := os.getenv("JUICEBOT_HOME"):
        return Path(env_home).resolve()

    if getattr(sys, "frozen", False) or getattr(sys, "compiled", False):
        return Path(sys.argv[0]).resolve().parent

    return Path(__file__).resolve().parents[2]

BASE_DIR = resolve_base_dir()
os.chdir(BASE_DIR)

import asyncio
import signal
import discord
from dotenv import load_dotenv

from juicebot.configuration.app_configuration import GuildConfig, app_config
from juicebot.util.discord_utils import unregister_guild_commands
from juicebot.util.logger import get_logger, handle_exception, set_log_level


logger = get_logger("main")

TOKEN_VARIABLE = "DISCORD_TOKEN"


class StartupError(Exception):
    """Raised when the bot cannot be brought up; the process exits with status 1."""


def load_environment(env_path: Path | None = None) -> str:
    """Return the Discord bot token.

    The process environment wins; otherwise the ``.env`` file in the base
    directory is loaded and read.

    Raises
    ------
    StartupError
        If neither source provides ``DISCORD_TOKEN``.
    """
    if token := os.getenv(TOKEN_VARIABLE):
        return token

    env_path = env_path or BASE_DIR / ".env"
    if not env_path.is_file():
        raise StartupError(f"Could not load .env file: {env_path} does not exist")

    load_dotenv(dotenv_path=env_path)
    token = os.getenv(TOKEN_VARIABLE)
    if not token:
        raise StartupError(f"Could not find {TOKEN_VARIABLE} in .env file or environment.")
    return token


def build_intents() -> discord.Intents:
    """Construct the intents Juicebot needs.

    Slash command interactions carry the invoking member, and target members
    are fetched over REST, so the privileged members intent is not required.
    """
    intents = discord.Intents.none()
    intents.guilds = True
    return intents


def load_cogs(discord_bot_instance: discord.Bot, config: GuildConfig, ready_event: asyncio.Event) -> None:
    """Register all cogs with the provided Discord bot instance."""
    from juicebot.bot.cogs import events_listener, project_cmds

    events_listener.setup(discord_bot_instance, ready_event)
    project_cmds.setup(discord_bot_instance, config)

    logger.info("All cogs loaded successfully.")


def create_bot(config: GuildConfig, ready_event: asyncio.Event) -> discord.Bot:
    """Instantiate the bot with its commands scoped to the Juiceworks guild.

    Command sync is done explicitly after login so that a registration
    failure can stop the process.
    """
    bot = discord.Bot(
        intents=build_intents(),
        debug_guilds=[config.guild_id.to_int()],
        auto_sync_commands=False,
    )
    load_cogs(bot, config, ready_event)
    return bot


async def register_commands(bot: discord.Bot, config: GuildConfig) -> None:
    """Register the slash commands in the Juiceworks guild.

    Raises
    ------
    discord.DiscordException
        If the platform rejects the registration.
    """
    await bot.sync_commands(guild_ids=[config.guild_id.to_int()])
    names = ", ".join(command.name for command in bot.application_commands)
    logger.info("Registered commands in guild %s: %s", config.guild_id, names)


async def start_bot(bot: discord.Bot, token: str) -> None:
    """Log in and run the gateway connection until the bot is closed."""
    logger.info("Attempting to connect to Discord…")
    try:
        await bot.start(token)
    except asyncio.CancelledError:
        logger.info("Discord bot start cancelled; shutting down")
    finally:
        logger.info("Discord bot start routine finished.")


async def shutdown_runtime(bot: discord.Bot, config: GuildConfig) -> None:
    """Remove the guild commands and close the connection."""
    if not bot.is_closed():
        deleted = await unregister_guild_commands(bot, config.guild_id.to_int())
        logger.info("Removed %s command(s) from guild %s", deleted, config.guild_id)
        await bot.close()
    logger.info("Shutdown complete.")


def install_signal_handlers(stop_event: asyncio.Event) -> None:
    """Set ``stop_event`` on SIGINT or SIGTERM.

    Where the loop cannot install handlers (Windows), Ctrl-C still arrives
    as KeyboardInterrupt and is handled in :func:`main`.
    """
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except (NotImplementedError, RuntimeError):
            logger.debug("Signal handler for %s not supported on this platform", sig.name)


async def run_bot_session(
    bot: discord.Bot,
    token: str,
    config: GuildConfig,
    stop_event: asyncio.Event,
    ready_event: asyncio.Event,
) -> int:
    """Run the bot until a stop signal or a fatal error, returning an exit code."""
    start_task = asyncio.create_task(start_bot(bot, token))
    ready_task = asyncio.create_task(ready_event.wait())
    stop_task = asyncio.create_task(stop_event.wait())
    exit_code = 0

    try:
        done, _ = await asyncio.wait({start_task, ready_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)

        if ready_task in done and stop_task not in done:
            try:
                await register_commands(bot, config)
            except discord.DiscordException as exc:
                logger.critical("Cannot register commands: %s", exc)
                return 1

            logger.info("Bot is running. Press CTRL-C to exit.")
            done, _ = await asyncio.wait({start_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)

        if start_task in done and start_task.exception() is not None:
            logger.critical("Discord bot runtime error: %s", start_task.exception())
            exit_code = 1
        elif stop_task in done:
            logger.info("Shutting down...")
    finally:
        ready_task.cancel()
        stop_task.cancel()
        await shutdown_runtime(bot, config)
        if not start_task.done():
            start_task.cancel()
        await asyncio.gather(start_task, return_exceptions=True)

    return exit_code


async def async_main() -> int:
    """Bootstrap configuration and the bot, returning an exit code."""
    set_log_level(app_config.log_level)

    try:
        token = load_environment()
        config = app_config.guild
    except (StartupError, ValueError) as exc:
        logger.critical("%s", exc)
        return 1

    ready_event = asyncio.Event()
    try:
        bot = create_bot(config, ready_event)
    except Exception as exc:
        logger.critical("Could not create Discord bot: %s", exc)
        return 1

    stop_event = asyncio.Event()
    install_signal_handlers(stop_event)
    return await run_bot_session(bot, token, config, stop_event, ready_event)


def main() -> int:
    """Entrypoint that runs the async runtime and returns the process exit code."""
    logger.info("Starting Juiceworks project bot…")
    try:
        return asyncio.run(async_main())
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user.")
        return 0


if __name__ == "__main__":
    sys.excepthook = handle_exception
    sys.exit(main())
