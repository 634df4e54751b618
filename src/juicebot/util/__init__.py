"""
Utility functions and helpers for Juicebot.

- **logger.py**: Centralized logging configuration with colored console output
  through prompt_toolkit, a per-session rotating log file, and suppression of
  Discord/aiohttp internals.

- **discord_utils.py**: py-cord helpers for ephemeral replies (delivery
  failures are logged, never raised) and guild command cleanup on shutdown.
"""
