"""Exceptions raised by command workflows.

Each exception carries the exact text shown to the invoking user. The cog
turns any :class:`CommandError` into a single ephemeral reply.
"""

from __future__ import annotations


class CommandError(Exception):
    """Base class for failures that end a command with a reply to the caller."""

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class AuthorizationError(CommandError):
    """The caller, guild or channel is not allowed to run the command."""


class InputValidationError(CommandError):
    """The command options are missing, mistyped or out of range."""


class ExternalCallError(CommandError):
    """A platform API call failed.

    The user message is ``"<context>: <error>"`` and the original exception
    is kept as ``__cause__``.
    """

    def __init__(self, context: str, error: BaseException) -> None:
        super().__init__(f"{context}: {error}")
        self.context = context
        self.error = error
