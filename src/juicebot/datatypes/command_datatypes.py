"""
Slash command definitions.

Juicebot supports a closed set of commands. Each member of
:class:`CommandKind` carries its registration metadata and the single
option it expects, so the cog and the workflows share one source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class OptionType(IntEnum):
    """Application command option types used by Juicebot."""

    STRING = 3
    USER = 6

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Schema of one slash command option."""
    name: str
    option_type: OptionType
    description: str
    required: bool = True


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Registration metadata for one slash command."""
    name: str
    description: str
    option: OptionSpec


class CommandKind(Enum):
    """Enumeration of supported slash commands."""

    MAKE_CHANNEL = CommandSpec(
        name="make-channel",
        description="Create a channel for a new project.",
        option=OptionSpec(
            name="channel-name",
            option_type=OptionType.STRING,
            description="What to name the channel",
        ),
    )
    ADD_MEMBER = CommandSpec(
        name="add-member",
        description="Add a member to this channel. Use in a channel to add someone.",
        option=OptionSpec(
            name="user",
            option_type=OptionType.USER,
            description="The user to add to the channel",
        ),
    )

    @property
    def command_name(self) -> str:
        return self.value.name

    @property
    def description(self) -> str:
        return self.value.description

    @property
    def option(self) -> OptionSpec:
        return self.value.option

    def __str__(self) -> str:
        return self.command_name
