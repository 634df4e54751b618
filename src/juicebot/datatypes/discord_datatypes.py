"""
Type-safe wrapper classes for Discord identifiers.

Discord snowflakes are 64-bit integers that the gateway and REST payloads
transmit as strings. Every identifier Juicebot compares (guild, channel,
role, user) goes through one of these wrappers so that comparisons are
always exact, whatever form the value arrived in.
"""

from __future__ import annotations

from typing import Union


class Snowflake:
    """
    Base wrapper for a Discord snowflake ID.

    The value is normalised to its decimal string form, so ``"0042"``,
    ``42`` and ``" 42 "`` all produce the same identifier.

    Attributes:
        _value (str): The snowflake ID stored as a string for JSON parity.

    Example:
        >>> gid = GuildID(1256628364987600977)
        >>> str(gid)
        '1256628364987600977'
        >>> gid == "1256628364987600977"
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[str, int, "Snowflake"]) -> None:
        """
        Initialize an identifier from a string, int, or another identifier.

        Raises:
            ValueError: If the value cannot be converted to a valid snowflake.
        """
        if isinstance(value, Snowflake):
            self._value = value._value
        elif isinstance(value, bool):
            raise ValueError(f"Cannot create {type(self).__name__} from bool: {value}")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError(f"Snowflake cannot be negative: {value}")
            self._value = str(value)
        elif isinstance(value, str):
            parsed = int(value.strip())
            if parsed < 0:
                raise ValueError(f"Snowflake cannot be negative: {value}")
            self._value = str(parsed)
        else:
            raise ValueError(f"Cannot create {type(self).__name__} from {type(value).__name__}: {value}")

    def to_int(self) -> int:
        """Convert to an integer for Discord API calls."""
        return int(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return type(self) is type(other) and self._value == other._value
        if isinstance(other, str):
            return self._value == other
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


class GuildID(Snowflake):
    """Identifier of a guild (server)."""

    __slots__ = ()


class ChannelID(Snowflake):
    """Identifier of a guild channel."""

    __slots__ = ()


class RoleID(Snowflake):
    """Identifier of a guild role.

    The guild's default ``@everyone`` role shares its ID with the guild.
    """

    __slots__ = ()

    @classmethod
    def everyone(cls, guild_id: GuildID) -> "RoleID":
        """Return the ``@everyone`` role of ``guild_id``."""
        return cls(guild_id.to_int())


class UserID(Snowflake):
    """Identifier of a user or guild member."""

    __slots__ = ()

    def mention(self) -> str:
        """Return the chat mention markup for this user."""
        return f"<@{self._value}>"
