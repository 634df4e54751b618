"""
Command workflows for Juicebot.

Everything here is free of reply side effects: functions either return the
text to show the user or raise a :class:`~juicebot.commands.errors.CommandError`.

- **authorization.py**: Guild, membership and channel checks.
- **permissions.py**: Applies channel permission overwrites.
- **guild_gateway.py**: The REST calls the workflows make, behind a protocol.
- **project_commands.py**: ``make-channel`` and ``add-member``.
"""
