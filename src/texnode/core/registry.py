"""Immutable, ordered command table with exact-match lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from texnode.core.models import Command


class CommandRegistry:
    """Maps command ids to :class:`Command` objects.

    Registration order is preserved for help rendering.  Lookup is by
    exact, case-sensitive id; an unknown id yields ``None`` rather than
    an exception so the caller decides how to report it.

    Raises
    ------
    ValueError
        At construction, if two commands share an id.
    """

    def __init__(self, commands: Iterable[Command]) -> None:
        self._commands: tuple[Command, ...] = tuple(commands)
        index: dict[str, Command] = {}
        for command in self._commands:
            if command.id in index:
                raise ValueError(f"duplicate command id: {command.id!r}")
            index[command.id] = command
        self._index: dict[str, Command] = index

    def lookup(self, command_id: str) -> Command | None:
        """Return the command registered under *command_id*, or ``None``."""
        return self._index.get(command_id)

    def list_commands(self) -> tuple[Command, ...]:
        """Return all commands in registration order."""
        return self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)
