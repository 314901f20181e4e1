"""Command resolution and sequential, per-file execution.

The runner is transform-agnostic: it only knows "path in, writes
happen".  Files are processed strictly in the order given, and stdout
is flushed after each one so that output for file N is complete before
file N+1 is opened.

There is no catch-and-continue here.  Whether a failing file aborts the
batch is decided by the command itself (see ``bib-test``).
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from texnode.cli.console import console
from texnode.core.models import Command
from texnode.core.registry import CommandRegistry
from texnode.exceptions import UnrecognizedCommandError


def resolve_command(registry: CommandRegistry, command_id: str) -> Command:
    """Look up *command_id* or raise :class:`UnrecognizedCommandError`."""
    command = registry.lookup(command_id)
    if command is None:
        raise UnrecognizedCommandError(command_id)
    return command


def run_command(
    command: Command,
    paths: Sequence[str],
    *,
    verbose: bool = False,
) -> None:
    """Apply *command* to each of *paths*, in order.

    Parameters
    ----------
    command:
        A resolved command.
    paths:
        Input file paths.  May be empty, in which case nothing happens.
    verbose:
        When set, a ``<id> "<path>"`` trace line is written to stderr
        before each file.
    """
    for path in paths:
        if verbose:
            console.echo(f'{command.id} "{path}"')
        command.run(path)
        sys.stdout.flush()

