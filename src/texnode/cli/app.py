"""CLI application entry point and command routing for tex-node.

This module is the **sole error boundary** for the entire application.
It catches :class:`~texnode.exceptions.TexNodeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a message on stderr and
returning a well-defined exit code.

Architecture notes
------------------
* No transform logic lives here — commands are looked up in the
  registry and executed by :mod:`texnode.cli.runner`.
* stdout carries command results only; every message from this module
  goes to stderr.
* :func:`cli` installs the process lifecycle guard exactly once;
  :func:`main` is side-effect free apart from the commands it runs, so
  tests can call it directly.
"""

from __future__ import annotations

import argparse
import sys

from texnode.cli import exit_codes
from texnode.cli.commands import REGISTRY
from texnode.cli.console import console, escape_markup
from texnode.cli.lifecycle import lifecycle_guard
from texnode.cli.runner import resolve_command, run_command
from texnode.core.models import InvocationRequest
from texnode.core.registry import CommandRegistry
from texnode.exceptions import TexNodeError, UnrecognizedCommandError, UsageError
from texnode.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _commands_epilog(registry: CommandRegistry) -> str:
    """Render the command table shown under ``--help``."""
    lines = ["commands:"]
    lines.extend(
        f"  {command.id}: {command.description}"
        for command in registry
    )
    return "\n".join(lines)


def _build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``tex-node <command> [<file> ...]``
    * ``tex-node --help``
    * ``tex-node --version``
    """
    parser = argparse.ArgumentParser(
        prog="tex-node",
        usage="%(prog)s [-h] [-v] [--version] <command> [<file> ...]",
        description="Convert between BibTeX, flattened JSON, and TeX text.",
        epilog=_commands_epilog(registry),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
        help="print version",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print debug messages",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="command id (see below)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="file",
        help="input files, processed in the order given",
    )
    return parser


def _build_request(args: argparse.Namespace) -> InvocationRequest:
    """Turn parsed arguments into an :class:`InvocationRequest`."""
    if args.command is None:
        raise UsageError("Missing required argument: command")
    return InvocationRequest(
        command_id=args.command,
        file_paths=tuple(args.files),
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    registry: CommandRegistry = REGISTRY,
) -> int:
    """Run the tex-node CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    registry:
        Command table to dispatch against.

    Returns
    -------
    int
        OS process exit code.  Errors raised by a command propagate to
        the caller; :func:`cli` maps them to exit codes.
    """
    parser = _build_parser(registry)
    args = parser.parse_intermixed_args(argv)

    try:
        request = _build_request(args)
        command = resolve_command(registry, request.command_id)
    except UsageError as exc:
        if not isinstance(exc, UnrecognizedCommandError):
            parser.print_usage(sys.stderr)
        console.echo(str(exc))
        return exit_codes.USAGE_ERROR

    run_command(command, request.file_paths, verbose=request.verbose)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` in the lifecycle guard (SIGINT → 130, EPIPE → 0)
    and guarantees the process never exits with a raw stack trace for a
    known error.
    """
    try:
        with lifecycle_guard():
            code = main()
        sys.exit(code)
    except TexNodeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

