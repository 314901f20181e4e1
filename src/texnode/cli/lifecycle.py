"""Process lifecycle guard — SIGINT and broken-pipe handling.

``tex-node`` usually sits at the head of a shell pipeline, so it has to
behave the way UNIX producers do:

* **SIGINT** writes a notice to stderr and exits with status 130.
* **EPIPE** (the downstream reader went away, e.g. ``| head``) exits
  silently with status 0.

Both are installed once, at process entry, by :func:`lifecycle_guard`.
Command code never sees them.
"""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

from texnode.cli import exit_codes
from texnode.cli.console import console

INTERRUPT_NOTICE = "Ctrl+C :: SIGINT!"

_sigint_installed: bool = False


# ---------------------------------------------------------------------------
# stdout helpers
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point fd 1 at ``os.devnull`` so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def _flush_stdout() -> None:
    """Flush already-written results; a closed pipe is not an error here."""
    try:
        sys.stdout.flush()
    except BrokenPipeError:
        _silence_stdout()


# ---------------------------------------------------------------------------
# SIGINT
# ---------------------------------------------------------------------------

def _handle_sigint(signum: int, frame: FrameType | None) -> None:
    """Report the interrupt and exit with ``128 + SIGINT``."""
    console.echo(INTERRUPT_NOTICE)
    _flush_stdout()
    raise SystemExit(exit_codes.KEYBOARD_INTERRUPT)


def install_signal_handlers() -> bool:
    """Install the SIGINT handler once per process.

    Returns
    -------
    bool
        ``True`` if the handler was installed by this call, ``False`` if
        it was already in place.
    """
    global _sigint_installed
    if _sigint_installed:
        return False
    signal.signal(signal.SIGINT, _handle_sigint)
    _sigint_installed = True
    return True


# ---------------------------------------------------------------------------
# Guard
# ---------------------------------------------------------------------------

@contextmanager
def lifecycle_guard() -> Iterator[None]:
    """Scope within which interrupts and broken pipes end the process cleanly.

    Usage::

        with lifecycle_guard():
            code = main()

    A ``BrokenPipeError`` raised inside the block (including by the
    final flush) becomes ``SystemExit(0)``.
    """
    install_signal_handlers()
    try:
        yield
        sys.stdout.flush()
    except BrokenPipeError:
        _silence_stdout()
        raise SystemExit(exit_codes.BROKEN_PIPE) from None
