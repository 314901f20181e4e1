"""Allow ``python -m texnode`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m texnode`` behaves identically to the ``tex-node``
console script.
"""

from __future__ import annotations

from texnode.cli.app import cli

if __name__ == "__main__":
    cli()
