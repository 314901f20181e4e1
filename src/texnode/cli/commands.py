"""The built-in command table.

Each command reads one input file through the infra layer, hands the
text to a pure transform from :mod:`texnode.core.transforms`, and
prints the result to stdout.

Only ``bib-test`` catches parse failures — its whole purpose is to list
the files that do not parse.  Every other command lets the error
propagate and abort the batch.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from texnode.cli.console import console
from texnode.core.models import Command
from texnode.core.registry import CommandRegistry
from texnode.core.transforms import (
    bibtex_to_json,
    check_bibtex,
    flatten_tex,
    format_bibtex,
    json_to_bibtex,
    tex_citekeys,
)
from texnode.exceptions import BibTeXParseError
from texnode.infra.filesystem import read_text


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def _print_text(text: str) -> None:
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


# ---------------------------------------------------------------------------
# Command bodies
# ---------------------------------------------------------------------------

def run_bib_format(path: str) -> None:
    _print_lines(format_bibtex(read_text(path)))


def run_bib_json(path: str) -> None:
    _print_lines(bibtex_to_json(read_text(path)))


def run_json_bib(path: str) -> None:
    _print_lines(json_to_bibtex(read_text(path)))


def run_bib_test(path: str) -> None:
    """Print *path* to stderr if it does not parse; print nothing otherwise.

    Read errors are not parse errors and still propagate.
    """
    data = read_text(path)
    try:
        check_bibtex(data)
    except BibTeXParseError:
        console.echo(path)


def run_tex_flatten(path: str) -> None:
    _print_text(flatten_tex(read_text(path)))


def run_tex_citekeys(path: str) -> None:
    _print_lines(tex_citekeys(read_text(path)))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

COMMANDS: tuple[Command, ...] = (
    Command(
        id="bib-format",
        description="Parse bib files and format as standard BibTeX",
        run=run_bib_format,
    ),
    Command(
        id="bib-json",
        description="Parse bib files and format as JSON",
        run=run_bib_json,
    ),
    Command(
        id="json-bib",
        description="Parse JSON and format as standard BibTeX",
        run=run_json_bib,
    ),
    Command(
        id="bib-test",
        description=(
            "Test that the given files can be parsed as BibTeX entries, "
            "printing the filename of unparseable files to STDERR"
        ),
        run=run_bib_test,
    ),
    Command(
        id="tex-flatten",
        description="Extract the text part from a string of TeX",
        run=run_tex_flatten,
    ),
    Command(
        id="tex-citekeys",
        description="Extract the citekeys references in a TeX document (using RegExp)",
        run=run_tex_citekeys,
    ),
)

REGISTRY: CommandRegistry = CommandRegistry(COMMANDS)
