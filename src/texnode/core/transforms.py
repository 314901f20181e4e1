"""Text-in, text-out transforms behind each CLI command.

Every function is pure: it receives the full contents of one input
file and returns (or, for ``json_to_bibtex``, yields) what should be
written to stdout.  Reading files and writing streams is the CLI
layer's job.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator

from texnode.core.bibtex import (
    flatten_bibtex_entry,
    parse_bibtex_entries,
    stringify_bibtex_entry,
    unflatten_bibtex_entry,
)
from texnode.core.tex import extract_citekeys, node_to_text, parse_node
from texnode.exceptions import JSONDecodeLineError

_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


def format_bibtex(text: str) -> list[str]:
    """Re-serialize every entry in *text* as standard BibTeX."""
    return [stringify_bibtex_entry(entry) for entry in parse_bibtex_entries(text)]


def bibtex_to_json(text: str) -> list[str]:
    """Return one flattened JSON object per entry in *text*."""
    return [
        json.dumps(flatten_bibtex_entry(entry), ensure_ascii=False)
        for entry in parse_bibtex_entries(text)
    ]


def json_to_bibtex(text: str) -> Iterator[str]:
    """Decode newline-delimited flattened entries and format each as BibTeX.

    Lines are converted lazily, so entries before a malformed line are
    yielded before the error is raised.  Blank lines are skipped; every
    other line must hold one JSON object.

    Raises
    ------
    JSONDecodeLineError
        On the first line that is not valid JSON or not a flattened
        entry.  The error names the 1-based line number.
    """
    for number, line in enumerate(_LINE_SPLIT_RE.split(text), start=1):
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as exc:
            raise JSONDecodeLineError(exc.msg, line=number) from exc
        try:
            entry = unflatten_bibtex_entry(obj)
        except JSONDecodeLineError as exc:
            raise JSONDecodeLineError(str(exc), line=number) from exc
        yield stringify_bibtex_entry(entry)


def check_bibtex(text: str) -> None:
    """Parse *text* and discard the result; raises on malformed input."""
    parse_bibtex_entries(text)


def flatten_tex(text: str) -> str:
    """Strip or resolve TeX markup, leaving plain text."""
    return node_to_text(parse_node(text))


def tex_citekeys(text: str) -> list[str]:
    """Return every citekey referenced in *text*, in document order."""
    return extract_citekeys(text)
