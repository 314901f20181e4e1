"""BibTeX parsing, serialization, and JSON flattening.

Parsing is delegated to pybtex's BibTeX reader in strict mode, so any
malformed ``@`` block raises instead of being skipped.  Everything else
here is a **pure** transformation over strings and
:class:`~texnode.core.models.BibTeXEntry` values — no I/O.

What the reader accepts:

* Anything outside an ``@`` block is treated as a comment.
* ``@type{key, name = value, ...}`` or ``@type(key, ...)``.
* ``@comment`` and ``@preamble`` blocks are skipped.
* ``@string{name = value}`` defines a macro usable in later values;
  the month abbreviations ``jan`` .. ``dec`` are predefined.
* Values are ``{braced}``, ``"quoted"``, bare numbers, or macro names,
  optionally joined with ``#``.
"""

from __future__ import annotations

from typing import Any

from pybtex.database.input.bibtex import Parser
from pybtex.exceptions import PybtexError

from texnode.core.models import BibTeXEntry
from texnode.exceptions import (
    BibTeXParseError,
    JSONDecodeLineError,
    ReservedFieldError,
)

FLAT_PUBTYPE_KEY = "pubtype"
FLAT_CITEKEY_KEY = "citekey"


def _parse_error(exc: PybtexError) -> BibTeXParseError:
    """Translate a pybtex error, moving its line number into ``line``."""
    line = getattr(exc, "lineno", None)
    message = str(exc)
    if line is not None:
        message = message.replace(f" in line {line}", "", 1)
    return BibTeXParseError(message, line=line)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_bibtex_entries(text: str) -> list[BibTeXEntry]:
    """Parse BibTeX source into entries, in source order.

    Type and field names are lower-cased; citekeys keep their case.
    Name lists (``author``, ``editor``) stay plain text.

    Raises
    ------
    BibTeXParseError
        On any malformed ``@`` block, undefined macro, repeated field,
        or repeated citekey.  The message carries the line number where
        parsing stopped when pybtex reports one.
    """
    parser = Parser(person_fields=())
    try:
        data = parser.parse_string(text)
    except PybtexError as exc:
        raise _parse_error(exc) from exc

    return [
        BibTeXEntry(
            pubtype=entry.type.lower(),
            citekey=str(key),
            fields={str(name).lower(): str(value) for name, value in entry.fields.items()},
        )
        for key, entry in data.entries.items()
    ]


def stringify_bibtex_entry(entry: BibTeXEntry) -> str:
    """Serialize *entry* as standard BibTeX (no trailing newline)."""
    lines = [f"@{entry.pubtype}{{{entry.citekey},"]
    lines.extend(f"  {name} = {{{value}}}," for name, value in entry.fields.items())
    lines.append("}")
    return "\n".join(lines)


def flatten_bibtex_entry(entry: BibTeXEntry) -> dict[str, str]:
    """Return ``{"pubtype", "citekey", **fields}`` for JSON output.

    Raises
    ------
    ReservedFieldError
        If the entry has a field named ``pubtype`` or ``citekey``; it
        would be indistinguishable from the identity keys.
    """
    for reserved in (FLAT_PUBTYPE_KEY, FLAT_CITEKEY_KEY):
        if reserved in entry.fields:
            raise ReservedFieldError(
                f"entry {entry.citekey!r} has a field named {reserved!r}, "
                "which clashes with the JSON identity key",
                hint=f"Rename the {reserved!r} field before converting to JSON.",
            )
    return {
        FLAT_PUBTYPE_KEY: entry.pubtype,
        FLAT_CITEKEY_KEY: entry.citekey,
        **entry.fields,
    }


def unflatten_bibtex_entry(obj: Any) -> BibTeXEntry:
    """Rebuild a :class:`BibTeXEntry` from its flattened form.

    Raises
    ------
    JSONDecodeLineError
        If *obj* is not an object, lacks ``pubtype`` / ``citekey``, or
        holds a value that is not a string or number.
    """
    if not isinstance(obj, dict):
        raise JSONDecodeLineError(
            f"expected a JSON object, got {type(obj).__name__}",
        )

    fields: dict[str, str] = {}
    for key, value in obj.items():
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise JSONDecodeLineError(
                f"field {key!r} must be a string or number, got {type(value).__name__}",
            )
        fields[str(key).lower()] = str(value)

    pubtype = fields.pop(FLAT_PUBTYPE_KEY, "")
    citekey = fields.pop(FLAT_CITEKEY_KEY, "")
    if not pubtype or not citekey:
        raise JSONDecodeLineError(
            "flattened entry requires non-empty 'pubtype' and 'citekey'",
        )
    return BibTeXEntry(pubtype=pubtype.lower(), citekey=citekey, fields=fields)
