"""Core layer — pure format transforms, domain models, and the command table.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from texnode.core.bibtex import (
    flatten_bibtex_entry,
    parse_bibtex_entries,
    stringify_bibtex_entry,
    unflatten_bibtex_entry,
)
from texnode.core.models import (
    BibTeXEntry,
    Command,
    GroupNode,
    InvocationRequest,
    MacroNode,
    TextNode,
)
from texnode.core.registry import CommandRegistry
from texnode.core.tex import extract_citekeys, node_to_text, parse_node

__all__: list[str] = [
    "BibTeXEntry",
    "Command",
    "CommandRegistry",
    "GroupNode",
    "InvocationRequest",
    "MacroNode",
    "TextNode",
    "extract_citekeys",
    "flatten_bibtex_entry",
    "node_to_text",
    "parse_bibtex_entries",
    "parse_node",
    "stringify_bibtex_entry",
    "unflatten_bibtex_entry",
]
