"""Domain models for tex-node.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Bibliography
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BibTeXEntry:
    """A single bibliography record."""

    pubtype: str
    """Lower-cased entry type (e.g. ``article``, ``book``)."""

    citekey: str
    """Citation key, case preserved."""

    fields: dict[str, str] = field(default_factory=dict)
    """Lower-cased field name → value, in source order."""


# ---------------------------------------------------------------------------
# TeX node tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextNode:
    """A run of literal text."""

    text: str


@dataclass(frozen=True, slots=True)
class MacroNode:
    """A control sequence, stored without its leading backslash.

    ``\\emph`` has name ``"emph"``; the control symbol ``\\&`` has name
    ``"&"``.  Arguments are not attached — they are the following
    sibling nodes.
    """

    name: str


@dataclass(frozen=True, slots=True)
class GroupNode:
    """A brace-delimited group, or the document root."""

    children: tuple[TextNode | MacroNode | GroupNode, ...] = ()


Node = TextNode | MacroNode | GroupNode


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A named transformation applied to one input path at a time.

    ``run`` is side-effecting: it writes its results to stdout and any
    diagnostics to stderr.
    """

    id: str
    description: str
    run: Callable[[str], None]


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """What the user asked for, as parsed from the command line."""

    command_id: str
    file_paths: tuple[str, ...]
    verbose: bool = False
