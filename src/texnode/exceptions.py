"""Custom exception hierarchy for tex-node.

Every error that crosses a layer boundary inherits from
:class:`TexNodeError`.  Raw ``OSError`` from file access must never
escape the infrastructure layer — it is re-raised as
:class:`InputFileError`.

Hierarchy
---------
TexNodeError
├── UsageError
│   └── UnrecognizedCommandError
├── DependencyError
├── InputFileError
├── ReservedFieldError
└── ParseError
    ├── BibTeXParseError
    ├── TeXParseError
    └── JSONDecodeLineError
"""

from __future__ import annotations


class TexNodeError(Exception):
    """Base exception for all tex-node errors.

    The CLI error boundary renders any subclass as a one-line message
    (plus optional hint) instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation -------------------------------------------------------------

class UsageError(TexNodeError):
    """Raised when the command line cannot be turned into a request."""


class UnrecognizedCommandError(UsageError):
    """Raised when the requested command id is not registered."""

    def __init__(self, command_id: str) -> None:
        super().__init__(f'Unrecognized command: "{command_id}"')
        self.command_id: str = command_id


# --- Environment ------------------------------------------------------------

class DependencyError(TexNodeError):
    """Raised when an optional runtime dependency is not available."""


# --- Input files ------------------------------------------------------------

class InputFileError(TexNodeError):
    """Raised when an input file is missing or unreadable."""


# --- Conversion -------------------------------------------------------------

class ReservedFieldError(TexNodeError):
    """Raised when an entry field name collides with a flattened identity key."""


# --- Parsing ----------------------------------------------------------------

class ParseError(TexNodeError):
    """Base class for malformed-input errors raised by the format transforms.

    ``line`` is the 1-based line number where the problem was detected,
    or ``None`` when not applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        hint: str | None = None,
    ) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message, hint=hint)
        self.line: int | None = line


class BibTeXParseError(ParseError):
    """Raised when BibTeX source cannot be parsed into entries."""


class TeXParseError(ParseError):
    """Raised when TeX source cannot be parsed into a node tree."""


class JSONDecodeLineError(ParseError):
    """Raised when a line of flattened-entry JSON cannot be decoded."""
