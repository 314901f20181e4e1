"""Infrastructure: reading input files.

This module is the **only** place that opens input files.  Raw
``OSError`` is mapped to :class:`~texnode.exceptions.InputFileError`.
Bytes that are not valid UTF-8 decode to U+FFFD instead of failing, so
legacy Latin-1 bibliographies still reach the parser.
"""

from __future__ import annotations

from pathlib import Path

from texnode.exceptions import InputFileError

ENCODING = "utf-8"
DECODE_ERRORS = "replace"


def read_text(path: str) -> str:
    """Return the full contents of *path* decoded as UTF-8.

    Raises
    ------
    InputFileError
        If *path* does not exist, is not a regular file, or cannot be read.
    """
    try:
        return Path(path).read_text(encoding=ENCODING, errors=DECODE_ERRORS)
    except FileNotFoundError as exc:
        raise InputFileError(
            f"No such file: {path}",
            hint="Check the path; files are read relative to the current directory.",
        ) from exc
    except IsADirectoryError as exc:
        raise InputFileError(f"Is a directory: {path}") from exc
    except OSError as exc:
        raise InputFileError(f"Cannot read {path}: {exc.strerror or exc}") from exc
