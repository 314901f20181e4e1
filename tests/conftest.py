"""Shared pytest fixtures and configuration for the tex-node test suite.

Guidelines
----------
* Input files are written under ``tmp_path`` — never read fixtures from
  the working tree.
* Tests that go through :func:`texnode.cli.app.cli` must use
  ``no_signal_handlers`` so the test process keeps pytest's own SIGINT
  handling.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

VALID_BIB = """\
@article{smith2020,
  author = {Smith, Jane},
  title = {A {Study} of Things},
  year = 2020,
}
"""

VALID2_BIB = """\
@book{doe2019,
  author = "Doe, John",
  title = "Collected Works",
}
"""

MALFORMED_BIB = """\
@article{broken2021,
  title = {Never closed,
  year = 2021,
"""


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], str]:
    """Return a helper that writes *content* to ``tmp_path/name`` and returns the path."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def no_signal_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent the lifecycle guard from replacing the SIGINT handler."""
    from texnode.cli import lifecycle

    monkeypatch.setattr(lifecycle, "install_signal_handlers", lambda: False)


@pytest.fixture
def bib_batch(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Write ``valid.bib``, ``malformed.bib``, ``valid2.bib`` and chdir into them.

    Returned paths are relative, so diagnostics naming them are exact.
    """
    (tmp_path / "valid.bib").write_text(VALID_BIB, encoding="utf-8")
    (tmp_path / "malformed.bib").write_text(MALFORMED_BIB, encoding="utf-8")
    (tmp_path / "valid2.bib").write_text(VALID2_BIB, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return ["valid.bib", "malformed.bib", "valid2.bib"]
