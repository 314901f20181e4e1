"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from texnode import __version__
from texnode.cli import exit_codes
from texnode.cli.app import main
from texnode.exceptions import (
    BibTeXParseError,
    DependencyError,
    InputFileError,
    JSONDecodeLineError,
    ParseError,
    TeXParseError,
    TexNodeError,
    UnrecognizedCommandError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            UnrecognizedCommandError,
            DependencyError,
            InputFileError,
            ParseError,
            BibTeXParseError,
            TeXParseError,
            JSONDecodeLineError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TexNodeError]
    ) -> None:
        assert issubclass(exc_class, TexNodeError)

    @pytest.mark.parametrize(
        "exc_class", [BibTeXParseError, TeXParseError, JSONDecodeLineError],
    )
    def test_format_errors_are_parse_errors(
        self, exc_class: type[ParseError]
    ) -> None:
        assert issubclass(exc_class, ParseError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TexNodeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TexNodeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = TexNodeError("boom")
        assert err.hint is None

    def test_parse_error_prefixes_line(self) -> None:
        err = BibTeXParseError("expected '='", line=7)
        assert str(err) == "line 7: expected '='"
        assert err.line == 7

    def test_parse_error_without_line(self) -> None:
        err = JSONDecodeLineError("bad")
        assert str(err) == "bad"
        assert err.line is None

    def test_unrecognized_command_message(self) -> None:
        err = UnrecognizedCommandError("nope")
        assert str(err) == 'Unrecognized command: "nope"'
        assert err.command_id == "nope"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_broken_pipe_is_success(self) -> None:
        assert exit_codes.BROKEN_PIPE == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_usage_error_is_one(self) -> None:
        assert exit_codes.USAGE_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_help_lists_every_command_in_order(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        ids = [
            "bib-format",
            "bib-json",
            "json-bib",
            "bib-test",
            "tex-flatten",
            "tex-citekeys",
        ]
        positions = [out.index(f"  {command_id}: ") for command_id in ids]
        assert positions == sorted(positions)

    def test_missing_command_is_usage_error(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main([])
        assert code == exit_codes.USAGE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "usage: tex-node" in captured.err
        assert "Missing required argument: command" in captured.err

    def test_empty_file_list_succeeds(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["bib-format"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == ""
