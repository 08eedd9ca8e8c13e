"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

import main


class TestMain:
    def test_converts_arguments(self, capsys) -> None:
        assert main.main(["60502", "six hundred, sixty five"]) == 0
        out = capsys.readouterr().out
        assert "sixty thousand, five hundred and two" in out
        assert "665" in out

    def test_failure_sets_exit_code(self, capsys) -> None:
        assert main.main(["sixty frobnicate two"]) == 1
        out = capsys.readouterr().out
        assert "UNRECOGNIZED_TOKEN" in out
        assert "frobnicate" in out

    def test_samples_include_both_failure_kinds(self, capsys) -> None:
        assert main.main([]) == 1
        out = capsys.readouterr().out
        assert "OUT_OF_RANGE" in out
        assert "UNRECOGNIZED_TOKEN" in out
        assert "2 of 11 value(s) failed" in out

    def test_help(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main.main(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert out.startswith("usage:")
        assert "values" in out

    def test_parsed_text_beyond_spelling_range(self, capsys) -> None:
        assert main.main(["nine hundred and ninety nine quadrillion"]) == 0
        assert "999,000,000,000,000,000" in capsys.readouterr().out
