"""Tests for the REPL loop and the command line entry point."""

import io
import logging
from pathlib import Path

import pytest

from monkeylex.__main__ import main
from monkeylex.config import LexConfig, lex_config_context
from monkeylex.repl import start


def run_repl(text: str, config: LexConfig | None = None) -> str:
    out = io.StringIO()
    start(io.StringIO(text), out, config=config)
    return out.getvalue()


class TestRepl:
    """Test the read-scan-print loop."""

    def test_single_line(self) -> None:
        output = run_repl("let x = 5;\n")
        assert output == (
            ">> {Type:LET Literal:let}\n"
            "{Type:IDENT Literal:x}\n"
            "{Type:= Literal:=}\n"
            "{Type:INT Literal:5}\n"
            "{Type:; Literal:;}\n"
            ">> "
        )

    def test_empty_input_prints_prompt_once(self) -> None:
        assert run_repl("") == ">> "

    def test_blank_line_prints_nothing(self) -> None:
        assert run_repl("\n") == ">> >> "

    def test_multiple_lines(self) -> None:
        output = run_repl("fn\nlet\n")
        assert output == ">> {Type:FUNCTION Literal:fn}\n>> {Type:LET Literal:let}\n>> "

    def test_illegal_shown_when_lenient(self) -> None:
        assert "{Type:ILLEGAL Literal:@}" in run_repl("@\n")

    def test_strict_reports_error_and_continues(self) -> None:
        out = io.StringIO()
        err = io.StringIO()
        errors = start(io.StringIO("@\nx\n"), out, err_stream=err, config=LexConfig(strict=True))
        assert errors == 1
        assert err.getvalue() == "ERROR: 1:1 illegal character '@'\n"
        assert out.getvalue() == ">> >> {Type:IDENT Literal:x}\n>> "

    def test_lenient_returns_no_errors(self) -> None:
        err = io.StringIO()
        assert start(io.StringIO("@\n"), io.StringIO(), err_stream=err) == 0
        assert err.getvalue() == ""

    def test_custom_prompt(self) -> None:
        assert run_repl("", LexConfig(prompt="monkey> ")) == "monkey> "

    def test_uses_context_config(self) -> None:
        with lex_config_context(LexConfig(prompt="$ ")):
            assert run_repl("") == "$ "

    def test_logs_session(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="monkeylex"):
            run_repl("x\ny\n")
        assert "repl finished after 2 lines" in caplog.text


class TestMain:
    """Test python -m monkeylex."""

    def test_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "prog.mk"
        path.write_text("let a = 1;\n")
        assert main(["--file", str(path)]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "{Type:LET Literal:let}",
            "{Type:IDENT Literal:a}",
            "{Type:= Literal:=}",
            "{Type:INT Literal:1}",
            "{Type:; Literal:;}",
        ]

    def test_file_strict_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.mk"
        path.write_text("let a = #;")
        assert main(["--strict", "-f", str(path)]) == 1
        err = capsys.readouterr().err
        assert "bad.mk:1:9 illegal character '#'" in err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-f", str(tmp_path / "nope.mk")]) == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_repl_on_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
        assert main(["--prompt", "> "]) == 0
        assert capsys.readouterr().out == "> {Type:INT Literal:5}\n> "

    def test_repl_strict_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Strict REPL errors go to stderr and make the exit status 1."""
        monkeypatch.setattr("sys.stdin", io.StringIO("@\n5\n"))
        assert main(["--strict"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ">> >> {Type:INT Literal:5}\n>> "
        assert captured.err == "ERROR: 1:1 illegal character '@'\n"

    def test_repl_strict_clean_input(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("let x;\n"))
        assert main(["--strict"]) == 0
        assert capsys.readouterr().err == ""
