from __future__ import annotations
import io
import sys
from pathlib import Path

import pytest

from . import ErrorKind, ParseError, convert, convert_or_raise
from .lispcc import main


# ---- convert ----

def test_convert_examples():
    assert convert("(add 1 2)").output == "add(1, 2)"
    assert convert("(add 1 (mul 2 3))").output == "add(1, (mul(2, 3)))"
    assert convert("").output == ""
    assert convert("()").error == ErrorKind.EXPECTED_FUNCTION_NAME


def test_convert_trace_covers_tokens_then_arguments():
    lines = []
    convert("(f 1)", trace=lines.append)
    assert lines == [
        "Token: LPAREN '('",
        "Token: FUNCTION 'f'",
        "Token: NUMBER '1'",
        "Token: RPAREN ')'",
        "Function Call: f(",
        "Argument: 1",
    ]


def test_convert_or_raise():
    assert convert_or_raise("(add -1 2)") == "add(-1, 2)"
    assert convert_or_raise(" ") == ""
    with pytest.raises(ParseError) as e:
        convert_or_raise("add 1 2")
    assert e.value.kind == ErrorKind.INVALID_EXPRESSION_START


# ---- CLI ----

def _feed_stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_cli_repl_until_exit(monkeypatch, capsys):
    _feed_stdin(monkeypatch, "(add 1 2)\n()\nexit\n(never 1)\n")
    assert main(["repl"]) == 0
    out = capsys.readouterr().out
    assert "LISP Expression: (add 1 2)" in out
    assert "C Expression: add(1, 2)" in out
    assert "Error: Expected function name" in out
    assert "never" not in out


def test_cli_repl_survives_too_deep_nesting(monkeypatch, capsys):
    depth = sys.getrecursionlimit()
    deep = "(f 1 " * depth + ")" * depth
    _feed_stdin(monkeypatch, deep + "\n(add 1 2)\nexit\n")
    assert main(["repl"]) == 0
    out = capsys.readouterr().out
    assert "Error: Expression nested too deeply" in out
    assert "C Expression: add(1, 2)" in out


def test_convert_or_raise_too_deep():
    depth = sys.getrecursionlimit()
    with pytest.raises(ParseError) as e:
        convert_or_raise("(f " * depth + ")" * depth)
    assert e.value.kind == ErrorKind.NESTING_TOO_DEEP


def test_cli_repl_stops_at_eof(monkeypatch, capsys):
    _feed_stdin(monkeypatch, "(f (g 1))\n")
    assert main(["repl"]) == 0
    assert "C Expression: f((g(1)))" in capsys.readouterr().out


def test_cli_repl_debug_traces_to_stderr(monkeypatch, capsys):
    _feed_stdin(monkeypatch, "(f 1)\nexit\n")
    assert main(["repl", "-D"]) == 0
    captured = capsys.readouterr()
    assert "[TRACE] Token: FUNCTION 'f'" in captured.err
    assert "[TRACE] Argument: 1" in captured.err
    assert "[TRACE]" not in captured.out


def test_cli_convert_text(capsys):
    assert main(["convert", "--text", "(add 1 (mul 2 3))"]) == 0
    assert capsys.readouterr().out.splitlines() == ["add(1, (mul(2, 3)))"]


def test_cli_convert_file_continues_after_error(tmp_path: Path, capsys):
    p = tmp_path / "exprs.txt"
    p.write_text("(add 1 2)\r\n(add 1 2) extra\n(sub 3 4)\n", encoding="utf-8")
    assert main(["convert", "--input", str(p)]) == 2
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["add(1, 2)", "sub(3, 4)"]
    assert captured.err.startswith(
        "[ERROR] line 2: UnexpectedTrailingToken: Unexpected token at the end: got FUNCTION 'extra'"
    )


def test_cli_convert_missing_file(tmp_path: Path, capsys):
    assert main(["convert", "--input", str(tmp_path / "nope.txt")]) == 2
    assert "[ERROR] FileNotFoundError" in capsys.readouterr().err


def test_cli_lex(capsys):
    assert main(["lex", "--text", "(add -1)"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "000: LPAREN    '('  @1",
        "001: FUNCTION  'add'  @2",
        "002: NUMBER    '-1'  @6",
        "003: RPAREN    ')'  @8",
    ]


def main_smoke() -> None:
    for src in ["(add 1 2)", "(add 1 (mul 2 3))", "(add -1 2)", "add 1 2", "()", "(add 1 2) extra"]:
        res = convert(src)
        print(f"{src!r:24} -> {res.output if res.ok else res.error}")


if __name__ == "__main__":
    main_smoke()
