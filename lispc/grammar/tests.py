from __future__ import annotations
import sys
from typing import List

import pytest

from ..lex import Token, TokenKind, tokenize
from .ast import Call, Number, Operator
from .parser import ErrorKind, ParseError, ParseResult, parse, parse_tokens, render


def _convert(src: str) -> ParseResult:
    return parse(tokenize(src), src=src)


# ---- 성공 케이스 ----

@pytest.mark.parametrize("src, expected", [
    ("(add 1 2)", "add(1, 2)"),
    ("(add 1 (mul 2 3))", "add(1, (mul(2, 3)))"),
    ("(add -1 2)", "add(-1, 2)"),
    ("(add)", "add()"),
    ("(f 1 + 2 * 3 / 4)", "f(1, +, 2, *, 3, /, 4)"),
    ("(sub 1 - 2)", "sub(1, -, 2)"),
    ("(v 1.2.3)", "v(1.2.3)"),
    ("(f (g (h 1)))", "f((g((h(1)))))"),
    ("(f (g) 2)", "f((g()), 2)"),
    ("  ( add   1\t2 )  ", "add(1, 2)"),
])
def test_converts(src, expected):
    res = _convert(src)
    assert res.ok, res.message
    assert res.output == expected


def test_empty_input_is_empty_string():
    assert parse([]) == ParseResult(output="")
    assert _convert("   ").output == ""


def test_flat_call_has_no_trailing_separator():
    args = ["1", "+", "-2", "3.5", "/"]
    res = _convert("(f " + " ".join(args) + ")")
    assert res.output == "f(" + ", ".join(args) + ")"


# ---- 오류 케이스 ----

@pytest.mark.parametrize("src, kind", [
    ("add 1 2", ErrorKind.INVALID_EXPRESSION_START),
    ("1", ErrorKind.INVALID_EXPRESSION_START),
    (")", ErrorKind.INVALID_EXPRESSION_START),
    ("()", ErrorKind.EXPECTED_FUNCTION_NAME),
    ("(1 2)", ErrorKind.EXPECTED_FUNCTION_NAME),
    ("(", ErrorKind.EXPECTED_FUNCTION_NAME),
    ("(add 1 (2))", ErrorKind.EXPECTED_FUNCTION_NAME),
    ("(add 1 2", ErrorKind.UNEXPECTED_TOKEN_IN_ARGUMENTS),
    ("(add 1 # 2)", ErrorKind.UNEXPECTED_TOKEN_IN_ARGUMENTS),
    ("(add x)", ErrorKind.UNEXPECTED_TOKEN_IN_ARGUMENTS),
    ("(add 1 2) extra", ErrorKind.UNEXPECTED_TRAILING_TOKEN),
    ("(add 1 2))", ErrorKind.UNEXPECTED_TRAILING_TOKEN),
    ("(f 1)(g 2)", ErrorKind.UNEXPECTED_TRAILING_TOKEN),
])
def test_error_kinds(src, kind):
    res = _convert(src)
    assert not res.ok
    assert res.output is None
    assert res.error == kind


def test_deterministic():
    for src in ["(add 1 (mul 2 3))", "(add 1 2) extra", ""]:
        assert _convert(src) == _convert(src)


def test_error_message_points_at_token():
    res = _convert("(add 1 2) extra")
    assert res.message == (
        "Unexpected token at the end: got FUNCTION 'extra' at col 11\n"
        "(add 1 2) extra\n"
        "          ^"
    )


def test_error_message_at_end_of_input():
    with pytest.raises(ParseError) as e:
        parse_tokens(tokenize("(add 1"), src="(add 1")
    assert e.value.kind == ErrorKind.UNEXPECTED_TOKEN_IN_ARGUMENTS
    assert e.value.token.lexeme == ""
    assert str(e.value).startswith("Unexpected token inside arguments: got end of input")


def _nested(depth: int) -> str:
    return "(f 1 " * depth + ")" * depth


def test_moderate_nesting_converts():
    res = _convert(_nested(50))
    assert res.ok, res.message
    assert res.output == "f(1, (" * 49 + "f(1)" + "))" * 49


def test_too_deep_nesting_is_an_error_not_a_crash():
    src = _nested(sys.getrecursionlimit())
    res = _convert(src)
    assert res.error == ErrorKind.NESTING_TOO_DEEP
    assert res.message.startswith("Expression nested too deeply: got ")
    # 한 번 실패해도 다음 변환에는 영향이 없다
    assert _convert("(add 1 2)").output == "add(1, 2)"


def test_render_too_deep_tree():
    tree = Call("h")
    for _ in range(sys.getrecursionlimit()):
        tree = Call("f", [tree])
    with pytest.raises(ParseError) as e:
        render(tree)
    assert e.value.kind == ErrorKind.NESTING_TOO_DEEP
    assert e.value.token is None
    assert str(e.value) == "Expression nested too deeply"
    assert render(None) == ""


def test_parse_error_is_syntax_error():
    with pytest.raises(SyntaxError):
        parse_tokens(tokenize("()"))


def test_parse_tokens_builds_tree():
    tree = parse_tokens(tokenize("(add 1 + (mul 2 3))"))
    assert tree == Call("add", [
        Number("1"),
        Operator("+"),
        Call("mul", [Number("2"), Number("3")]),
    ])
    assert parse_tokens([]) is None


def test_parse_without_source_text():
    toks = [Token(TokenKind.LPAREN, "(", 0, 1), Token(TokenKind.RPAREN, ")", 1, 2)]
    res = parse(toks)
    assert res.error == ErrorKind.EXPECTED_FUNCTION_NAME
    assert "\n" not in res.message


def test_trace_reports_calls_and_arguments():
    lines: List[str] = []
    parse(tokenize("(add 1 + (mul 2 3))"), trace=lines.append)
    assert lines == [
        "Function Call: add(",
        "Argument: 1",
        "Operator: +",
        "Function Call: mul(",
        "Argument: 2",
        "Argument: 3",
    ]


def main() -> None:
    ok_inputs = ["(add 1 2)", "(add 1 (mul 2 3))", "(add -1 2)", "(add)"]
    bad_inputs = ["add 1 2", "()", "(add 1 2) extra", "(add 1 # 2)"]

    print("\n[OK cases]")
    for s in ok_inputs:
        print(f"  {s!r} -> {_convert(s).output!r}")

    print("\n[ERROR cases]")
    for s in bad_inputs:
        res = _convert(s)
        print(f"  {s!r} -> {res.error}\n{res.message}")


if __name__ == "__main__":
    main()
