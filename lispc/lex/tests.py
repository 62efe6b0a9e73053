from __future__ import annotations
from typing import List, Tuple

import pytest

from . import Token, TokenKind, format_token, tokenize


def _kinds(src: str) -> List[Tuple[str, str]]:
    return [(t.kind, t.lexeme) for t in tokenize(src)]


def test_tokens_basic():
    assert _kinds("(add 1 2)") == [
        ("LPAREN", "("),
        ("FUNCTION", "add"),
        ("NUMBER", "1"),
        ("NUMBER", "2"),
        ("RPAREN", ")"),
    ]


def test_whitespace_is_skipped():
    assert _kinds(" \t(f\n 1 )\r") == _kinds("(f 1)")
    assert tokenize("") == []
    assert tokenize("   \t ") == []
    assert _kinds("(f\v1\f\n2)") == _kinds("(f 1 2)")


def test_every_character_is_consumed():
    # C isspace 밖의 줄 구분 문자는 공백이 아니라 INVALID 한 글자
    assert _kinds("1\u20282") == [("NUMBER", "1"), ("INVALID", "\u2028"), ("NUMBER", "2")]
    assert "".join(t.lexeme for t in tokenize("(a\n#\n)")) == "(a#)"


def test_number_shapes_are_not_validated():
    assert _kinds("1.2.3 -7 -1.5 42.") == [
        ("NUMBER", "1.2.3"),
        ("NUMBER", "-7"),
        ("NUMBER", "-1.5"),
        ("NUMBER", "42."),
    ]


def test_lone_minus_is_a_number():
    assert _kinds("(sub 1 - 2)")[3] == ("NUMBER", "-")
    assert _kinds("--5") == [("NUMBER", "-"), ("NUMBER", "-5")]


@pytest.mark.parametrize("op", ["+", "*", "/"])
def test_operators(op):
    assert _kinds(op) == [("OPERATOR", op)]


def test_identifiers_letters_then_alnum():
    assert _kinds("f2x add_1") == [
        ("FUNCTION", "f2x"),
        ("FUNCTION", "add"),
        ("INVALID", "_"),
        ("NUMBER", "1"),
    ]
    # 숫자로 시작하면 식별자가 아니다
    assert _kinds("1a") == [("NUMBER", "1"), ("FUNCTION", "a")]


def test_unknown_chars_become_single_invalid_tokens():
    assert _kinds("#@") == [("INVALID", "#"), ("INVALID", "@")]
    assert _kinds("é") == [("INVALID", "é")]


def test_positions():
    toks = tokenize("(add  12)")
    assert [(t.start, t.end) for t in toks] == [(0, 1), (1, 4), (6, 8), (8, 9)]
    assert toks[2].col == 7


def test_trace_sees_every_token():
    lines: List[str] = []
    toks = tokenize("(add 1)", lines.append)
    assert lines == [
        "Token: LPAREN '('",
        "Token: FUNCTION 'add'",
        "Token: NUMBER '1'",
        "Token: RPAREN ')'",
    ]
    assert toks == tokenize("(add 1)")


def test_format_token():
    tok = Token(TokenKind.NUMBER, "-1", 5, 7)
    assert format_token(3, tok) == "003: NUMBER    '-1'  @6"


def main() -> None:
    for src in ["(add 1 2)", "(add -1 (mul 2 3))", "(sub 1 - 2)", "(f # x)"]:
        print(f"\n[{src}]")
        for i, tok in enumerate(tokenize(src)):
            print("  " + format_token(i, tok))


if __name__ == "__main__":
    main()
