# lispc/convert.py
"""한 줄 변환 진입점: tokenize → parse(+emit)."""

from __future__ import annotations
from typing import Optional

from .grammar.parser import ParseResult, parse, parse_tokens, render
from .lex import TraceFn, tokenize


def convert(text: str, *, trace: Optional[TraceFn] = None) -> ParseResult:
    """s-expression 한 줄을 호출식 문자열로 바꾼다. 오류는 ParseResult.error로."""
    tokens = tokenize(text, trace)
    return parse(tokens, src=text, trace=trace)


def convert_or_raise(text: str, *, trace: Optional[TraceFn] = None) -> str:
    """convert와 같지만 실패하면 ParseError를 던진다."""
    return render(parse_tokens(tokenize(text, trace), src=text, trace=trace))
