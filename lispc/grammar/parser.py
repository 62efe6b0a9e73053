"""lispc s-expression 파서
- expression   := '(' functionCall
- functionCall := FUNCTION argument* ')'
- argument     := NUMBER | OPERATOR | '(' expression ')'

한 토큰 선읽기(la) + 한 토큰 소비(eat_any), 백트래킹 없음.
중첩 '(' 하나당 재귀 한 단계.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..codegen.emit_call import emit_call
from ..lex import Token, TokenKind, TraceFn
from .ast import Argument, Call, Number, Operator


class ErrorKind:
    INVALID_EXPRESSION_START      = "InvalidExpressionStart"
    EXPECTED_FUNCTION_NAME        = "ExpectedFunctionName"
    UNEXPECTED_TOKEN_IN_ARGUMENTS = "UnexpectedTokenInArguments"
    UNEXPECTED_TRAILING_TOKEN     = "UnexpectedTrailingToken"
    NESTING_TOO_DEEP              = "NestingTooDeep"


_MESSAGES = {
    ErrorKind.INVALID_EXPRESSION_START:      "Invalid expression start",
    ErrorKind.EXPECTED_FUNCTION_NAME:        "Expected function name",
    ErrorKind.UNEXPECTED_TOKEN_IN_ARGUMENTS: "Unexpected token inside arguments",
    ErrorKind.UNEXPECTED_TRAILING_TOKEN:     "Unexpected token at the end",
    ErrorKind.NESTING_TOO_DEEP:              "Expression nested too deeply",
}


class ParseError(SyntaxError):
    """문법 오류 1건. `kind`는 ErrorKind 값, `token`은 문제 토큰(끝이면 센티널).
    방출 단계의 깊이 초과처럼 짚을 토큰이 없으면 token=None."""

    def __init__(self, kind: str, token: Optional[Token] = None, src: Optional[str] = None):
        self.kind = kind
        self.token = token
        msg = _MESSAGES[kind]
        if token is not None:
            if token.lexeme:
                msg += f": got {token.kind} {token.lexeme!r} at col {token.col}"
            else:
                msg += ": got end of input"
            if src is not None:
                msg += "\n" + _snippet_with_caret(src, token.start)
        super().__init__(msg)


@dataclass(frozen=True)
class ParseResult:
    """parse/convert 결과. 성공이면 output, 실패면 error(ErrorKind)와 message."""
    output: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------- error handling utils ----------
def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """pos가 속한 라인의 [시작, 끝) 범위"""
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return start, end

def _snippet_with_caret(src: str, pos: int) -> str:
    """절대 위치 pos에 캐럿(^)"""
    start, end = _line_bounds(src, pos)
    caret = " " * (pos - start) + "^"
    return f"{src[start:end]}\n{caret}"

# --- 토큰 스트림(커서) ---
class _TS:
    def __init__(self, toks: List[Token], src: Optional[str]):
        self.toks = toks
        self.i = 0
        self.src = src
        n = len(src) if src is not None else (toks[-1].end if toks else 0)
        self.eof = Token(TokenKind.INVALID, "", n, n)   # "토큰 없음" 센티널

    def la(self) -> Token:
        if self.i < len(self.toks):
            return self.toks[self.i]
        return self.eof

    def eat_any(self) -> Token:
        """현재 토큰 종류 무관 소비. 끝이면 센티널을 돌려주고 커서는 그대로."""
        t = self.la()
        if self.i < len(self.toks):
            self.i += 1
        return t

    def at_end(self) -> bool:
        return self.i >= len(self.toks)

    def error(self, kind: str, tok: Token) -> ParseError:
        return ParseError(kind, tok, self.src)


# --- 파싱 ---
def parse_tokens(tokens: List[Token], *, src: Optional[str] = None,
                 trace: Optional[TraceFn] = None) -> Optional[Call]:
    """토큰 리스트를 Call 트리로 파싱한다. 빈 입력이면 None.
    문법 오류는 `ParseError`로 던진다.

    중첩 한 단계가 재귀 한 단계라서, 파이썬 재귀 한도에 닿는 깊이(기본 한도
    1000에서 약 250단계)를 넘으면 NESTING_TOO_DEEP 오류가 된다."""
    if not tokens:
        return None
    ts = _TS(tokens, src)
    try:
        call = _parse_expression(ts, trace)
    except RecursionError:
        # 커서는 가장 깊이 들어간 지점에 멈춰 있다
        raise ts.error(ErrorKind.NESTING_TOO_DEEP, ts.la()) from None
    if not ts.at_end():
        raise ts.error(ErrorKind.UNEXPECTED_TRAILING_TOKEN, ts.la())
    return call


def render(call: Optional[Call]) -> str:
    """Call 트리를 문자열로. None(빈 입력)이면 빈 문자열."""
    if call is None:
        return ""
    try:
        return emit_call(call)
    except RecursionError:
        raise ParseError(ErrorKind.NESTING_TOO_DEEP) from None


def parse(tokens: List[Token], *, src: Optional[str] = None,
          trace: Optional[TraceFn] = None) -> ParseResult:
    """파싱 + 방출을 한 번에. 오류는 예외 대신 ParseResult로 돌려준다."""
    try:
        output = render(parse_tokens(tokens, src=src, trace=trace))
    except ParseError as e:
        return ParseResult(error=e.kind, message=str(e))
    return ParseResult(output=output)


def _parse_expression(ts: _TS, trace: Optional[TraceFn]) -> Call:
    t = ts.la()
    if t.kind != TokenKind.LPAREN:
        raise ts.error(ErrorKind.INVALID_EXPRESSION_START, t)
    ts.eat_any()  # '('
    return _parse_function_call(ts, trace)

def _parse_function_call(ts: _TS, trace: Optional[TraceFn]) -> Call:
    name_tok = ts.eat_any()
    if name_tok.kind != TokenKind.FUNCTION:
        raise ts.error(ErrorKind.EXPECTED_FUNCTION_NAME, name_tok)
    if trace is not None:
        trace(f"Function Call: {name_tok.lexeme}(")
    return Call(name_tok.lexeme, _parse_arguments(ts, trace))

def _parse_arguments(ts: _TS, trace: Optional[TraceFn]) -> List[Argument]:
    """')' 를 만날 때까지 인자를 모은다. ')' 는 여기서 소비."""
    args: List[Argument] = []
    while True:
        t = ts.la()
        if t.kind == TokenKind.RPAREN:
            ts.eat_any()
            return args

        if t.kind == TokenKind.NUMBER:
            args.append(Number(ts.eat_any().lexeme))
            if trace is not None:
                trace(f"Argument: {t.lexeme}")
        elif t.kind == TokenKind.OPERATOR:
            args.append(Operator(ts.eat_any().lexeme))
            if trace is not None:
                trace(f"Operator: {t.lexeme}")
        elif t.kind == TokenKind.LPAREN:
            args.append(_parse_expression(ts, trace))
        else:
            raise ts.error(ErrorKind.UNEXPECTED_TOKEN_IN_ARGUMENTS, t)
