# lispc/lex/__init__.py
"""lispc 토크나이저 — 한 줄짜리 s-expression을 토큰 리스트로 바꾼다.

특징
----
- 입력 한 줄을 **즉시(eager)** 전부 토큰화해서 리스트로 돌려준다.
- 실패하지 않는다: 어떤 클래스에도 맞지 않는 문자는 `INVALID` 토큰(1글자)이 되고,
  문법 오류 판정은 전적으로 파서가 맡는다.
- 공백(C의 isspace 집합)은 토큰을 만들지 않고 건너뛴다.

매칭 순서 (왼쪽→오른쪽, 탐욕적):
  1) `(` / `)`                       → LPAREN / RPAREN
  2) 숫자 또는 `-` 로 시작, 이후 숫자/`.` → NUMBER  (단독 `-` 도 NUMBER)
  3) `+ * /` (그리고 2)에 먹히지 않은 `-`) → OPERATOR
  4) 영문자로 시작, 이후 영문자/숫자      → FUNCTION
  5) 그 밖의 문자 1개                   → INVALID

API
---
- `Token(kind, lexeme, start, end)` — 토큰 단위 (불변)
- `tokenize(text, trace=None) -> List[Token]`
- `format_token(i, tok) -> str` — CLI `lex` 출력용
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from typing import Callable, List, Optional

TraceFn = Callable[[str], None]


class TokenKind:
    FUNCTION = "FUNCTION"
    NUMBER   = "NUMBER"
    OPERATOR = "OPERATOR"
    LPAREN   = "LPAREN"
    RPAREN   = "RPAREN"
    INVALID  = "INVALID"


# --------- Public datatypes ---------

@dataclass(frozen=True)
class Token:
    kind: str     # TokenKind.*
    lexeme: str   # 원문 그대로
    start: int = 0   # 0-based, 원문 오프셋
    end: int = 0

    @property
    def col(self) -> int:
        """1-based 칼럼."""
        return self.start + 1

# --------- Scanner ---------

# 순서가 곧 우선순위다. NUMBER가 OPERATOR보다 앞이라 `-`는 항상 NUMBER가 된다.
_TOKEN_SPEC = [
    ("WS",       r"[ \t\n\v\f\r]+"),
    ("LPAREN",   r"\("),
    ("RPAREN",   r"\)"),
    ("NUMBER",   r"[0-9\-][0-9.]*"),
    ("OPERATOR", r"[+*/\-]"),
    ("FUNCTION", r"[A-Za-z][A-Za-z0-9]*"),
    ("INVALID",  r"."),
]
MASTER_RE = re.compile("|".join(f"(?P<{n}>{p})" for n, p in _TOKEN_SPEC))


def tokenize(text: str, trace: Optional[TraceFn] = None) -> List[Token]:
    """`text` 전체를 토큰 리스트로 스캔한다. 예외를 던지지 않는다.

    `trace`가 주어지면 토큰마다 ``Token: KIND 'lexeme'`` 한 줄을 넘긴다.
    """
    toks: List[Token] = []
    i = 0
    while i < len(text):
        m = MASTER_RE.match(text, i)
        # 개행은 WS가, 나머지 문자는 INVALID(.)가 받으므로 m은 None이 될 수 없다
        kind = m.lastgroup or ""
        end = m.end()
        if kind != "WS":
            tok = Token(kind, m.group(0), i, end)
            toks.append(tok)
            if trace is not None:
                trace(f"Token: {tok.kind} {tok.lexeme!r}")
        i = end
    return toks


# Convenience
def format_token(i: int, tok: Token) -> str:
    return f"{i:03d}: {tok.kind:<9} {tok.lexeme!r}  @{tok.col}"
