# lispc/grammar/ast.py
"""Call-expression AST
- Call: (name arg...) 한 개
- Number/Operator: 인자 자리의 단말 토큰 원문을 그대로 보존
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import List, Union

@dataclass(frozen=True)
class Number:
    text: str    # 숫자 형식 검증 없음("1.2.3", "-" 도 그대로)

@dataclass(frozen=True)
class Operator:
    text: str

@dataclass(frozen=True)
class Call:
    """
    함수 호출 하나.
    - name: FUNCTION 토큰 원문
    - args: 원문 순서 그대로의 인자 목록(중첩 Call 포함)
    """
    name: str
    args: List["Argument"] = field(default_factory=list)


Argument = Union[Number, Operator, Call]
