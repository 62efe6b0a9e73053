# lispc/codegen/emit_call.py
"""Call-expression Emit.

- `Call` 트리를 받아 `name(arg, arg, ...)` 형태의 문자열을 만든다.
- 인자 자리의 중첩 Call은 자기 괄호 외에 **한 겹 더** 감싼다:
  `(add 1 (mul 2 3))` → `add(1, (mul(2, 3)))`
"""

from __future__ import annotations
from ..grammar.ast import Argument, Call, Number, Operator

ARG_SEP = ", "


def emit_call(call: Call) -> str:
    return f"{call.name}({ARG_SEP.join(emit_argument(a) for a in call.args)})"


def emit_argument(arg: Argument) -> str:
    if isinstance(arg, (Number, Operator)):
        return arg.text
    if isinstance(arg, Call):
        return "(" + emit_call(arg) + ")"
    raise TypeError(f"emit_call: unknown argument node {type(arg).__name__}")
