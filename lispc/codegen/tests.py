from __future__ import annotations

import pytest

from ..grammar.ast import Call, Number, Operator
from .emit_call import emit_argument, emit_call


def test_emit_flat_call():
    assert emit_call(Call("add", [Number("1"), Operator("+"), Number("-2")])) == "add(1, +, -2)"
    assert emit_call(Call("nop")) == "nop()"


def test_nested_call_gets_extra_parens():
    inner = Call("mul", [Number("2"), Number("3")])
    assert emit_argument(inner) == "(mul(2, 3))"
    assert emit_call(Call("add", [Number("1"), inner])) == "add(1, (mul(2, 3)))"


def test_unknown_node_raises():
    with pytest.raises(TypeError):
        emit_argument("1")  # type: ignore[arg-type]


def main() -> None:
    tree = Call("add", [Number("1"), Call("mul", [Number("2"), Number("3")])])
    print(repr(tree))
    print(emit_call(tree))


if __name__ == "__main__":
    main()
