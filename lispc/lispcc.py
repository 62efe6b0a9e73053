# lispc/lispcc.py
"""lispcc – lispc CLI

사용 예)
    $ python -m lispc.lispcc repl
    $ python -m lispc.lispcc convert --text "(add 1 (mul 2 3))" -D
    $ python -m lispc.lispcc convert --input exprs.txt
    $ python -m lispc.lispcc lex --text "(add -1 2)"

기능
----
- repl    : 한 줄씩 입력받아 변환 결과를 출력 ('exit' 입력 시 종료)
- convert : 텍스트/파일의 각 줄을 독립적으로 변환
- lex     : 각 줄의 토큰 목록을 출력

디버그 모드(-D/--debug)를 켜면 토큰/인자 트레이스를 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Iterator, List, Optional

from .convert import convert
from .grammar.loader import load_source_text, split_lines
from .lex import TraceFn, format_token, tokenize

PROMPT = "\nEnter a LISP expression (or type 'exit' to stop): "
EXIT_COMMAND = "exit"

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _trace_to_stderr(line: str) -> None:
    _eprint("[TRACE] " + line)


def _tracer(debug: bool) -> Optional[TraceFn]:
    return _trace_to_stderr if debug else None


def _read_source_lines(args) -> List[str]:
    """--text 또는 --input 에서 줄 목록을 얻는다."""
    if args.text is not None:
        return split_lines(args.text)
    return split_lines(load_source_text(args.input))


def _prompt_lines(prompt: str) -> Iterator[str]:
    """EOF 또는 'exit' 까지 한 줄씩."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        if line == EXIT_COMMAND:
            return
        yield line

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_repl(args) -> int:
    trace = _tracer(args.debug)
    for line in _prompt_lines(PROMPT):
        print(f"LISP Expression: {line}")
        res = convert(line, trace=trace)
        if res.ok:
            print(f"C Expression: {res.output}")
        else:
            # 실패해도 다음 줄을 계속 받는다
            print(f"Error: {res.message}")
            if args.debug:
                _eprint(f"[DEBUG] error kind={res.error}")
    return 0


def cmd_convert(args) -> int:
    try:
        lines = _read_source_lines(args)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    trace = _tracer(args.debug)
    failed = 0
    for n, line in enumerate(lines, start=1):
        res = convert(line, trace=trace)
        if res.ok:
            print(res.output)
        else:
            failed += 1
            _eprint(f"[ERROR] line {n}: {res.error}: {res.message}")

    if args.debug:
        _eprint(f"[DEBUG] lines={len(lines)} ok={len(lines) - failed} failed={failed}")
    return 2 if failed else 0


def cmd_lex(args) -> int:
    """각 줄을 토크나이즈해 결과를 표준출력으로 보여줍니다."""
    try:
        lines = _read_source_lines(args)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    for n, line in enumerate(lines, start=1):
        if len(lines) > 1:
            print(f"# line {n}")
        for i, tok in enumerate(tokenize(line)):
            print(format_token(i, tok))
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_source_args(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="직접 입력 텍스트")
    src_group.add_argument("--input", help="입력 텍스트 파일 경로(한 줄에 식 하나)")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="lispcc", description="LISP s-expression to C-style call converter")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_repl = sub.add_parser("repl", help="대화형으로 한 줄씩 변환합니다('exit'로 종료)")
    p_repl.add_argument("-D", "--debug", action="store_true", help="토큰/인자 트레이스를 출력")
    p_repl.set_defaults(func=cmd_repl)

    p_conv = sub.add_parser("convert", help="텍스트/파일의 각 줄을 변환합니다")
    _add_source_args(p_conv)
    p_conv.add_argument("-D", "--debug", action="store_true", help="토큰/인자 트레이스를 출력")
    p_conv.set_defaults(func=cmd_convert)

    p_lex = sub.add_parser("lex", help="입력 텍스트를 토크나이즈합니다")
    _add_source_args(p_lex)
    p_lex.set_defaults(func=cmd_lex)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
