"""입력 로더 (한 줄 = s-expression 하나)"""

from __future__ import annotations
from pathlib    import Path
from typing     import List


def load_source_text(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8")
    return normalize_newlines(text)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> List[str]:
    """
    Split Lines
    마지막 개행 뒤의 빈 조각은 줄로 치지 않는다.
    """
    lines = normalize_newlines(text).split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
