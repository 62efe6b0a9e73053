"""lispc: prefix s-expression → call-expression converter.

    >>> convert("(add 1 (mul 2 3))").output
    'add(1, (mul(2, 3)))'
"""

from .convert import convert, convert_or_raise
from .grammar.ast import Call, Number, Operator
from .grammar.parser import ErrorKind, ParseError, ParseResult, parse, parse_tokens, render
from .lex import Token, TokenKind, tokenize
