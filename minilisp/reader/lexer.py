"""
  Lisp tokenizer

- Parentheses and the quote marker are split off even when glued to
  neighbouring characters: "(+ 1 '(2))" lexes the same as "( + 1 ' ( 2 ) )".
- Every remaining whitespace-separated word is an integer (base 10, optional
  sign, signed 64-bit range) or else a symbol, taken verbatim.
- There are no strings, comments or escapes, so lexing never fails.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Union

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Token kinds
INTEGER = "integer"
SYMBOL = "symbol"
LPAREN = "lparen"
RPAREN = "rparen"
QUOTE = "quote"

_DELIMITERS = {
    "(": LPAREN,
    ")": RPAREN,
    "'": QUOTE,
}


class Token(NamedTuple):
    kind: str
    value: Optional[Union[int, str]] = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind})"
        return f"Token({self.kind}, {self.value!r})"


def parse_integer(word: str) -> Optional[int]:
    """Return the signed 64-bit integer spelled by `word`, or None."""
    if not INTEGER_RE.fullmatch(word):
        return None
    n = int(word)
    if n < INT64_MIN or n > INT64_MAX:
        return None
    return n


def lex(source: str) -> list[Token]:
    """Split `source` into a flat list of tokens."""
    for delim in _DELIMITERS:
        source = source.replace(delim, f" {delim} ")

    tokens: list[Token] = []
    for word in source.split():
        kind = _DELIMITERS.get(word)
        if kind is not None:
            tokens.append(Token(kind))
            continue
        n = parse_integer(word)
        if n is not None:
            tokens.append(Token(INTEGER, n))
        else:
            tokens.append(Token(SYMBOL, word))
    return tokens
