"""
  Lisp parser

Builds one rooted expression from a token list:

    - integers -> int
    - symbols  -> Symbol
    - lists    -> Python list
    - 'x       -> [Symbol("quote"), x]

The token list is reversed and used as a stack. Open lists are tracked on an
explicit stack instead of the Python call stack, so deeply nested source does
not hit the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from minilisp import SExpression
from minilisp.errors import MiniLispSyntaxError
from minilisp.reader.lexer import Token, lex, INTEGER, SYMBOL, LPAREN, RPAREN, QUOTE
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

QUOTE_SYMBOL = Symbol("quote")


class _OpenList:
    """A list being filled; `quoted` wraps it in (quote ...) when it closes."""

    __slots__ = ("items", "quoted")

    def __init__(self, quoted: bool = False):
        self.items: list[SExpression] = []
        self.quoted = quoted

    def close(self) -> SExpression:
        if self.quoted:
            return [QUOTE_SYMBOL, self.items]
        return self.items


def _atom(token: Token) -> SExpression:
    if token.kind == INTEGER:
        return token.value
    return Symbol(token.value)


def parse_tokens(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse a token sequence into the root list.

    The first token must open a list. Missing closing parentheses at the end
    of input close every open list; tokens after the root list closes are
    ignored. A trailing quote marker with nothing after it is dropped.
    """
    stack: list[Token] = list(tokens)
    stack.reverse()

    first: Optional[Token] = stack.pop() if stack else None
    if first is None or first.kind != LPAREN:
        found = "end of input" if first is None else repr(first)
        raise MiniLispSyntaxError(f"Expected '(', found {found}")

    open_lists: list[_OpenList] = [_OpenList()]

    while stack:
        token = stack.pop()
        current = open_lists[-1]

        if token.kind in (INTEGER, SYMBOL):
            current.items.append(_atom(token))
        elif token.kind == LPAREN:
            open_lists.append(_OpenList())
        elif token.kind == RPAREN:
            done = open_lists.pop().close()
            if not open_lists:
                if stack:
                    logger.debug("Ignoring %d token(s) after the root list", len(stack))
                return done
            open_lists[-1].items.append(done)
        elif token.kind == QUOTE:
            if not stack:
                break
            target = stack.pop()
            if target.kind in (INTEGER, SYMBOL):
                current.items.append([QUOTE_SYMBOL, _atom(target)])
            elif target.kind == LPAREN:
                open_lists.append(_OpenList(quoted=True))
            else:
                raise MiniLispSyntaxError(f"Invalid quote: cannot quote {target!r}")
        else:  # pragma: no cover - lex() only emits the kinds above
            raise MiniLispSyntaxError(f"Unknown token: {token!r}")

    # Input ran out with lists still open: close them from the inside out
    while len(open_lists) > 1:
        done = open_lists.pop().close()
        open_lists[-1].items.append(done)
    return open_lists[0].close()


def parse_program(source: str) -> list[SExpression]:
    """Tokenize and parse `source` into its root expression."""
    tokens = lex(source)
    expr = parse_tokens(tokens)
    logger.debug("Parsed %d token(s) into a root list of %d element(s)", len(tokens), len(expr))
    return expr
