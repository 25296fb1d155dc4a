"""Display rendering of minilisp values.

    - Nil      -> NIL
    - integers -> decimal
    - booleans -> true / false
    - symbols  -> their name
    - lists    -> (a b c)
    - lambdas  -> Lambda(x y) (body)
"""

from __future__ import annotations

from io import StringIO

from minilisp import LispValue
from minilisp.types.nil import NilType
from minilisp.types.symbol import Symbol


def _write(obj: LispValue, buffer: StringIO) -> None:
    if isinstance(obj, NilType):
        buffer.write("NIL")
    elif isinstance(obj, bool):
        buffer.write("true" if obj else "false")
    elif isinstance(obj, (int, Symbol)):
        buffer.write(str(obj))
    elif isinstance(obj, list):
        buffer.write("(")
        for i, item in enumerate(obj):
            if i > 0:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    else:
        # Lambda renders itself through display()
        buffer.write(str(obj))


def display(obj: LispValue) -> str:
    """Render a value the way the interpreter prints results."""
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()
