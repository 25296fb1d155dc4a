"""Binary integer operators: + - * / < > == !=

Every operator takes exactly two operands, each of which must evaluate to an
integer. Arithmetic is signed 64-bit: results outside that range raise
MiniLispOverflowError instead of silently growing or wrapping.
"""

from __future__ import annotations

import operator
from typing import Callable

from minilisp import EvaluatorFn, SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.errors import (
    MiniLispArityError,
    MiniLispOverflowError,
    MiniLispTypeError,
    MiniLispZeroDivisionError,
)
from minilisp.reader.lexer import INT64_MAX, INT64_MIN
from minilisp.types.environment import Environment
from minilisp.types.printer import display
from minilisp.types.symbol import Symbol


def is_integer(value: LispValue) -> bool:
    # bool is an int subclass in Python but a separate type in Lisp
    return isinstance(value, int) and not isinstance(value, bool)


def _check_range(op: str, n: int) -> int:
    if n < INT64_MIN or n > INT64_MAX:
        raise MiniLispOverflowError(f"Integer overflow in ({op} ...): {n} does not fit in 64 bits")
    return n


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise MiniLispZeroDivisionError("Cannot divide by 0")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}

COMPARISONS: dict[str, Callable[[int, int], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "==": operator.eq,
    "!=": operator.ne,
}


def _operand(
    side: str,
    op: str,
    expr: SExpression,
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> int:
    value = evaluate_fn(expr, env, options, depth)
    if not is_integer(value):
        raise MiniLispTypeError(
            f"{side} operand of {op} must be an integer, found {display(value)}"
        )
    return value


def make_binary_form(op: str):
    """Build the special-form handler for operator `op`."""
    if op in ARITHMETIC:
        fn = ARITHMETIC[op]

        def finish(left: int, right: int) -> LispValue:
            return _check_range(op, fn(left, right))
    else:
        finish = COMPARISONS[op]

    def binary_form(
        tail: list[SExpression],
        env: Environment,
        options: EvalOptions,
        evaluate_fn: EvaluatorFn,
        depth: int = 0,
    ) -> LispValue:
        if len(tail) != 2:
            raise MiniLispArityError(
                f"Invalid number of arguments for binary operator {op}: "
                f"expected 2, got {len(tail)}"
            )
        left = _operand("Left", op, tail[0], env, options, evaluate_fn, depth)
        right = _operand("Right", op, tail[1], env, options, evaluate_fn, depth)
        return finish(left, right)

    binary_form.__name__ = f"binary_form_{op}"
    return binary_form


BINARY_FORMS = {Symbol(op): make_binary_form(op) for op in (*ARITHMETIC, *COMPARISONS)}
