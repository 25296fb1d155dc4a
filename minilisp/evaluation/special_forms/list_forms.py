"""List primitives: atom, cons, car, cdr.

Lists are Python lists and are never mutated in place: cons and cdr build new
lists so that a quoted literal inside a function body stays intact between calls.
"""

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, NilType
from minilisp.types.printer import display
from minilisp.types.symbol import Symbol


def _single_operand(name: str, tail: list[SExpression]) -> SExpression:
    if len(tail) != 1:
        raise MiniLispArityError(f"Invalid number of arguments for {name}: expected 1, got {len(tail)}")
    return tail[0]


def atom_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    value = evaluate_fn(_single_operand("atom", tail), env, options, depth)
    # bool is covered by int
    return isinstance(value, (NilType, int, Symbol))


def cons_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    if len(tail) != 2:
        raise MiniLispArityError(f"Invalid number of arguments for cons: expected 2, got {len(tail)}")

    head = evaluate_fn(tail[0], env, options, depth)
    rest = evaluate_fn(tail[1], env, options, depth)
    if isinstance(rest, list):
        return [head, *rest]
    if isinstance(rest, NilType):
        return [head]
    raise MiniLispTypeError(f"Second argument of cons should be list or NIL, found {display(rest)}")


def car_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    value = evaluate_fn(_single_operand("car", tail), env, options, depth)
    if not isinstance(value, list):
        raise MiniLispTypeError(f"Invalid car: argument is not a list, found {display(value)}")
    if not value:
        raise MiniLispTypeError("Invalid car: argument is an empty list")
    return value[0]


def cdr_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    value = evaluate_fn(_single_operand("cdr", tail), env, options, depth)
    if not isinstance(value, list):
        raise MiniLispTypeError(f"Invalid cdr: argument is not a list, found {display(value)}")
    return value[1:] or Nil
