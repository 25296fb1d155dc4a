from copy import deepcopy

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    """(quote x) returns x unevaluated; lists come back as fresh copies."""
    if len(tail) != 1:
        raise MiniLispArityError("Invalid number of arguments for quote: expected 1")
    return deepcopy(tail[0])
