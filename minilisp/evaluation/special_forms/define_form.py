from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.errors import MiniLispArityError, MiniLispInvalidSymbol
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.printer import display
from minilisp.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only, never in an enclosing one.
    """
    if len(tail) != 2:
        raise MiniLispArityError("Invalid number of arguments for define: expected 2")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MiniLispInvalidSymbol(f"Invalid identifier for define: {display(name)}")
    value = evaluate_fn(val_expr, env, options, depth)
    env.define(name, value)
    return Nil
