from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment
from minilisp.types.printer import display


def if_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    if len(tail) != 3:
        raise MiniLispArityError("Invalid number of arguments for if: expected condition, then and else")

    cond = evaluate_fn(tail[0], env, options, depth)
    # No truthiness: only T and F are conditions
    if not isinstance(cond, bool):
        raise MiniLispTypeError(f"Condition must be a boolean, found {display(cond)}")

    if cond:
        return evaluate_fn(tail[1], env, options, depth)
    return evaluate_fn(tail[2], env, options, depth)
