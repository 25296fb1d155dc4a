from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.lambda_fn import Lambda

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.types.environment import Environment
from minilisp.types.printer import display
from minilisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    # (lambda (params...) body): exactly one body form, and it must be a list.
    if len(tail) != 2:
        raise MiniLispArityError("Invalid number of arguments for lambda: expected parameter list and body")

    params, body = tail
    if not isinstance(params, list):
        raise MiniLispTypeError(f"Invalid lambda: parameter list is not a list, found {display(params)}")
    for param in params:
        if not isinstance(param, Symbol):
            raise MiniLispTypeError(f"Invalid lambda parameter: not a symbol, found {display(param)}")
    if not isinstance(body, list):
        raise MiniLispTypeError(f"Invalid lambda: body is not a list, found {display(body)}")

    return Lambda(list(params), body, env)
