from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


def progn_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env, options, depth)
    return result
