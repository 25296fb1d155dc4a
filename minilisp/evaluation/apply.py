"""Application engine for minilisp.

Calls a user-defined Lambda named by the head symbol of a list:
- the head must be bound to a Lambda, otherwise the call is rejected;
- the argument count must match the parameter count exactly;
- arguments are evaluated left to right in the caller's environment;
- the body runs in a new frame extending the lambda's defining environment
  (lexical scoping) or the caller's environment (dynamic scoping).
"""

from __future__ import annotations

import logging

from minilisp import LispValue, EvaluatorFn, SExpression
from minilisp.config import EvalOptions
from minilisp.errors import (
    MiniLispArityError,
    MiniLispRecursionError,
    MiniLispTypeError,
    MiniLispUnboundSymbol,
)
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.printer import display
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def resolve_function(name: Symbol, env: Environment) -> Lambda:
    """Look up `name` and check that it is bound to a Lambda."""
    frame = env.find(name)
    if frame is None:
        raise MiniLispUnboundSymbol(f"Unbound function: {name}")
    fn = frame.vars[name]
    if not isinstance(fn, Lambda):
        raise MiniLispTypeError(f"Not callable: {name} is bound to {display(fn)}")
    return fn


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int,
    name: str | None = None,
) -> LispValue:
    """Apply `fn` to already-evaluated `args` and return the body's value."""
    if depth >= options.max_depth:
        label = name if name is not None else "lambda"
        raise MiniLispRecursionError(
            f"Maximum call depth of {options.max_depth} exceeded calling {label}"
        )
    parent = fn.env if options.lexical else caller_env
    frame = fn.extend_env(args, parent, name)
    return evaluate_fn(fn.body, frame, options, depth + 1)


def call_function(
    name: Symbol,
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Evaluate the call (name arg...) in `env`."""
    fn = resolve_function(name, env)
    if len(tail) != fn.arity:
        raise MiniLispArityError(
            f"Invalid call of function `{name}`: expected {fn.arity} argument(s), got {len(tail)}"
        )
    args = [evaluate_fn(arg, env, options, depth) for arg in tail]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Calling %s with %d argument(s) at depth %d (caller frame depth %d)",
                     name, len(args), depth, env.depth())
    return apply_lambda(fn, args, env, options, evaluate_fn, depth, str(name))
