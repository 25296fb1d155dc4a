from __future__ import annotations

import logging
import sys
from typing import Optional

from minilisp import LispValue
from minilisp.config import EvalOptions
from minilisp.errors import MiniLispRecursionError
from minilisp.evaluation.evaluator import DEFAULT_OPTIONS, evaluate as evaluate_expr
from minilisp.reader.parser import parse_program
from minilisp.types.environment import Environment

logger = logging.getLogger(__name__)

# Python frames one nested user-function call can hold open
# (evaluate -> call_function -> apply_lambda -> evaluate -> form handler -> ...)
FRAMES_PER_CALL = 12
# Ceiling on the Python recursion limit; past it the C stack is at risk
MAX_RECURSION_LIMIT = 10000


def recursion_limit_for(options: EvalOptions, current: int) -> int:
    """Python recursion limit that lets `options.max_depth` calls nest."""
    wanted = current + options.max_depth * FRAMES_PER_CALL
    return max(current, min(wanted, MAX_RECURSION_LIMIT))


def evaluate(
    source: str,
    env: Optional[Environment] = None,
    options: Optional[EvalOptions] = None,
) -> LispValue:
    """Parse `source` and evaluate its root form in `env`.

    Bindings made by top-level `define`s land in `env`, so reusing the same
    environment across calls lets later programs see earlier definitions.
    Raises a MiniLispError subclass on any parse or evaluation failure.

    The Python recursion limit is raised for the duration of the call so
    that `options.max_depth`, not the Python stack, bounds nesting.
    """
    if env is None:
        env = Environment()
    if options is None:
        options = DEFAULT_OPTIONS
    expr = parse_program(source)

    previous = sys.getrecursionlimit()
    limit = recursion_limit_for(options, previous)
    if limit != previous:
        logger.debug("Raising recursion limit from %d to %d", previous, limit)
        sys.setrecursionlimit(limit)
    try:
        return evaluate_expr(expr, env, options)
    except RecursionError:
        # The Python stack ran out before the configured call-depth limit
        raise MiniLispRecursionError("Maximum recursion depth exceeded during evaluation") from None
    finally:
        if limit != previous:
            sys.setrecursionlimit(previous)


class Interpreter:
    """
    Holds a root environment and evaluation options across calls,
    so a session can feed programs one at a time.
    """

    def __init__(self, options: Optional[EvalOptions] = None):
        self.options: EvalOptions = options if options is not None else EvalOptions.from_env()
        self.env: Environment = Environment()

    def eval(self, code: str) -> LispValue:
        return evaluate(code, self.env, self.options)

    def reset(self) -> None:
        """Drop every binding made so far."""
        logger.debug("Resetting interpreter environment (%d binding(s))", len(self.env.vars))
        self.env = Environment()
