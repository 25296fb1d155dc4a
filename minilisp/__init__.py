# Core type aliases for minilisp's data model.
# Plain Python values represent both code (forms) and runtime values:
# int for integers, bool for T/F, Symbol for identifiers, list for lists,
# the Nil singleton for NIL, and Lambda for function values.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the interpreter does not distinguish them.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

from minilisp.errors import MiniLispError  # noqa: E402
from minilisp.types.environment import Environment  # noqa: E402
from minilisp.types.printer import display  # noqa: E402
from minilisp.interpreter import evaluate, Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "MiniLispError",
    "Environment",
    "display",
    "evaluate",
    "Interpreter",
]
