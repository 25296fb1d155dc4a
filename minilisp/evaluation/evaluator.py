"""Core evaluator for the minilisp interpreter.

Dispatches on the shape of an expression:

- Nil, integers, booleans and lambdas evaluate to themselves;
- symbols are constants (NIL, T, F) or looked up in the environment chain;
- a list headed by a special-form symbol runs that form's handler;
- a list headed by any other symbol is a user-function call;
- any other list is data: each element is evaluated and the non-Nil
  results are collected into a new list. The empty list evaluates to Nil.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.config import EvalOptions
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, NilType
from minilisp.types.symbol import Symbol
from minilisp.evaluation.apply import call_function
from minilisp.evaluation.special_forms import SPECIAL_FORMS

DEFAULT_OPTIONS = EvalOptions()

CONSTANTS: dict[Symbol, LispValue] = {
    Symbol("NIL"): Nil,
    Symbol("T"): True,
    Symbol("F"): False,
}


def evaluate(
    expr: SExpression,
    env: Environment,
    options: EvalOptions | None = None,
    depth: int = 0,
) -> LispValue:
    """Evaluate one expression in `env`.

    `depth` counts the user-function calls currently in progress; it is
    threaded through special forms so the call-depth limit holds everywhere.
    """
    if options is None:
        options = DEFAULT_OPTIONS

    match expr:
        case Symbol():
            if expr in CONSTANTS:
                return CONSTANTS[expr]
            return env.lookup(expr)

        case []:
            return Nil

        case [Symbol() as head, *tail]:
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(tail, env, options, evaluate, depth)
            return call_function(head, tail, env, options, evaluate, depth)

        case list():
            # Data list: Nil results are dropped
            results = []
            for item in expr:
                value = evaluate(item, env, options, depth)
                if not isinstance(value, NilType):
                    results.append(value)
            return results

    # --- Atoms return as-is ---
    return expr
