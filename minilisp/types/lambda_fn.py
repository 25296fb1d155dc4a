"""Lambda function representation and argument binding for minilisp."""

from __future__ import annotations

import logging
from io import StringIO

from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.printer import display
from minilisp.types.symbol import Symbol
from minilisp.errors import MiniLispArityError

logger = logging.getLogger(__name__)


class Lambda:
    """A first-class lambda with formal parameters, a body, and its defining env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env
        logger.debug("Lambda created: %d formal(s), env_id=%s", len(formals), id(env))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("Lambda(")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(display(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda ({' '.join(str(f) for f in self.formals)})>"

    def __eq__(self, other: object) -> bool:
        # Same params and body closed over the same frame
        return (
            isinstance(other, Lambda)
            and self.env is other.env
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None  # type: ignore[assignment]

    # Function values are immutable; quoted copies share the instance
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def arity(self) -> int:
        return len(self.formals)

    def extend_env(
        self, args: list[LispValue], parent: Environment, name: str | None = None
    ) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters in a
        new frame whose parent is `parent`, and return that frame.
        """
        if len(args) != len(self.formals):
            label = f"`{name}`" if name is not None else "lambda"
            raise MiniLispArityError(
                f"Invalid call of function {label}: expected {len(self.formals)} "
                f"argument(s), got {len(args)}"
            )
        frame = parent.extend()
        for formal, value in zip(self.formals, args):
            frame.define(formal, value)
        return frame
