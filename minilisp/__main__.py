"""Run the demonstration program and print its result."""

import logging
import sys

from minilisp.config import EvalOptions, get_log_level
from minilisp.errors import MiniLispError
from minilisp.interpreter import evaluate
from minilisp.types.environment import Environment
from minilisp.types.nil import NilType
from minilisp.types.printer import display

DEMO_PROGRAM = """(progn
    (define map
        (lambda (f l)
            (if (atom l)
                NIL
                (cons
                    (f (car l))
                    (map f (cdr l))
                )
            )
        )
    )
    (define K 7)
    (define mulK
        (lambda (x)
            (progn
                (define L (+ K 1))
                (* x L)
            )
        )
    )
    (map mulK '(1 2 3))
)"""


def main() -> int:
    level = get_log_level()
    if level:
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = EvalOptions.from_env()
        result = evaluate(DEMO_PROGRAM, Environment(), options)
    except (MiniLispError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not isinstance(result, NilType):
        print(display(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
