from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

Scoping = Literal["lexical", "dynamic"]

_SCOPING_MODES = ("lexical", "dynamic")

# Defaults
DEFAULT_MAX_DEPTH = 200
DEFAULT_SCOPING: Scoping = "lexical"


@dataclass(frozen=True)
class EvalOptions:
    """Knobs that change how the evaluator runs a program.

    - max_depth: number of nested user-function calls allowed before the
      evaluator gives up with MiniLispRecursionError.
    - scoping: "lexical" extends the lambda's defining environment on call,
      "dynamic" extends the caller's environment instead.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    scoping: Scoping = DEFAULT_SCOPING

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.scoping not in _SCOPING_MODES:
            raise ValueError(
                f"scoping must be one of {', '.join(_SCOPING_MODES)}, got {self.scoping!r}"
            )

    @property
    def lexical(self) -> bool:
        return self.scoping == "lexical"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EvalOptions:
        """Build options from MINILISP_MAX_DEPTH and MINILISP_SCOPING."""
        if environ is None:
            environ = os.environ
        raw_depth = environ.get("MINILISP_MAX_DEPTH", "").strip()
        raw_scoping = environ.get("MINILISP_SCOPING", "").strip().lower()
        try:
            max_depth = int(raw_depth) if raw_depth else DEFAULT_MAX_DEPTH
        except ValueError:
            raise ValueError(f"MINILISP_MAX_DEPTH must be an integer, got {raw_depth!r}") from None
        return cls(max_depth=max_depth, scoping=raw_scoping or DEFAULT_SCOPING)


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Log level requested through MINILISP_LOG_LEVEL, if any."""
    if environ is None:
        environ = os.environ
    raw = environ.get("MINILISP_LOG_LEVEL", "").strip()
    return raw.upper() or None
