from __future__ import annotations
import sys
from pathlib import Path
from typing import Callable, Literal

from loguru import logger

from slisp import SExpression, LispValue
from slisp.config import get_recursion_limit
from slisp.errors import SlispRuntimeError
from slisp.reader.parser import lex, TokenStream
from slisp.types.environment import Environment
from slisp.types.nil import Nil
from slisp.builtin.env_builtin import register


class Interpreter:
    """
    Orchestrates reading and evaluating slisp code.
    Keeps one global Environment across calls, so definitions persist.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        if eval_fn is None:
            from slisp.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = Environment()
        register(self.env)

        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)
        # integers print and read at any length
        sys.set_int_max_str_digits(0)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from slisp.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def _eval_forms(self, code: str) -> LispValue:
        result: LispValue = Nil
        stream = TokenStream(lex(code))
        try:
            while (expr := stream.parse_expr()) is not None:
                result = self.eval_fn(expr, self.env)
        except RecursionError:
            raise SlispRuntimeError("maximum recursion depth exceeded") from None
        return result

    def eval_prelude(self, code: str) -> None:
        self._eval_forms(code)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; returns the last value (Nil if none)."""
        return self._eval_forms(code)

    def eval_file(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.debug("evaluating file {}", path)
        return self._eval_forms(path.read_text(encoding='utf-8'))
