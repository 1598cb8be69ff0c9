from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError
from slisp.types.cons import Cons
from slisp.types.environment import Environment


def as_data(expr: SExpression) -> LispValue:
    """Turn reader output into runtime data: code lists become Cons chains."""
    if isinstance(expr, list):
        return Cons.from_iterable(as_data(item) for item in expr)
    if isinstance(expr, tuple):
        items, tail = expr
        return Cons.from_iterable((as_data(item) for item in items), as_data(tail))
    return expr


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SlispArityError("quote expects exactly 1 argument")
    return as_data(tail[0])
