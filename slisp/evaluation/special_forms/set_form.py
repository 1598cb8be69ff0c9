from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispInvalidSymbol, SlispArityError
from slisp.types.environment import Environment
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise SlispArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SlispInvalidSymbol("first argument to set! has to be symbol")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Nil
