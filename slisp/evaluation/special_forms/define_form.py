from loguru import logger

from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispInvalidSymbol
from slisp.types.environment import Environment
from slisp.types.lambda_fn import Lambda
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol
from slisp.evaluation.special_forms.lambda_form import make_lambda


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name formals...) body...)  ; shorthand for a named lambda
    """
    if len(tail) < 2:
        raise SlispArityError("define requires a name and a value")

    target = tail[0]
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise SlispInvalidSymbol("first argument to define has to be symbol")
        name = target[0]
        value = make_lambda(target[1:], tail[1:], env)
    else:
        if len(tail) != 2:
            raise SlispArityError("define requires exactly 2 arguments")
        if not isinstance(target, Symbol):
            raise SlispInvalidSymbol("first argument to define has to be symbol")
        name = target
        value = evaluate_fn(tail[1], env)

    if isinstance(value, Lambda) and value.name is None:
        value.name = str(name)
    env.define(name, value)
    if env.outer is None:
        logger.debug("defined {}", name)
    return Nil
