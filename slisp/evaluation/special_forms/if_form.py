from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispValueError
from slisp.types.environment import Environment
from slisp.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SlispArityError("if requires a condition, a then-expression and an optional else")

    predicate = evaluate_fn(tail[0], env)
    if not isinstance(predicate, bool):
        raise SlispValueError("predicate must evaluate to boolean")

    if predicate:
        return evaluate_fn(tail[1], env)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env)
    return Nil
