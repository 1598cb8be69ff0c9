from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.types.environment import Environment
from slisp.types.nil import Nil


def evaluate_sequence(
    forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate `forms` in order and return the last value (Nil if empty)."""
    result: LispValue = Nil
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # begin opens its own scope: defines inside it do not leak out
    return evaluate_sequence(tail, Environment(outer=env), evaluate_fn)


def module_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(module e...) evaluates each form in the current scope and returns nil."""
    evaluate_sequence(tail, env, evaluate_fn)
    return Nil
