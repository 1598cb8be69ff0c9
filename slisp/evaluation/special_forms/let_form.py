from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispSyntaxError
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol
from slisp.evaluation.special_forms.progn_form import evaluate_sequence


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((a 5) (b (+ a 1))) body...)

    Bindings are evaluated in order inside the new frame, so each one can
    refer to the bindings before it.
    """
    if not tail:
        raise SlispArityError("let requires a binding list")
    bindings, *body = tail
    if not isinstance(bindings, list):
        raise SlispSyntaxError("invalid args for let")

    local_env = Environment(outer=env)
    for binding in bindings:
        if (
            not isinstance(binding, list)
            or len(binding) != 2
            or not isinstance(binding[0], Symbol)
        ):
            raise SlispSyntaxError(f"invalid binding for let: {binding!r}")
        name, expr = binding
        local_env.define(name, evaluate_fn(expr, local_env))
    return evaluate_sequence(body, local_env, evaluate_fn)
