from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispSyntaxError
from slisp.types.environment import Environment
from slisp.types.lambda_fn import Lambda
from slisp.types.symbol import Symbol


def make_lambda(
    params: SExpression, body: list[SExpression], env: Environment
) -> Lambda:
    if not isinstance(params, list):
        raise SlispSyntaxError("invalid arg list for lambda")
    for p in params:
        if not isinstance(p, Symbol):
            raise SlispSyntaxError(f"non symbol arg in lambda {p!r}")
    if len(set(params)) != len(params):
        raise SlispSyntaxError("duplicate parameter name in lambda")
    # An empty body is allowed; calling such a lambda yields nil.
    return Lambda(list(params), list(body), env)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise SlispArityError("lambda requires at least a parameter list")
    return make_lambda(tail[0], tail[1:], env)
