"""Special form: cond, the multi-branch conditional.

(cond (test body...) ...) evaluates each test in order; the first one that
yields #t has its body evaluated and the last value returned. A clause whose
test is the symbol `else` always matches. Tests must produce booleans.
"""

from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispRuntimeError, SlispSyntaxError, SlispValueError
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol
from slisp.evaluation.special_forms.progn_form import evaluate_sequence

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    for clause in tail:
        if not isinstance(clause, list) or not clause:
            raise SlispSyntaxError(f"invalid clause in cond: {clause!r}")
        test, *body = clause
        if test == ELSE:
            matched = True
        else:
            matched = evaluate_fn(test, env)
            if not isinstance(matched, bool):
                raise SlispValueError("predicate must evaluate to boolean")
        if matched:
            if not body:
                return matched
            return evaluate_sequence(body, env, evaluate_fn)
    raise SlispRuntimeError("cond: all predicates false")
