"""Application engine for slisp.

Centralizes function application for the interpreter:
- Lisp Lambdas bind their arguments in a fresh frame over the captured
  environment and evaluate the body forms.
- Python callables registered in the environment are called as fn(env, args).
"""

from typing import Callable

from slisp import LispValue, EvaluatorFn
from slisp.errors import SlispSyntaxError
from slisp.types.environment import Environment
from slisp.types.lambda_fn import Lambda
from slisp.evaluation.special_forms.progn_form import evaluate_sequence


def apply_lambda(
    fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Lisp Lambda to already-evaluated argument values.

    Raises SlispArityError when the argument count does not match the formals.
    """
    new_env = fn.extend_env(args)
    return evaluate_sequence(fn.body, new_env, evaluate_fn)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable; anything else is an error."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        from slisp.printer import to_string
        raise SlispSyntaxError(f"invalid first argument in expression: {to_string(head)}")
