"""Core evaluator for the slisp interpreter.

Symbols are looked up, lists are either special forms or applications, and
every other atom evaluates to itself. Recursion follows the Python stack;
there is no tail-call elimination.
"""

from __future__ import annotations

from slisp import SExpression, LispValue
from slisp.errors import SlispSyntaxError
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol
from slisp.evaluation.apply import apply
from slisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case tuple():
            raise SlispSyntaxError("cannot evaluate a dotted list")

        case []:
            raise SlispSyntaxError("cannot evaluate empty expression ()")

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

    # --- Atoms return as-is ---
    return expr
