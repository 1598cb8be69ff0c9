"""Built-in functions for the slisp runtime environment.

This module defines arithmetic, comparison and pair primitives exposed to Lisp
code, plus the `register` helper that installs them into an Environment.
Every primitive has the signature fn(env, args).
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from slisp import LispValue
from slisp.errors import SlispArityError, SlispRuntimeError, SlispValueError
from slisp.types.cons import Cons, is_number, values_equal
from slisp.types.environment import Environment
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise SlispArityError(f"{name} requires exactly {expected} argument(s), got {len(args)}")


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for a in args:
        if not is_number(a):
            raise SlispValueError(f"wrong type for {name}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    try:
        return reduce(operator.add, _numbers("+", args), 0)
    except OverflowError as ex:
        raise SlispRuntimeError(f"+: {ex}")


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract the rest from the first; unary negation for one arg."""
    if not args:
        raise SlispArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    try:
        return reduce(operator.sub, args)
    except OverflowError as ex:
        raise SlispRuntimeError(f"-: {ex}")


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    try:
        return reduce(operator.mul, _numbers("*", args), 1)
    except OverflowError as ex:
        raise SlispRuntimeError(f"*: {ex}")


def div(env: Environment, args: list[LispValue]) -> float:
    """Divide the first by the rest; reciprocal for one arg. Always a float."""
    if not args:
        raise SlispArityError("/ requires at least 1 argument")
    _numbers("/", args)
    if len(args) == 1:
        args = [1, *args]
    try:
        return reduce(operator.truediv, args[1:], float(args[0]))
    except ZeroDivisionError:
        raise SlispRuntimeError("division by zero")
    except OverflowError as ex:
        raise SlispRuntimeError(f"/: {ex}")


def power(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("pow", args, 2)
    base, exponent = _numbers("pow", args)
    if isinstance(base, int) and isinstance(exponent, int) and exponent >= 0:
        return base ** exponent
    try:
        return math.pow(base, exponent)
    except ZeroDivisionError:
        raise SlispRuntimeError("division by zero in pow")
    except (OverflowError, ValueError) as ex:
        raise SlispRuntimeError(f"pow: {ex}")


def exponential(env: Environment, args: list[LispValue]) -> float:
    _check_arity("exp", args, 1)
    (x,) = _numbers("exp", args)
    try:
        return math.exp(x)
    except OverflowError:
        raise SlispRuntimeError(f"exp: overflow for {x}")


# -------------------------------
# Comparison
# -------------------------------
def _kind(value: LispValue) -> type | None:
    if is_number(value):
        return float
    if isinstance(value, (bool, str)):
        return type(value)
    return None


def _ordered(op: Callable[[LispValue, LispValue], bool]) -> Callable[[LispValue, LispValue], bool]:
    """Lift `op` so values of different or unordered kinds compare false."""
    def compare(a: LispValue, b: LispValue) -> bool:
        kind = _kind(a)
        return kind is not None and kind is _kind(b) and op(a, b)
    return compare


def _chain(pred: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        return all(pred(a, b) for a, b in zip(args, args[1:]))
    return compare


equals = _chain(values_equal)
lt = _chain(_ordered(operator.lt))
gt = _chain(_ordered(operator.gt))
lte = _chain(_ordered(operator.le))
gte = _chain(_ordered(operator.ge))


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Cons:
    _check_arity("cons", args, 2)
    return Cons(args[0], args[1])


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("car", args, 1)
    pair = args[0]
    if not isinstance(pair, Cons):
        raise SlispValueError("car on non cons type")
    return pair.car


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("cdr", args, 1)
    pair = args[0]
    if not isinstance(pair, Cons):
        raise SlispValueError("cdr on non cons type")
    return pair.cdr


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return Cons.from_iterable(args)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    'pow': power,
    'exp': exponential,
    '=': equals,
    '<': lt,
    '>': gt,
    '<=': lte,
    '>=': gte,
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'list': list_builtin,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})


def builtin_name(fn: object) -> str | None:
    """Return the Lisp name a primitive is registered under, if any."""
    for name, candidate in BUILTINS.items():
        if candidate is fn:
            return name
    return None
