"""Closure representation and argument binding for slisp."""

from __future__ import annotations

from slisp import SExpression, LispValue
from slisp.errors import SlispArityError
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol


class Lambda:
    """A first-class closure with formal parameters, body forms, and captured env."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        self.env: Environment = env
        # set by define so error messages can name the function
        self.name = name

    def __str__(self) -> str:
        from slisp.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values to the formal parameters in a fresh frame whose
        outer is the captured environment.
        """
        if len(args) != len(self.formals):
            label = self.name or "lambda"
            raise SlispArityError(
                f"{label} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        local_env = Environment(outer=self.env)
        for formal, value in zip(self.formals, args):
            local_env.define(formal, value)
        return local_env
