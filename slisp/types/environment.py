"""Runtime environment for slisp.

The Environment stores bindings of Symbols to evaluated Lisp values and
supports nested scopes via an `outer` link. Closures keep a reference to the
Environment they were created in, so `set` through any frame is seen by every
closure sharing it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from slisp import LispValue
from slisp.errors import SlispInvalidSymbol, SlispUnboundSymbol
from slisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing outer frames.

        Raises SlispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SlispInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SlispUnboundSymbol if the symbol is not found.
        """
        if not isinstance(name, Symbol):
            raise SlispInvalidSymbol(f"Cannot set {name!r}: not a symbol")
        env = self.find(name)
        if env is None:
            raise SlispUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        env = self.find(name)
        if env is None:
            raise SlispUnboundSymbol(f"variable {name} not found")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
