from __future__ import annotations

from typing import ClassVar


class Symbol:
    """A Lisp symbol. Interned: every spelling maps to exactly one instance,
    so identity and equality coincide."""

    __slots__ = ("id",)

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = name
            cls._table[name] = sym
        return sym

    def __reduce__(self):
        return (Symbol, (self.id,))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
