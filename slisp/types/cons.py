"""Pair cells for runtime list data."""

from __future__ import annotations

from typing import Iterable, Iterator

from slisp import LispValue
from slisp.types.nil import Nil


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but #t/#f are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Lisp equality: numbers across int/float, pairs structurally, other values by kind."""
    while isinstance(a, Cons) and isinstance(b, Cons):
        if not values_equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    if is_number(a) and is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b


class Cons:
    """A pair of two values. Proper lists are chains of Cons ending in Nil."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
        """Build a list from `items`; returns `tail` (Nil) for an empty iterable."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def is_proper(self) -> bool:
        cell: LispValue = self
        while isinstance(cell, Cons):
            cell = cell.cdr
        return cell is Nil

    def __iter__(self) -> Iterator[LispValue]:
        """Yield the elements of the list; an improper tail is not yielded."""
        cell: LispValue = self
        while isinstance(cell, Cons):
            yield cell.car
            cell = cell.cdr

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        return values_equal(self, other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        from slisp.printer import to_string
        return to_string(self)
