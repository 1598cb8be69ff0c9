"""Render slisp values and forms as Lisp source text."""

from __future__ import annotations

from io import StringIO

from slisp import LispValue
from slisp.errors import SlispRuntimeError
from slisp.types.cons import Cons
from slisp.types.lambda_fn import Lambda
from slisp.types.nil import NilType
from slisp.types.symbol import Symbol

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _write_string(buffer: StringIO, s: str) -> None:
    buffer.write('"')
    buffer.write("".join(STRING_ESCAPES.get(ch, ch) for ch in s))
    buffer.write('"')


def _write(buffer: StringIO, obj: LispValue) -> None:
    if obj is True:
        buffer.write("#t")
    elif obj is False:
        buffer.write("#f")
    elif isinstance(obj, NilType):
        buffer.write("#nil")
    elif isinstance(obj, str):
        _write_string(buffer, obj)
    elif isinstance(obj, Symbol):
        buffer.write(obj.id)
    elif isinstance(obj, Cons):
        buffer.write("(")
        cell: LispValue = obj
        first = True
        while isinstance(cell, Cons):
            if not first:
                buffer.write(" ")
            _write(buffer, cell.car)
            first = False
            cell = cell.cdr
        if not isinstance(cell, NilType):
            buffer.write(" . ")
            _write(buffer, cell)
        buffer.write(")")
    elif isinstance(obj, list):
        # unevaluated code
        buffer.write("(")
        for i, item in enumerate(obj):
            if i:
                buffer.write(" ")
            _write(buffer, item)
        buffer.write(")")
    elif isinstance(obj, tuple):
        # unevaluated dotted list
        items, tail = obj
        buffer.write("(")
        for item in items:
            _write(buffer, item)
            buffer.write(" ")
        buffer.write(". ")
        _write(buffer, tail)
        buffer.write(")")
    elif isinstance(obj, Lambda):
        buffer.write("(lambda (")
        buffer.write(" ".join(f.id for f in obj.formals))
        buffer.write(")")
        for form in obj.body:
            buffer.write(" ")
            _write(buffer, form)
        buffer.write(")")
    elif callable(obj):
        from slisp.builtin.env_builtin import builtin_name
        name = builtin_name(obj) or getattr(obj, "__name__", "?")
        buffer.write(f"#<builtin {name}>")
    else:
        try:
            buffer.write(repr(obj))
        except ValueError as ex:
            raise SlispRuntimeError(f"cannot print value: {ex}")


def to_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, obj)
        return buffer.getvalue()
